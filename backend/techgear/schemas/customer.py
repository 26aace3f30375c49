"""Customer Schemas — contact-info update body.

Invariants:
    - Only email, phone and address are writable through the API
    - At least one of them must be present
"""

from pydantic import BaseModel, Field, model_validator

CONTACT_FIELDS = ("email", "phone", "address")


class CustomerContactUpdate(BaseModel):
    """Contact fields for PUT /customers/{id}; omitted fields stay unchanged."""
    email: str | None = Field(None, max_length=254)
    phone: str | None = Field(None, max_length=50)
    address: str | None = Field(None, max_length=2000)

    @model_validator(mode="after")
    def require_one_field(self):
        if not self.model_fields_set & set(CONTACT_FIELDS):
            raise ValueError("at least one of email, phone, address is required")
        return self

    def changes(self) -> dict:
        """Fields supplied by the client, ready for an UPDATE ... SET."""
        return self.model_dump(include=set(CONTACT_FIELDS), exclude_unset=True)
