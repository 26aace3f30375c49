"""Product Schemas — request bodies, listing filters and write responses.

Invariants:
    - ProductWrite.name is stripped and non-empty
    - price and stock_quantity are non-negative
    - PriceRange bounds are optional and independent; when both are given
      min_price <= max_price

Design Decisions:
    - ProductWrite serves both POST and PUT: the legacy API writes every column on update
    - Response field productId keeps the legacy camelCase name
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ProductWrite(BaseModel):
    """Product body for create and full update."""
    manufacturer_id: int = Field(ge=1)
    name: str = Field(min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)
    price: float = Field(ge=0)
    stock_quantity: int = Field(ge=0)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class PriceRange(BaseModel):
    """Optional price bounds for the product listing."""
    model_config = ConfigDict(frozen=True)

    min_price: float | None = None
    max_price: float | None = None

    @model_validator(mode="after")
    def check_order(self):
        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            raise ValueError("minPrice cannot be greater than maxPrice")
        return self


class ProductCreated(BaseModel):
    message: str
    productId: int


class MessageResponse(BaseModel):
    message: str
