"""Data Access Layer — one repository per aggregate, built on an injected AsyncSession.

Invariants:
    - Every statement binds its inputs as parameters (no string interpolation)
    - Repositories never raise "not found": they return None or a row count
    - SQLAlchemy failures leave as StorageError after a rollback (storage_operation)
"""

from techgear.repositories.products import ProductRepository  # noqa: F401
from techgear.repositories.customers import CustomerRepository  # noqa: F401
from techgear.repositories.categories import CategoryRepository  # noqa: F401
from techgear.repositories.reviews import ReviewRepository  # noqa: F401
