"""ORM Models — SQLAlchemy declarative models for the WebShop schema.

Invariants:
    - All models inherit from Base (db/base.py)
    - Table and column names match the legacy TechGearWebShop database

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from techgear.models.manufacturer import Manufacturer  # noqa: F401
from techgear.models.category import Category  # noqa: F401
from techgear.models.product import Product  # noqa: F401
from techgear.models.product_category import ProductCategory  # noqa: F401
from techgear.models.customer import Customer  # noqa: F401
from techgear.models.order import Order  # noqa: F401
from techgear.models.order_product import OrderProduct  # noqa: F401
from techgear.models.review import Review  # noqa: F401
