"""Customer Repository — customer profile with orders, contact updates, order lines.

Invariants:
    - get_customer never returns the password column
    - update_contact_info writes only email, phone and address
    - Orders is always a list; a customer without orders gets []

Design Decisions:
    - Orders aggregated in SQL with json_group_array/json_object (SQLite JSON1),
      FILTER drops the all-NULL entry produced by the LEFT JOIN
"""

import json
import logging

from sqlalchemy import select, update, func
from sqlalchemy.ext.asyncio import AsyncSession

from techgear.infrastructure.database import storage_operation
from techgear.models import Customer, Order, OrderProduct, Product
from techgear.schemas.customer import CONTACT_FIELDS

logger = logging.getLogger(__name__)


class CustomerRepository:
    """Customer reads and contact-info writes for a single request session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @storage_operation("get customer")
    async def get_customer(self, customer_id: int) -> dict | None:
        orders = (
            func.json_group_array(
                func.json_object(
                    "Order_Nr", Order.order_id,
                    "Order_Date", Order.order_date,
                ),
            )
            .filter(Order.order_id.is_not(None))
            .label("Orders")
        )
        result = await self.db.execute(
            select(
                Customer.customer_id.label("Customer_Id"),
                Customer.name,
                Customer.email,
                Customer.phone,
                Customer.address,
                orders,
            )
            .outerjoin(Order, Order.customer_id == Customer.customer_id)
            .where(Customer.customer_id == customer_id)
            .group_by(Customer.customer_id),
        )
        row = result.mappings().first()
        if row is None:
            return None
        customer = dict(row)
        customer["Orders"] = json.loads(customer["Orders"] or "[]")
        return customer

    @storage_operation("update customer")
    async def update_contact_info(self, customer_id: int, changes: dict) -> int:
        """Write the supplied contact fields. Returns rows affected."""
        values = {k: v for k, v in changes.items() if k in CONTACT_FIELDS}
        if not values:
            raise ValueError("no contact fields to update")
        result = await self.db.execute(
            update(Customer)
            .where(Customer.customer_id == customer_id)
            .values(**values)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        logger.info(
            "Customer contact info updated",
            extra={"customer_id": customer_id, "rows": result.rowcount},
        )
        return result.rowcount

    @storage_operation("list customer orders")
    async def list_orders(self, customer_id: int) -> list[dict]:
        """Order lines of every order placed by the customer."""
        result = await self.db.execute(
            select(
                Order.order_id.label("Order_Nr"),
                Order.order_date.label("Order_Date"),
                Product.name.label("Product"),
                OrderProduct.quantity.label("Quantity"),
                OrderProduct.unit_price.label("Unit_Price"),
            )
            .outerjoin(OrderProduct, OrderProduct.order_id == Order.order_id)
            .outerjoin(Product, Product.product_id == OrderProduct.product_id)
            .where(Order.customer_id == customer_id)
            .order_by(Order.order_id, OrderProduct.id),
        )
        return [dict(row) for row in result.mappings().all()]
