"""Customer Routes — profile with orders, contact-info update, order lines."""

import logging

from fastapi import APIRouter, Depends

from techgear.api.dependencies import get_customer_store
from techgear.core.errors import ResourceNotFoundError
from techgear.core.repository_protocols import CustomerStore
from techgear.schemas.customer import CustomerContactUpdate
from techgear.schemas.product import MessageResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("/{customer_id}")
async def get_customer(
    customer_id: int, store: CustomerStore = Depends(get_customer_store),
):
    """Customer profile with a nested Orders array."""
    customer = await store.get_customer(customer_id)
    if customer is None:
        raise ResourceNotFoundError("Customer", customer_id)
    return customer


@router.put("/{customer_id}", response_model=MessageResponse)
async def update_customer(
    customer_id: int,
    body: CustomerContactUpdate,
    store: CustomerStore = Depends(get_customer_store),
):
    """Update email, phone and/or address."""
    if await store.update_contact_info(customer_id, body.changes()) == 0:
        raise ResourceNotFoundError("Customer", customer_id)
    return MessageResponse(message="Customer updated")


@router.get("/{customer_id}/orders")
async def customer_orders(
    customer_id: int, store: CustomerStore = Depends(get_customer_store),
):
    return await store.list_orders(customer_id)
