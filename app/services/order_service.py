"""
Order engine: placement, status progression and listings.

Placement:
  1. Restaurant must exist with role=restaurant        → NotFound
  2. Every dish must belong to that restaurant         → InvalidItems (no partial order)
  3. Snapshot each dish price; total = Σ price × quantity
  4. Order + OrderItems committed in a single transaction

Status updates overwrite the single status field (last writer wins). With
ENFORCE_STATUS_TRANSITIONS enabled, moves outside the workflow table are
rejected with InvalidTransition.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import Select

from app.config import settings
from app.errors import InvalidItems, InvalidTransition, NotFound
from app.models import Dish, Order, OrderItem
from app.schemas.order import OrderItemCreate
from app.services.catalog_service import get_restaurant
from app.utils.order_status import OrderStatus, can_transition, is_terminal

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
# Largest value the NUMERIC(10, 2) total_amount column holds.
MAX_ORDER_TOTAL = Decimal("99999999.99")


def _order_query() -> Select:
    """SELECT Order with everything the API returns eagerly loaded."""
    return (
        select(Order)
        .options(
            selectinload(Order.items).selectinload(OrderItem.dish),
            selectinload(Order.customer),
            selectinload(Order.restaurant),
        )
        .execution_options(populate_existing=True)
    )


async def get_order(db: AsyncSession, order_id: int) -> Order:
    result = await db.execute(_order_query().where(Order.id == order_id))
    order = result.scalar_one_or_none()
    if order is None:
        raise NotFound("Order not found")
    return order


# ── Placement ────────────────────────────────────────────────────────────────


async def create_order(
    db: AsyncSession,
    customer_id: int,
    restaurant_id: int,
    items: list[OrderItemCreate],
) -> Order:
    """Place an order. Returns it with items, dishes, customer and restaurant loaded."""
    await get_restaurant(db, restaurant_id)

    if not items:
        raise InvalidItems("Order must contain at least one item")

    dish_ids = {item.dish_id for item in items}
    result = await db.execute(
        select(Dish).where(Dish.id.in_(dish_ids), Dish.restaurant_id == restaurant_id)
    )
    dishes = {dish.id: dish for dish in result.scalars()}

    missing = dish_ids - dishes.keys()
    if missing:
        raise InvalidItems(
            "Some dishes are invalid: " + ", ".join(str(i) for i in sorted(missing))
        )

    total = Decimal("0")
    order_items: list[OrderItem] = []
    for item in items:
        price = Decimal(dishes[item.dish_id].price).quantize(CENT)
        total += price * item.quantity
        order_items.append(
            OrderItem(dish_id=item.dish_id, quantity=item.quantity, price=price)
        )

    if total > MAX_ORDER_TOTAL:
        raise InvalidItems(f"Order total exceeds the maximum of {MAX_ORDER_TOTAL}")

    order = Order(
        customer_id=customer_id,
        restaurant_id=restaurant_id,
        status=OrderStatus.NEW.value,
        total_amount=total.quantize(CENT),
        items=order_items,
    )
    db.add(order)
    try:
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.error(
            "Failed to persist order for customer_id=%d restaurant_id=%d",
            customer_id, restaurant_id,
        )
        raise

    logger.info(
        "Order %d placed: customer_id=%d restaurant_id=%d items=%d total=%s",
        order.id, customer_id, restaurant_id, len(order_items), order.total_amount,
    )
    return await get_order(db, order.id)


# ── Status ───────────────────────────────────────────────────────────────────


async def update_order_status(
    db: AsyncSession,
    order_id: int,
    new_status: OrderStatus | str,
    restaurant_id: int,
) -> Order:
    """
    Set the status of one of the acting restaurant's orders.
    Another restaurant's order is reported as NotFound and left untouched.
    """
    result = await db.execute(
        _order_query().where(Order.id == order_id, Order.restaurant_id == restaurant_id)
    )
    order = result.scalar_one_or_none()
    if order is None:
        raise NotFound("Order not found")

    new_status = OrderStatus(new_status)
    if settings.enforce_status_transitions and not can_transition(order.status, new_status):
        raise InvalidTransition(
            f"Cannot move order from '{order.status}' to '{new_status.value}'"
        )

    previous = order.status
    order.status = new_status.value
    await db.commit()

    logger.info(
        "Order %d status %s → %s (restaurant_id=%d)",
        order_id, previous, new_status.value, restaurant_id,
    )
    return await get_order(db, order_id)


async def cancel_order(db: AsyncSession, order_id: int, customer_id: int) -> Order:
    """Customer-side cancellation of one of their own, still open, orders."""
    result = await db.execute(
        select(Order).where(Order.id == order_id, Order.customer_id == customer_id)
    )
    order = result.scalar_one_or_none()
    if order is None:
        raise NotFound("Order not found")

    if is_terminal(order.status):
        raise InvalidTransition(f"Order is already {order.status}")

    order.status = OrderStatus.CANCELLED.value
    await db.commit()
    logger.info("Order %d cancelled by customer_id=%d", order_id, customer_id)
    return await get_order(db, order_id)


# ── Listings ─────────────────────────────────────────────────────────────────


async def list_orders(
    db: AsyncSession,
    user_id: int,
    role: str,
    status: Optional[OrderStatus | str] = None,
) -> list[Order]:
    """
    Orders where the user is the customer (role=customer) or the restaurant
    (role=restaurant), newest first, optionally limited to one status.
    """
    owner_column = Order.customer_id if role == "customer" else Order.restaurant_id
    stmt = _order_query().where(owner_column == user_id)
    if status is not None:
        stmt = stmt.where(Order.status == OrderStatus(status).value)
    stmt = stmt.order_by(Order.created_at.desc(), Order.id.desc())

    result = await db.execute(stmt)
    return list(result.scalars().all())
