"""
Restaurant-owner endpoints: menu management and order fulfilment.
All routes need a restaurant session and only ever touch the caller's own rows.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import require_restaurant
from app.schemas.base import MessageResponse
from app.schemas.dish import DishCreate, DishEnvelope, DishListEnvelope, DishRead, DishUpdate
from app.schemas.order import OrderEnvelope, OrderListEnvelope, OrderRead, OrderStatusUpdate
from app.services import catalog_service, order_service
from app.services.sessions import SessionData
from app.utils.order_status import OrderStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/restaurants", tags=["restaurants"])


# ── Dishes ───────────────────────────────────────────────────────────────────


@router.get("/dishes", response_model=DishListEnvelope)
async def list_dishes(
    session: SessionData = Depends(require_restaurant),
    db: AsyncSession = Depends(get_db),
) -> DishListEnvelope:
    dishes = await catalog_service.list_dishes(db, session.user_id)
    return DishListEnvelope(dishes=[DishRead.model_validate(d) for d in dishes])


@router.post("/dishes", response_model=DishEnvelope, status_code=status.HTTP_201_CREATED)
async def add_dish(
    body: DishCreate,
    session: SessionData = Depends(require_restaurant),
    db: AsyncSession = Depends(get_db),
) -> DishEnvelope:
    dish = await catalog_service.add_dish(db, session.user_id, body)
    return DishEnvelope(message="Dish added successfully", dish=DishRead.model_validate(dish))


@router.put("/dishes/{dish_id}", response_model=DishEnvelope)
async def update_dish(
    dish_id: int,
    body: DishUpdate,
    session: SessionData = Depends(require_restaurant),
    db: AsyncSession = Depends(get_db),
) -> DishEnvelope:
    dish = await catalog_service.update_dish(db, session.user_id, dish_id, body)
    return DishEnvelope(message="Dish updated successfully", dish=DishRead.model_validate(dish))


@router.delete("/dishes/{dish_id}", response_model=MessageResponse)
async def delete_dish(
    dish_id: int,
    session: SessionData = Depends(require_restaurant),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    await catalog_service.delete_dish(db, session.user_id, dish_id)
    return MessageResponse(message="Dish deleted successfully")


# ── Orders ───────────────────────────────────────────────────────────────────


@router.get("/orders", response_model=OrderListEnvelope)
async def list_orders(
    status_filter: Optional[OrderStatus] = Query(default=None, alias="status"),
    session: SessionData = Depends(require_restaurant),
    db: AsyncSession = Depends(get_db),
) -> OrderListEnvelope:
    """Orders placed with the caller's restaurant, newest first."""
    orders = await order_service.list_orders(
        db, session.user_id, "restaurant", status_filter
    )
    return OrderListEnvelope(orders=[OrderRead.model_validate(o) for o in orders])


@router.put("/orders/{order_id}/status", response_model=OrderEnvelope)
async def update_order_status(
    order_id: int,
    body: OrderStatusUpdate,
    session: SessionData = Depends(require_restaurant),
    db: AsyncSession = Depends(get_db),
) -> OrderEnvelope:
    """
    Advance or cancel an order. Without ENFORCE_STATUS_TRANSITIONS any status
    may replace any other; with it, only moves in the workflow table pass.
    """
    order = await order_service.update_order_status(
        db, order_id, body.status, restaurant_id=session.user_id
    )
    return OrderEnvelope(
        message="Order status updated successfully",
        order=OrderRead.model_validate(order),
    )
