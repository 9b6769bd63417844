"""
Customer-facing endpoints.

Restaurant browsing is public; orders and favorites need a customer session.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import require_customer
from app.schemas.base import MessageResponse
from app.schemas.order import OrderCreate, OrderEnvelope, OrderListEnvelope, OrderRead
from app.schemas.restaurant import (
    FavoriteCreate,
    FavoriteEnvelope,
    FavoriteListEnvelope,
    FavoriteRead,
    RestaurantDetail,
    RestaurantEnvelope,
    RestaurantListEnvelope,
    RestaurantSummary,
)
from app.services import catalog_service, favorite_service, order_service
from app.services.sessions import SessionData
from app.utils.order_status import OrderStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/customers", tags=["customers"])


# ── Restaurants (public) ─────────────────────────────────────────────────────


@router.get("/restaurants", response_model=RestaurantListEnvelope)
async def list_restaurants(
    search: Optional[str] = Query(default=None, max_length=100),
    db: AsyncSession = Depends(get_db),
) -> RestaurantListEnvelope:
    """Browse restaurants; ?search= matches name or description, case-insensitively."""
    restaurants = await catalog_service.list_restaurants(db, search)
    return RestaurantListEnvelope(
        restaurants=[RestaurantSummary.model_validate(r) for r in restaurants]
    )


@router.get("/restaurants/{restaurant_id}", response_model=RestaurantEnvelope)
async def get_restaurant_details(
    restaurant_id: int,
    db: AsyncSession = Depends(get_db),
) -> RestaurantEnvelope:
    restaurant = await catalog_service.get_restaurant_details(db, restaurant_id)
    return RestaurantEnvelope(restaurant=RestaurantDetail.model_validate(restaurant))


# ── Orders ───────────────────────────────────────────────────────────────────


@router.post("/orders", response_model=OrderEnvelope, status_code=status.HTTP_201_CREATED)
async def create_order(
    body: OrderCreate,
    session: SessionData = Depends(require_customer),
    db: AsyncSession = Depends(get_db),
) -> OrderEnvelope:
    order = await order_service.create_order(
        db,
        customer_id=session.user_id,
        restaurant_id=body.restaurant_id,
        items=body.items,
    )
    return OrderEnvelope(
        message="Order placed successfully",
        order=OrderRead.model_validate(order),
    )


@router.get("/orders", response_model=OrderListEnvelope)
async def list_orders(
    status_filter: Optional[OrderStatus] = Query(default=None, alias="status"),
    session: SessionData = Depends(require_customer),
    db: AsyncSession = Depends(get_db),
) -> OrderListEnvelope:
    """The caller's orders, newest first."""
    orders = await order_service.list_orders(
        db, session.user_id, "customer", status_filter
    )
    return OrderListEnvelope(orders=[OrderRead.model_validate(o) for o in orders])


@router.put("/orders/{order_id}/cancel", response_model=OrderEnvelope)
async def cancel_order(
    order_id: int,
    session: SessionData = Depends(require_customer),
    db: AsyncSession = Depends(get_db),
) -> OrderEnvelope:
    """Cancel one of the caller's orders that is not yet delivered, picked up or cancelled."""
    order = await order_service.cancel_order(db, order_id, session.user_id)
    return OrderEnvelope(
        message="Order cancelled successfully",
        order=OrderRead.model_validate(order),
    )


# ── Favorites ────────────────────────────────────────────────────────────────


@router.get("/favorites", response_model=FavoriteListEnvelope)
async def list_favorites(
    session: SessionData = Depends(require_customer),
    db: AsyncSession = Depends(get_db),
) -> FavoriteListEnvelope:
    restaurants = await favorite_service.list_favorites(db, session.user_id)
    return FavoriteListEnvelope(
        favorites=[RestaurantSummary.model_validate(r) for r in restaurants]
    )


@router.post("/favorites", response_model=FavoriteEnvelope, status_code=status.HTTP_201_CREATED)
async def add_favorite(
    body: FavoriteCreate,
    session: SessionData = Depends(require_customer),
    db: AsyncSession = Depends(get_db),
) -> FavoriteEnvelope:
    favorite = await favorite_service.add_favorite(db, session.user_id, body.restaurant_id)
    return FavoriteEnvelope(
        message="Restaurant added to favorites",
        favorite=FavoriteRead.model_validate(favorite),
    )


@router.delete("/favorites/{restaurant_id}", response_model=MessageResponse)
async def remove_favorite(
    restaurant_id: int,
    session: SessionData = Depends(require_customer),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    await favorite_service.remove_favorite(db, session.user_id, restaurant_id)
    return MessageResponse(message="Restaurant removed from favorites")
