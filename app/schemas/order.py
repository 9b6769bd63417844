"""Pydantic schemas for order placement and fulfilment."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel, UTCDatetime
from app.schemas.dish import DishRead
from app.schemas.user import UserRead
from app.utils.order_status import OrderStatus


class OrderItemCreate(CamelModel):
    dish_id: int
    quantity: int = Field(1, ge=1, le=1000)


class OrderCreate(CamelModel):
    """Body for POST /api/customers/orders."""

    restaurant_id: int
    items: list[OrderItemCreate] = Field(default_factory=list)


class OrderStatusUpdate(CamelModel):
    """Body for PUT /api/restaurants/orders/{id}/status."""

    status: OrderStatus


class OrderItemRead(CamelModel):
    id: int
    order_id: int
    dish_id: Optional[int] = None
    quantity: int
    price: float            # snapshot taken when the order was placed
    dish: Optional[DishRead] = None


class OrderRead(CamelModel):
    id: int
    customer_id: int
    restaurant_id: int
    status: OrderStatus
    total_amount: float
    created_at: UTCDatetime
    updated_at: UTCDatetime
    items: list[OrderItemRead] = Field(default_factory=list)
    customer: Optional[UserRead] = None
    restaurant: Optional[UserRead] = None


class OrderEnvelope(CamelModel):
    message: str
    order: OrderRead


class OrderListEnvelope(CamelModel):
    orders: list[OrderRead]
