"""Pydantic schemas for menu management."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal, Optional

from pydantic import Field

from app.schemas.base import CamelModel, UTCDatetime

DishCategory = Literal["Appetizer", "Salad", "Main Course", "Dessert", "Beverage"]


class DishCreate(CamelModel):
    """Body for POST /api/restaurants/dishes."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    image: Optional[str] = Field(None, max_length=1024)
    category: DishCategory
    ingredients: str = Field(..., min_length=1)


class DishUpdate(CamelModel):
    """Body for PUT /api/restaurants/dishes/{id}: only sent fields change."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    image: Optional[str] = Field(None, max_length=1024)
    category: Optional[DishCategory] = None
    ingredients: Optional[str] = Field(None, min_length=1)


class DishRead(CamelModel):
    id: int
    restaurant_id: int
    name: str
    description: str
    price: float
    image: Optional[str] = None
    category: DishCategory
    ingredients: str
    created_at: Optional[UTCDatetime] = None
    updated_at: Optional[UTCDatetime] = None


class DishEnvelope(CamelModel):
    message: str
    dish: DishRead


class DishListEnvelope(CamelModel):
    dishes: list[DishRead]
