"""Pydantic schemas for public restaurant browsing and favorites."""

from __future__ import annotations

from typing import Optional

from app.schemas.base import CamelModel, UTCDatetime
from app.schemas.dish import DishRead
from app.schemas.user import UserRead


class RestaurantSummary(CamelModel):
    """Card shown in search results and the favorites list."""

    id: int
    name: str
    description: Optional[str] = None
    location: Optional[str] = None
    profile_picture: Optional[str] = None
    timings: Optional[str] = None
    contact_info: Optional[str] = None


class RestaurantDetail(UserRead):
    """Restaurant profile plus its full menu."""

    dishes: list[DishRead] = []


class RestaurantListEnvelope(CamelModel):
    restaurants: list[RestaurantSummary]


class RestaurantEnvelope(CamelModel):
    restaurant: RestaurantDetail


class FavoriteCreate(CamelModel):
    """Body for POST /api/customers/favorites."""

    restaurant_id: int


class FavoriteRead(CamelModel):
    id: int
    customer_id: int
    restaurant_id: int
    created_at: Optional[UTCDatetime] = None


class FavoriteEnvelope(CamelModel):
    message: str
    favorite: FavoriteRead


class FavoriteListEnvelope(CamelModel):
    favorites: list[RestaurantSummary]
