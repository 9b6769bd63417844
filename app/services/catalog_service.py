"""
Catalog service: restaurant menus and public restaurant browsing.

Every dish operation is scoped to the acting restaurant: a dish owned by
someone else is reported as NotFound so its existence is never confirmed.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.errors import NotFound
from app.models import Dish, User
from app.schemas.dish import DishCreate, DishUpdate

logger = logging.getLogger(__name__)


# ── Dishes ───────────────────────────────────────────────────────────────────


async def _get_owned_dish(db: AsyncSession, restaurant_id: int, dish_id: int) -> Dish:
    result = await db.execute(
        select(Dish).where(Dish.id == dish_id, Dish.restaurant_id == restaurant_id)
    )
    dish = result.scalar_one_or_none()
    if dish is None:
        raise NotFound("Dish not found")
    return dish


async def list_dishes(db: AsyncSession, restaurant_id: int) -> list[Dish]:
    result = await db.execute(
        select(Dish).where(Dish.restaurant_id == restaurant_id).order_by(Dish.id)
    )
    return list(result.scalars().all())


async def add_dish(db: AsyncSession, restaurant_id: int, body: DishCreate) -> Dish:
    dish = Dish(restaurant_id=restaurant_id, **body.model_dump())
    db.add(dish)
    await db.commit()
    logger.info("Dish %d added by restaurant_id=%d", dish.id, restaurant_id)
    return dish


async def update_dish(
    db: AsyncSession,
    restaurant_id: int,
    dish_id: int,
    body: DishUpdate,
) -> Dish:
    """
    Partial update. Existing order items keep their own price snapshot, so a
    price change here only affects future orders.
    """
    dish = await _get_owned_dish(db, restaurant_id, dish_id)
    for key, value in body.model_dump(exclude_unset=True).items():
        if value is None and key != "image":
            continue
        setattr(dish, key, value)
    await db.commit()
    return dish


async def delete_dish(db: AsyncSession, restaurant_id: int, dish_id: int) -> None:
    dish = await _get_owned_dish(db, restaurant_id, dish_id)
    await db.delete(dish)
    await db.commit()
    logger.info("Dish %d deleted by restaurant_id=%d", dish_id, restaurant_id)


# ── Restaurants ──────────────────────────────────────────────────────────────


async def list_restaurants(db: AsyncSession, search: Optional[str] = None) -> list[User]:
    """
    All restaurant accounts, optionally filtered by a case-insensitive
    substring of name or description. Rows sharing a name collapse to the
    lowest id.
    """
    stmt = select(User).where(User.role == "restaurant").order_by(User.id)

    term = (search or "").strip()
    if term:
        stmt = stmt.where(
            or_(
                User.name.icontains(term, autoescape=True),
                User.description.icontains(term, autoescape=True),
            )
        )

    result = await db.execute(stmt)
    unique: dict[str, User] = {}
    for restaurant in result.scalars():
        unique.setdefault(restaurant.name, restaurant)
    return list(unique.values())


async def get_restaurant(db: AsyncSession, restaurant_id: int) -> User:
    """Return a restaurant-role user or raise NotFound."""
    result = await db.execute(
        select(User).where(User.id == restaurant_id, User.role == "restaurant")
    )
    restaurant = result.scalar_one_or_none()
    if restaurant is None:
        raise NotFound("Restaurant not found")
    return restaurant


async def get_restaurant_details(db: AsyncSession, restaurant_id: int) -> User:
    """Restaurant profile with its full menu eagerly loaded."""
    result = await db.execute(
        select(User)
        .where(User.id == restaurant_id, User.role == "restaurant")
        .options(selectinload(User.dishes))
        .execution_options(populate_existing=True)
    )
    restaurant = result.scalar_one_or_none()
    if restaurant is None:
        raise NotFound("Restaurant not found")
    return restaurant
