"""Favorites index: one row per (customer, restaurant) pair."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import AlreadyFavorited, NotFound
from app.models import Favorite, User
from app.services.catalog_service import get_restaurant

logger = logging.getLogger(__name__)


async def add_favorite(db: AsyncSession, customer_id: int, restaurant_id: int) -> Favorite:
    """Raises AlreadyFavorited if the pair exists; a repeat is never silently accepted."""
    await get_restaurant(db, restaurant_id)

    result = await db.execute(
        select(Favorite.id).where(
            Favorite.customer_id == customer_id,
            Favorite.restaurant_id == restaurant_id,
        )
    )
    if result.first() is not None:
        raise AlreadyFavorited()

    favorite = Favorite(customer_id=customer_id, restaurant_id=restaurant_id)
    db.add(favorite)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        raise AlreadyFavorited() from exc

    logger.info("customer_id=%d favorited restaurant_id=%d", customer_id, restaurant_id)
    return favorite


async def remove_favorite(db: AsyncSession, customer_id: int, restaurant_id: int) -> None:
    result = await db.execute(
        select(Favorite).where(
            Favorite.customer_id == customer_id,
            Favorite.restaurant_id == restaurant_id,
        )
    )
    favorite = result.scalar_one_or_none()
    if favorite is None:
        raise NotFound("Favorite not found")

    await db.delete(favorite)
    await db.commit()


async def list_favorites(db: AsyncSession, customer_id: int) -> list[User]:
    """The customer's favorite restaurants (profiles, not Favorite rows), oldest first."""
    result = await db.execute(
        select(User)
        .join(Favorite, Favorite.restaurant_id == User.id)
        .where(Favorite.customer_id == customer_id)
        .order_by(Favorite.id)
    )
    return list(result.scalars().all())
