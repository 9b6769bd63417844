"""
Demo data: three restaurants with a small menu each, plus one customer.
Every demo account uses the password `password123`.

Only runs against an empty users table so it never touches real data.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Dish, User
from app.services.security import hash_password

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

DEMO_RESTAURANTS: list[dict[str, str]] = [
    {
        "name": "Italian Delight",
        "email": "italian@example.com",
        "location": "123 Main St, San Francisco, CA",
        "description": "Authentic Italian cuisine in the heart of the city",
        "contact_info": "(415) 555-0123",
        "timings": "Mon-Sun: 11:00 AM - 10:00 PM",
        "profile_picture": "https://images.unsplash.com/photo-1555396273-367ea4eb4db5",
    },
    {
        "name": "Sushi Master",
        "email": "sushi@example.com",
        "location": "456 Market St, San Francisco, CA",
        "description": "Premium Japanese sushi and sashimi",
        "contact_info": "(415) 555-0124",
        "timings": "Tue-Sun: 12:00 PM - 9:30 PM",
        "profile_picture": "https://images.unsplash.com/photo-1579871494447-9811cf80d66c",
    },
    {
        "name": "Taco Fiesta",
        "email": "taco@example.com",
        "location": "789 Mission St, San Francisco, CA",
        "description": "Authentic Mexican street food",
        "contact_info": "(415) 555-0125",
        "timings": "Mon-Sun: 10:00 AM - 11:00 PM",
        "profile_picture": "https://images.unsplash.com/photo-1565299585323-38d6b0865b47",
    },
]

DEMO_MENU: list[dict[str, object]] = [
    {
        "name": "Signature Dish",
        "description": "Our most popular dish with special house sauce",
        "price": Decimal("15.99"),
        "category": "Main Course",
        "ingredients": "Fresh ingredients, house-made sauce",
        "image": "https://images.unsplash.com/photo-1546069901-ba9599a7e63c",
    },
    {
        "name": "Special Appetizer",
        "description": "Perfect starter to share",
        "price": Decimal("8.99"),
        "category": "Appetizer",
        "ingredients": "Seasonal vegetables, special spices",
        "image": "https://images.unsplash.com/photo-1580013759032-c96505e24c1f",
    },
    {
        "name": "Dessert Special",
        "description": "Sweet ending to your meal",
        "price": Decimal("6.99"),
        "category": "Dessert",
        "ingredients": "Fresh fruits, cream, chocolate",
        "image": "https://images.unsplash.com/photo-1565958011703-44f9829ba187",
    },
]

DEMO_CUSTOMER: dict[str, str] = {
    "name": "John Doe",
    "email": "customer@example.com",
    "location": "San Francisco, CA",
}


async def users_exist(db: AsyncSession) -> bool:
    result = await db.execute(select(func.count()).select_from(User))
    return (result.scalar() or 0) > 0


async def seed_demo_data(db: AsyncSession) -> bool:
    """
    Insert the demo accounts and menus in one transaction.
    Returns False (and writes nothing) when any user already exists.
    """
    if await users_exist(db):
        logger.info("Seed data skipped: users table is not empty.")
        return False

    password_hash = hash_password(DEMO_PASSWORD)

    for data in DEMO_RESTAURANTS:
        restaurant = User(role="restaurant", password_hash=password_hash, **data)
        restaurant.dishes = [Dish(**dish) for dish in DEMO_MENU]
        db.add(restaurant)

    db.add(User(role="customer", password_hash=password_hash, **DEMO_CUSTOMER))
    await db.commit()

    logger.info(
        "Seeded %d restaurants (%d dishes each) and 1 customer.",
        len(DEMO_RESTAURANTS), len(DEMO_MENU),
    )
    return True
