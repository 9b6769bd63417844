"""SQLAlchemy ORM models package."""

from app.database import Base
from app.models.user import User
from app.models.dish import Dish
from app.models.order import Order, OrderItem
from app.models.favorite import Favorite

__all__ = ["Base", "User", "Dish", "Order", "OrderItem", "Favorite"]
