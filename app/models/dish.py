"""Dish ORM model: a menu item owned by one restaurant-role user."""

from sqlalchemy import Column, Integer, Text, String, Numeric, Enum, TIMESTAMP, ForeignKey
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.user import utcnow

DISH_CATEGORIES = ("Appetizer", "Salad", "Main Course", "Dessert", "Beverage")


class Dish(Base):
    __tablename__ = "dishes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    restaurant_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    image = Column(String(1024), nullable=True)
    category = Column(Enum(*DISH_CATEGORIES, name="dish_category"), nullable=False)
    ingredients = Column(Text, nullable=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    # Relationships
    restaurant = relationship("User", back_populates="dishes")
