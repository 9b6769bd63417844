"""User ORM model: customers and restaurant owners share one table."""

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, Text, String, Enum, TIMESTAMP
from sqlalchemy.orm import relationship

from app.database import Base

USER_ROLES = ("customer", "restaurant")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """
    An account. The role is fixed at signup and decides which API routes
    the account may reach. Restaurant-only profile columns stay NULL for
    customers.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(Enum(*USER_ROLES, name="user_role"), nullable=False)

    profile_picture = Column(String(1024), nullable=True)
    country = Column(String(100), nullable=True)
    state = Column(String(2), nullable=True)
    location = Column(String(255), nullable=True)

    # Restaurant profile
    description = Column(Text, nullable=True)
    contact_info = Column(String(255), nullable=True)
    timings = Column(String(255), nullable=True)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    # Relationships
    dishes = relationship(
        "Dish",
        back_populates="restaurant",
        order_by="Dish.id",
    )
