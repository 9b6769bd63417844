"""Order and OrderItem ORM models."""

from sqlalchemy import Column, Integer, Numeric, Enum, TIMESTAMP, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.user import utcnow
from app.utils.order_status import ORDER_STATUSES, OrderStatus


class Order(Base):
    """
    A customer's order at one restaurant.
    total_amount is computed once from the item snapshots and never recomputed.
    """

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    restaurant_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    status = Column(
        Enum(*ORDER_STATUSES, name="order_status"),
        nullable=False,
        default=OrderStatus.NEW.value,
    )
    total_amount = Column(Numeric(10, 2), nullable=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    # Relationships
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )
    customer = relationship("User", foreign_keys=[customer_id])
    restaurant = relationship("User", foreign_keys=[restaurant_id])


class OrderItem(Base):
    """
    One line of an order. price is the dish price at order time, a snapshot
    that later menu edits never touch. dish_id is cleared if the dish is deleted.
    """

    __tablename__ = "order_items"
    __table_args__ = (CheckConstraint("quantity >= 1", name="ck_order_items_quantity"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(
        Integer,
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    dish_id = Column(
        Integer,
        ForeignKey("dishes.id", ondelete="SET NULL"),
        nullable=True,
    )
    quantity = Column(Integer, nullable=False, default=1)
    price = Column(Numeric(10, 2), nullable=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    # Relationships
    order = relationship("Order", back_populates="items")
    dish = relationship("Dish")
