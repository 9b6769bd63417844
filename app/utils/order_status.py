"""
Order status definitions: single source of truth for the fulfilment workflow.
Both the ORM model and the order service import exclusively from here.
"""

from __future__ import annotations

from enum import Enum


class OrderStatus(str, Enum):
    """The eight fulfilment states an order can be in."""

    NEW = "New"
    ORDER_RECEIVED = "Order Received"
    PREPARING = "Preparing"
    ON_THE_WAY = "On the Way"
    PICKUP_READY = "Pick-up Ready"
    DELIVERED = "Delivered"
    PICKED_UP = "Picked Up"
    CANCELLED = "Cancelled"


ORDER_STATUSES: list[str] = [s.value for s in OrderStatus]

TERMINAL_STATUSES: frozenset[OrderStatus] = frozenset(
    {OrderStatus.DELIVERED, OrderStatus.PICKED_UP, OrderStatus.CANCELLED}
)

# Forward edges of the workflow. Cancelled is added below for every
# non-terminal state.
_FORWARD: dict[OrderStatus, set[OrderStatus]] = {
    OrderStatus.NEW:            {OrderStatus.ORDER_RECEIVED},
    OrderStatus.ORDER_RECEIVED: {OrderStatus.PREPARING},
    OrderStatus.PREPARING:      {OrderStatus.ON_THE_WAY, OrderStatus.PICKUP_READY},
    OrderStatus.ON_THE_WAY:     {OrderStatus.DELIVERED},
    OrderStatus.PICKUP_READY:   {OrderStatus.PICKED_UP},
}

ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    status: frozenset(
        _FORWARD.get(status, set())
        | ({OrderStatus.CANCELLED} if status not in TERMINAL_STATUSES else set())
    )
    for status in OrderStatus
}


def is_terminal(status: OrderStatus | str) -> bool:
    """Return True for Delivered, Picked Up and Cancelled."""
    return OrderStatus(status) in TERMINAL_STATUSES


def can_transition(current: OrderStatus | str, new: OrderStatus | str) -> bool:
    """
    Return True if `new` is a legal next state from `current`.
    Re-asserting the current status of a non-terminal order is allowed.
    """
    current, new = OrderStatus(current), OrderStatus(new)
    if current == new:
        return current not in TERMINAL_STATUSES
    return new in ALLOWED_TRANSITIONS[current]
