"""Pydantic schemas package."""

from app.schemas.base import ErrorResponse, MessageResponse
from app.schemas.user import (
    LoginRequest,
    ProfileUpdate,
    SignupRequest,
    UserEnvelope,
    UserMessageEnvelope,
    UserRead,
)
from app.schemas.dish import DishCreate, DishEnvelope, DishListEnvelope, DishRead, DishUpdate
from app.schemas.order import (
    OrderCreate,
    OrderEnvelope,
    OrderItemCreate,
    OrderItemRead,
    OrderListEnvelope,
    OrderRead,
    OrderStatusUpdate,
)
from app.schemas.restaurant import (
    FavoriteCreate,
    FavoriteEnvelope,
    FavoriteListEnvelope,
    FavoriteRead,
    RestaurantDetail,
    RestaurantEnvelope,
    RestaurantListEnvelope,
    RestaurantSummary,
)

__all__ = [
    "ErrorResponse", "MessageResponse",
    "SignupRequest", "LoginRequest", "ProfileUpdate",
    "UserRead", "UserEnvelope", "UserMessageEnvelope",
    "DishCreate", "DishUpdate", "DishRead", "DishEnvelope", "DishListEnvelope",
    "OrderCreate", "OrderItemCreate", "OrderStatusUpdate",
    "OrderItemRead", "OrderRead", "OrderEnvelope", "OrderListEnvelope",
    "RestaurantSummary", "RestaurantDetail",
    "RestaurantListEnvelope", "RestaurantEnvelope",
    "FavoriteCreate", "FavoriteRead", "FavoriteEnvelope", "FavoriteListEnvelope",
]
