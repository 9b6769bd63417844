"""
Account endpoints: signup, login, logout and the caller's own profile.

A successful signup or login sets an httpOnly session cookie; the response
body never includes the password hash.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.dependencies import get_current_session, get_session_store, get_session_token
from app.models import User
from app.schemas.base import MessageResponse
from app.schemas.user import (
    LoginRequest,
    ProfileUpdate,
    SignupRequest,
    UserEnvelope,
    UserMessageEnvelope,
    UserRead,
)
from app.services import auth_service
from app.services.sessions import SessionData, SessionStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


# ── Helpers ──────────────────────────────────────────────────────────────────


def _start_session(
    request: Request,
    response: Response,
    store: SessionStore,
    user: User,
) -> None:
    """Bind a fresh session to user, replacing any session the cookie held."""
    store.destroy(get_session_token(request))
    token = store.create(user.id, user.role)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
        path="/",
    )


# ── Endpoints ────────────────────────────────────────────────────────────────


@router.post("/signup", response_model=UserMessageEnvelope, status_code=status.HTTP_201_CREATED)
async def signup(
    body: SignupRequest,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
) -> UserMessageEnvelope:
    """Create an account and log it in."""
    user = await auth_service.signup(db, body)
    _start_session(request, response, store, user)
    return UserMessageEnvelope(
        message="User created successfully",
        user=UserRead.model_validate(user),
    )


@router.post("/login", response_model=UserMessageEnvelope)
async def login(
    body: LoginRequest,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
) -> UserMessageEnvelope:
    user = await auth_service.authenticate(db, body.email, body.password, body.role)
    _start_session(request, response, store, user)
    logger.info("User id=%d logged in", user.id)
    return UserMessageEnvelope(
        message="Login successful",
        user=UserRead.model_validate(user),
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    response: Response,
    store: SessionStore = Depends(get_session_store),
) -> MessageResponse:
    """End the session. Calling it without a session is not an error."""
    store.destroy(get_session_token(request))
    response.delete_cookie(settings.session_cookie_name, path="/")
    return MessageResponse(message="Logged out successfully")


@router.get("/profile", response_model=UserEnvelope)
async def get_profile(
    session: SessionData = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
) -> UserEnvelope:
    user = await auth_service.get_user(db, session.user_id)
    return UserEnvelope(user=UserRead.model_validate(user))


@router.put("/profile", response_model=UserMessageEnvelope)
async def update_profile(
    body: ProfileUpdate,
    session: SessionData = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
) -> UserMessageEnvelope:
    user = await auth_service.update_profile(db, session.user_id, body)
    return UserMessageEnvelope(
        message="Profile updated successfully",
        user=UserRead.model_validate(user),
    )
