"""
Credential store: signup, credential checks and profile edits.

Passwords are hashed here, before the INSERT, rather than in a model hook.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import DuplicateEmail, InvalidCredentials, NotFound, ValidationError
from app.models import User
from app.schemas.user import RESTAURANT_REQUIRED_FIELDS, ProfileUpdate, SignupRequest
from app.services.security import hash_password, verify_password

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def signup(db: AsyncSession, body: SignupRequest) -> User:
    """
    Create an account.
    Raises DuplicateEmail if the email is already registered.
    """
    if await get_user_by_email(db, body.email) is not None:
        raise DuplicateEmail()

    fields = body.model_dump(exclude={"password", "email", "role"})
    user = User(
        email=body.email,
        role=body.role,
        password_hash=hash_password(body.password),
        **fields,
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError as exc:
        # Lost a race with a concurrent signup for the same email.
        await db.rollback()
        raise DuplicateEmail() from exc

    logger.info("User %s signed up (id=%d, role=%s)", user.email, user.id, user.role)
    return user


async def authenticate(
    db: AsyncSession,
    email: str,
    password: str,
    role: Optional[str] = None,
) -> User:
    """
    Return the user for a valid email/password pair.
    When role is given, an account with a different role is treated as unknown.
    Every failure raises the same InvalidCredentials.
    """
    user = await get_user_by_email(db, email)
    if user is None or (role is not None and user.role != role):
        logger.warning("Login rejected for %s: unknown account", email)
        raise InvalidCredentials()

    if not verify_password(password, user.password_hash):
        logger.warning("Login rejected for %s: bad password", email)
        raise InvalidCredentials()

    return user


async def get_user(db: AsyncSession, user_id: int) -> User:
    user = await db.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    return user


async def update_profile(db: AsyncSession, user_id: int, body: ProfileUpdate) -> User:
    """
    Apply only the fields present in the request body.
    A restaurant cannot blank out the profile fields it signed up with.
    """
    user = await get_user(db, user_id)
    changes = body.model_dump(exclude_unset=True)

    if user.role == "restaurant":
        cleared = [
            f for f in RESTAURANT_REQUIRED_FIELDS
            if f in changes and not (changes[f] or "").strip()
        ]
        if cleared:
            raise ValidationError("Restaurant accounts require: " + ", ".join(cleared))

    for key, value in changes.items():
        if key == "name" and value is None:
            continue
        setattr(user, key, value)

    await db.commit()
    logger.info("Profile updated for user_id=%d", user_id)
    return user
