"""Password hashing: bcrypt through passlib. Plaintext is never stored."""

from __future__ import annotations

from passlib.context import CryptContext

from app.config import settings

pwd = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(p: str) -> str:
    return pwd.hash(p)


def verify_password(p: str, h: str) -> bool:
    """Return False for a wrong password or an unparseable stored hash."""
    try:
        return pwd.verify(p, h)
    except (ValueError, TypeError):
        return False
