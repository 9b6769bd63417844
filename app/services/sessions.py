"""
Server-side session store.

The client only ever holds an opaque random token (in an httpOnly cookie);
the identity behind it lives here. Entries expire after SESSION_TTL_SECONDS
and the store is bounded to SESSION_MAX_ENTRIES (least-recently-used first).
"""

from __future__ import annotations

import logging
import secrets
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Optional

from cachetools import TTLCache

from app.config import settings

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32


@dataclass(frozen=True)
class SessionData:
    """Identity bound to a session token."""

    user_id: int
    role: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class SessionStore:
    """token → SessionData, with TTL expiry."""

    def __init__(
        self,
        ttl_seconds: int,
        max_entries: int,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._sessions: TTLCache = TTLCache(maxsize=max_entries, ttl=ttl_seconds, timer=timer)

    def create(self, user_id: int, role: str) -> str:
        """Start a session and return its token."""
        token = secrets.token_urlsafe(TOKEN_BYTES)
        self._sessions[token] = SessionData(user_id=user_id, role=role)
        logger.debug("Session created for user_id=%s role=%s", user_id, role)
        return token

    def get(self, token: Optional[str]) -> Optional[SessionData]:
        """Return the live session for token, or None if unknown/expired."""
        if not token:
            return None
        return self._sessions.get(token)

    def destroy(self, token: Optional[str]) -> bool:
        """End a session. Returns False when there was nothing to end."""
        if not token:
            return False
        return self._sessions.pop(token, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)


session_store = SessionStore(
    ttl_seconds=settings.session_ttl_seconds,
    max_entries=settings.session_max_entries,
)
