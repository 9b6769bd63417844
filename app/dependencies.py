"""
Request-scoped authentication dependencies.

The session cookie carries only an opaque token; the SessionStore resolves it
to {user_id, role}. Role gates are layered on top: no session → 401,
wrong role → 403.
"""

from __future__ import annotations

from fastapi import Depends, Request

from app.config import settings
from app.errors import AuthenticationRequired, AuthorizationDenied
from app.services.sessions import SessionData, SessionStore, session_store


def get_session_store() -> SessionStore:
    """FastAPI dependency returning the process-wide session store."""
    return session_store


def get_session_token(request: Request) -> str | None:
    return request.cookies.get(settings.session_cookie_name)


async def get_current_session(
    request: Request,
    store: SessionStore = Depends(get_session_store),
) -> SessionData:
    """Resolve the caller's session or raise AuthenticationRequired."""
    session = store.get(get_session_token(request))
    if session is None:
        raise AuthenticationRequired()
    return session


async def require_customer(
    session: SessionData = Depends(get_current_session),
) -> SessionData:
    if session.role != "customer":
        raise AuthorizationDenied("Customer access required")
    return session


async def require_restaurant(
    session: SessionData = Depends(get_current_session),
) -> SessionData:
    if session.role != "restaurant":
        raise AuthorizationDenied("Restaurant access required")
    return session
