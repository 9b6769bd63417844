"""
Test configuration and fixtures for the Marketplace API.

Every test gets its own in-memory SQLite database and its own session store;
the app's get_db / get_session_store dependencies are overridden to use them.
"""

import os

# Must be set before anything under app/ is imported (settings are cached).
os.environ.update(
    {
        "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
        "APP_ENV": "test",
        "LOG_LEVEL": "WARNING",
        "BCRYPT_ROUNDS": "4",
        "SEED_DEMO_DATA": "false",
        "ENFORCE_STATUS_TRANSITIONS": "false",
    }
)

from types import SimpleNamespace
from typing import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database import enable_sqlite_foreign_keys, get_db
from app.dependencies import get_session_store
from app.main import app
from app.models import Base
from app.services.sessions import SessionStore

PASSWORD = "secret-pass"

RESTAURANT_PROFILE = {
    "location": "1 Market St, San Francisco, CA",
    "description": "Wood-fired pizza and pasta",
    "contactInfo": "(415) 555-0100",
    "timings": "Mon-Sun: 11:00 AM - 10:00 PM",
}


@pytest.fixture
async def engine():
    """Fresh in-memory schema per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory) -> AsyncIterator[AsyncSession]:
    """A session for arranging and inspecting rows directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def store() -> SessionStore:
    return SessionStore(ttl_seconds=3600, max_entries=100)


@pytest.fixture
async def make_client(session_factory, store):
    """Factory for independent clients (each with its own cookie jar)."""

    async def _get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_session_store] = lambda: store

    clients: list[AsyncClient] = []

    def _make(raise_app_exceptions: bool = True) -> AsyncClient:
        transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
        client = AsyncClient(transport=transport, base_url="http://test")
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client) -> AsyncClient:
    return make_client()


async def _signup(client: AsyncClient, **payload) -> dict:
    response = await client.post("/api/auth/signup", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["user"]


@pytest.fixture
def signup():
    """Helper: sign a client up and return the user JSON."""
    return _signup


@pytest.fixture
async def restaurant(make_client) -> SimpleNamespace:
    """A logged-in restaurant owner."""
    client = make_client()
    user = await _signup(
        client,
        name="Pizza Palace",
        email="owner@pizza.example",
        password=PASSWORD,
        role="restaurant",
        **RESTAURANT_PROFILE,
    )
    return SimpleNamespace(client=client, user=user, id=user["id"])


@pytest.fixture
async def other_restaurant(make_client) -> SimpleNamespace:
    """A second, unrelated restaurant owner."""
    client = make_client()
    user = await _signup(
        client,
        name="Burger Barn",
        email="owner@burgers.example",
        password=PASSWORD,
        role="restaurant",
        location="2 Mission St, San Francisco, CA",
        description="Smash burgers and shakes",
        contactInfo="(415) 555-0199",
        timings="Tue-Sun: 12:00 PM - 9:00 PM",
    )
    return SimpleNamespace(client=client, user=user, id=user["id"])


@pytest.fixture
async def customer(make_client) -> SimpleNamespace:
    """A logged-in customer."""
    client = make_client()
    user = await _signup(
        client,
        name="Jane Customer",
        email="jane@example.com",
        password=PASSWORD,
        role="customer",
    )
    return SimpleNamespace(client=client, user=user, id=user["id"])


async def _add_dish(client: AsyncClient, **overrides) -> dict:
    payload = {
        "name": "Margherita",
        "description": "Tomato, mozzarella, basil",
        "price": 10.00,
        "category": "Main Course",
        "ingredients": "Dough, tomato, mozzarella, basil",
    }
    payload.update(overrides)
    response = await client.post("/api/restaurants/dishes", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["dish"]


@pytest.fixture
def add_dish():
    """Helper: create a dish through the API as the given restaurant client."""
    return _add_dish


@pytest.fixture
async def menu(restaurant) -> dict:
    """Two dishes on the restaurant's menu: 10.00 and 5.00."""
    pizza = await _add_dish(restaurant.client, name="Margherita", price=10.00)
    salad = await _add_dish(
        restaurant.client,
        name="Caesar Salad",
        price=5.00,
        category="Salad",
        description="Romaine, parmesan, croutons",
        ingredients="Romaine, parmesan, croutons, dressing",
    )
    return {"pizza": pizza, "salad": salad}
