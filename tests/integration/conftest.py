"""
Fixtures for end-to-end API tests.

The schema is dropped and recreated before each test. The TestClient is
used as a context manager so the lifespan runs and HTTP requests and
WebSocket sessions share one event loop.
"""

import asyncio
from typing import Any, Callable, Optional

import pytest
from fastapi.testclient import TestClient

from src.api.main import app
from src.shared.db import engine
from src.shared.models import Base


DEFAULT_PASSWORD = "correct-horse-battery"


async def _reset_schema() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def database() -> None:
    asyncio.run(_reset_schema())


@pytest.fixture
def client(database) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_user(client: TestClient) -> Callable[..., dict[str, Any]]:
    """Register a user and return the AuthResponse body."""

    def _register(
        email: str = "alice@example.com",
        password: str = DEFAULT_PASSWORD,
        full_name: Optional[str] = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"email": email, "password": password}
        if full_name is not None:
            payload["full_name"] = full_name
        response = client.post("/auth/register", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _register


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(register_user) -> dict[str, str]:
    """Authorization header for alice@example.com."""
    return _bearer(register_user()["access_token"])


@pytest.fixture
def other_headers(register_user) -> dict[str, str]:
    """Authorization header for a second user, bob@example.com."""
    return _bearer(register_user(email="bob@example.com")["access_token"])
