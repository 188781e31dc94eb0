"""Shared test fixtures."""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
import redis.asyncio as redis
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from redis.exceptions import RedisError

from gamehub.config import get_settings
from gamehub.main import create_app
from gamehub.store.base import Document, Mutator, StoreError
from gamehub.store.client import close_store, get_store, init_store
from gamehub.store.memory_store import MemoryDocumentStore

TEST_NAMESPACE = "gamehub-test"


class UnreachableStore:
    """Store whose every call fails like a dropped connection."""

    async def get(self, key: str) -> Document | None:
        msg = f"Failed to read {key}"
        raise StoreError(msg)

    async def update(self, key: str, mutate: Mutator) -> Document:
        msg = f"Failed to update {key}"
        raise StoreError(msg)

    async def ping(self) -> bool:
        return False

    async def close(self) -> None:
        return None


@pytest.fixture
def store() -> MemoryDocumentStore:
    """Fresh in-memory document store."""
    return MemoryDocumentStore()


@pytest_asyncio.fixture
async def app() -> AsyncGenerator[FastAPI, None]:
    """App running on a fresh in-memory store."""
    os.environ["GAMEHUB_STORE_BACKEND"] = "memory"
    os.environ["GAMEHUB_STORE_NAMESPACE"] = TEST_NAMESPACE
    get_settings.cache_clear()

    application = create_app()
    await init_store(get_settings())

    yield application

    application.dependency_overrides.clear()
    await close_store()
    os.environ.pop("GAMEHUB_STORE_BACKEND", None)
    os.environ.pop("GAMEHUB_STORE_NAMESPACE", None)
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for the test app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def store_down(app: FastAPI) -> UnreachableStore:
    """Swap the app's store for one that always fails."""
    unreachable = UnreachableStore()
    app.dependency_overrides[get_store] = lambda: unreachable
    return unreachable


@pytest_asyncio.fixture
async def redis_client() -> AsyncGenerator[redis.Redis, None]:
    """Redis client for store tests; skips when no server is reachable."""
    rc = redis.from_url(get_settings().redis_url, decode_responses=True)
    try:
        await rc.ping()
    except (RedisError, OSError):
        await rc.aclose()
        pytest.skip("Redis not reachable")

    yield rc

    keys = await rc.keys(f"{TEST_NAMESPACE}:*")
    if keys:
        await rc.delete(*keys)
    await rc.aclose()
