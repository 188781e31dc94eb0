"""Process-wide document store, selected by ``store_backend``.

The Redis backend also owns the connection pool; the rate limiter borrows it
through ``get_redis``.
"""

import redis.asyncio as redis

from gamehub.config import Settings
from gamehub.store.base import DocumentStore
from gamehub.store.memory_store import MemoryDocumentStore
from gamehub.store.redis_store import RedisDocumentStore

_store: DocumentStore | None = None
_pool: redis.Redis | None = None


async def init_store(settings: Settings) -> DocumentStore:
    """Create the configured store backend."""
    global _store, _pool  # noqa: PLW0603
    if settings.store_backend == "memory":
        _store = MemoryDocumentStore()
    elif settings.store_backend == "redis":
        _pool = redis.from_url(  # type: ignore[no-untyped-call]
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
            max_connections=20,
        )
        _store = RedisDocumentStore(_pool, max_retries=settings.store_max_retries)
    else:
        msg = f"Unknown store backend: {settings.store_backend}"
        raise ValueError(msg)
    return _store


async def close_store() -> None:
    """Close the store and the Redis pool behind it, if any."""
    global _store, _pool  # noqa: PLW0603
    if _store:
        await _store.close()
        _store = None
    if _pool:
        await _pool.aclose()
        _pool = None


def get_store() -> DocumentStore:
    """Get the document store (FastAPI dependency)."""
    if _store is None:
        msg = "Store not initialized. Call init_store() first."
        raise RuntimeError(msg)
    return _store


def get_redis() -> redis.Redis:
    """Get the Redis pool; only set up when the Redis backend is active."""
    if _pool is None:
        msg = "Redis not initialized. The store backend is not redis."
        raise RuntimeError(msg)
    return _pool
