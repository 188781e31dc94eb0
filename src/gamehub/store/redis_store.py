"""Redis-backed document store. Documents are JSON strings under plain keys.

Atomic updates use optimistic locking: WATCH the key, read, MULTI/EXEC the
new value. EXEC aborts with WatchError when another client touched the key
in between, and the mutation is replayed against the fresh document.
"""

from __future__ import annotations

import json

import redis.asyncio as aioredis
import structlog
from redis.exceptions import RedisError, WatchError

from gamehub.store.base import Document, Mutator, StoreConflictError, StoreError

logger = structlog.get_logger()


class RedisDocumentStore:
    """Document store on top of a shared ``redis.asyncio`` client."""

    def __init__(self, redis: aioredis.Redis, max_retries: int = 5) -> None:
        self.redis = redis
        self.max_retries = max_retries

    async def get(self, key: str) -> Document | None:
        try:
            raw = await self.redis.get(key)
        except RedisError as exc:
            msg = f"Failed to read {key}"
            raise StoreError(msg) from exc
        return json.loads(raw) if raw else None

    async def update(self, key: str, mutate: Mutator) -> Document:
        """Apply ``mutate`` to the stored document and write the result atomically."""
        try:
            async with self.redis.pipeline(transaction=True) as pipe:
                for attempt in range(1, self.max_retries + 1):
                    try:
                        await pipe.watch(key)
                        raw = await pipe.get(key)
                        updated = mutate(json.loads(raw) if raw else None)
                        pipe.multi()
                        pipe.set(key, json.dumps(updated))
                        await pipe.execute()
                        return updated
                    except WatchError:
                        logger.warning("store_conflict_retry", key=key, attempt=attempt)
        except RedisError as exc:
            msg = f"Failed to update {key}"
            raise StoreError(msg) from exc

        msg = f"Gave up updating {key} after {self.max_retries} conflicting writes"
        raise StoreConflictError(msg)

    async def ping(self) -> bool:
        try:
            return bool(await self.redis.ping())
        except RedisError:
            return False

    async def close(self) -> None:
        # The pool is owned by gamehub.store.client
        return None
