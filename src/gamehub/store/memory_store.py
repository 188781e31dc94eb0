"""In-process document store for local development and tests."""

from __future__ import annotations

import asyncio
import json

from gamehub.store.base import Document, Mutator


class MemoryDocumentStore:
    """Keeps documents as JSON text so callers never share mutable state.

    One asyncio lock serializes every update. Mutators are synchronous, so
    the critical section never yields and a per-key lock would buy nothing.
    """

    def __init__(self) -> None:
        self._docs: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Document | None:
        raw = self._docs.get(key)
        return json.loads(raw) if raw else None

    async def update(self, key: str, mutate: Mutator) -> Document:
        async with self._lock:
            raw = json.dumps(mutate(await self.get(key)))
            self._docs[key] = raw
        return json.loads(raw)

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self._docs.clear()
