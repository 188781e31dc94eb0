"""Document store contract shared by the Redis and in-memory backends.

Documents are JSON objects addressed by string keys. Writers never do a
plain get-then-set: every write goes through ``update``, which applies a
mutator to the current document atomically, so two players finishing at the
same time cannot overwrite each other's leaderboard merge.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

Document = dict[str, Any]
Mutator = Callable[[Document | None], Document]


class StoreError(RuntimeError):
    """A document store operation failed (network, auth, permission...)."""


class StoreConflictError(StoreError):
    """Optimistic update kept losing to concurrent writers."""


class DocumentStore(Protocol):
    async def get(self, key: str) -> Document | None: ...

    async def update(self, key: str, mutate: Mutator) -> Document: ...

    async def ping(self) -> bool: ...

    async def close(self) -> None: ...


def user_progress_key(namespace: str, user_id: str) -> str:
    """Key of a user's progress document."""
    return f"{namespace}:users:{user_id}"


def leaderboard_key(namespace: str, board: str) -> str:
    """Key of a per-game (or the ``global``) leaderboard document."""
    return f"{namespace}:leaderboards:{board}"
