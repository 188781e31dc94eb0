"""Integration tests for the Leaderboards API endpoints."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_empty_game_board(client: AsyncClient) -> None:
    """A board nobody has played is empty, not missing."""
    response = await client.get("/api/v1/leaderboards/quick-count")
    assert response.status_code == 200
    assert response.json() == {"board": "quick-count", "players": [], "updated_at": None}


async def test_empty_global_board(client: AsyncClient) -> None:
    response = await client.get("/api/v1/leaderboards/global")
    assert response.status_code == 200
    assert response.json() == {"players": [], "updated_at": None}


async def test_unknown_board(client: AsyncClient) -> None:
    """Unknown game ids are a 404."""
    response = await client.get("/api/v1/leaderboards/snake")
    assert response.status_code == 404
    assert response.json()["detail"] == "Unknown leaderboard: snake"


async def test_boards_after_play(client: AsyncClient) -> None:
    """Finished rounds show up on the game board and the global board."""
    for user_id, name, rounds in (("u1", "Ada", 3), ("u2", "Grace", 1)):
        await client.post(f"/api/v1/progress/{user_id}", json={"player_name": name})
        for _ in range(rounds):
            await client.post(
                f"/api/v1/progress/{user_id}/higher-lower/complete",
                json={"time_ms": 8_000, "attempts": 5},
            )

    board = (await client.get("/api/v1/leaderboards/higher-lower")).json()
    assert [p["user_id"] for p in board["players"]] == ["u1", "u2"]
    assert board["players"][0]["best_level"] == 3
    assert board["players"][0]["best_attempts"] == 5
    assert board["updated_at"] is not None

    global_board = (await client.get("/api/v1/leaderboards/global")).json()
    assert [p["player_name"] for p in global_board["players"]] == ["Ada", "Grace"]
    first = global_board["players"][0]
    assert first["total_levels"] == 6
    assert first["total_score"] == first["total_levels"] * 10 + first["raw_score"]


async def test_store_down(client: AsyncClient, store_down) -> None:
    """An unreachable store is a 503."""
    response = await client.get("/api/v1/leaderboards/global")
    assert response.status_code == 503
    assert response.json()["detail"] == "Leaderboard unavailable"
