"""Integration tests for the Progress API endpoints."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _create(client: AsyncClient, user_id: str = "u1", name: str = "Ada") -> dict:
    response = await client.post(f"/api/v1/progress/{user_id}", json={"player_name": name})
    assert response.status_code == 200
    return response.json()


async def test_create_and_read(client: AsyncClient) -> None:
    """A created record starts every game at level 1 and reads back unchanged."""
    created = await _create(client)
    assert created["user_id"] == "u1"
    assert created["games"]["quick-count"]["current_level"] == 1

    response = await client.get("/api/v1/progress/u1")
    assert response.status_code == 200
    assert response.json() == created


async def test_create_is_idempotent(client: AsyncClient) -> None:
    """Creating twice returns the first record."""
    created = await _create(client)
    again = await _create(client, name="Other")
    assert again == created


async def test_player_name_required(client: AsyncClient) -> None:
    response = await client.post("/api/v1/progress/u1", json={"player_name": ""})
    assert response.status_code == 422


async def test_unknown_user(client: AsyncClient) -> None:
    response = await client.get("/api/v1/progress/ghost")
    assert response.status_code == 404


async def test_complete_level(client: AsyncClient) -> None:
    """A won round is scored and advances the level."""
    await _create(client)
    response = await client.post(
        "/api/v1/progress/u1/quick-count/complete", json={"time_ms": 2_000},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["result"]["score"] == 185  # 100 + 80 + 5
    game = data["progress"]["games"]["quick-count"]
    assert game["current_level"] == 2
    assert game["best_level"] == 1
    assert game["total_score"] == 185
    assert game["best_time"] == 2_000


async def test_lost_round_rejected(client: AsyncClient) -> None:
    """Lost rounds cannot complete a level."""
    await _create(client)
    response = await client.post(
        "/api/v1/progress/u1/quick-count/complete", json={"won": False, "time_ms": 2_000},
    )
    assert response.status_code == 400


async def test_unknown_game_not_found(client: AsyncClient) -> None:
    """Completing a level of an unknown game is a 404."""
    await _create(client)
    response = await client.post("/api/v1/progress/u1/snake/complete", json={"time_ms": 2_000})
    assert response.status_code == 404
    assert response.json()["detail"] == "Unknown game: snake"


async def test_game_over_unknown_game_not_found(client: AsyncClient) -> None:
    await _create(client)
    response = await client.post("/api/v1/progress/u1/snake/game-over")
    assert response.status_code == 404
    assert response.json()["detail"] == "Unknown game: snake"


async def test_complete_before_create(client: AsyncClient) -> None:
    response = await client.post("/api/v1/progress/ghost/quick-count/complete", json={"time_ms": 2_000})
    assert response.status_code == 404
    assert response.json()["detail"] == "Progress not found"


async def test_game_over(client: AsyncClient) -> None:
    """Game over resets the level but keeps the bests."""
    await _create(client)
    for _ in range(2):
        await client.post("/api/v1/progress/u1/memory-match/complete", json={"time_ms": 30_000, "attempts": 8})
    response = await client.post("/api/v1/progress/u1/memory-match/game-over")
    assert response.status_code == 200
    game = response.json()["games"]["memory-match"]
    assert game["current_level"] == 1
    assert game["best_level"] == 2
    assert game["best_attempts"] == 8


async def test_game_over_unknown_user(client: AsyncClient) -> None:
    response = await client.post("/api/v1/progress/ghost/memory-match/game-over")
    assert response.status_code == 404


async def test_store_down(client: AsyncClient, store_down) -> None:
    """Store failures surface as 503."""
    response = await client.post("/api/v1/progress/u1/quick-count/complete", json={"time_ms": 2_000})
    assert response.status_code == 503
    assert response.json()["detail"] == "Update failed"

    response = await client.get("/api/v1/progress/u1")
    assert response.status_code == 503
