"""Health, readiness, and version endpoints."""

from fastapi import APIRouter, Depends

from gamehub.config import get_settings
from gamehub.store.base import DocumentStore
from gamehub.store.client import get_store

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe — returns 200 if the process is alive."""
    return {"status": "healthy"}


@router.get("/ready")
async def readiness(
    store: DocumentStore = Depends(get_store),  # noqa: B008
) -> dict[str, object]:
    """Readiness probe — checks document store connectivity."""
    checks: dict[str, object] = {
        "store": "ok" if await store.ping() else "error: unreachable",
    }
    all_ok = all(v == "ok" for v in checks.values())
    return {"status": "ready" if all_ok else "degraded", "checks": checks}


@router.get("/version")
async def version() -> dict[str, str]:
    """Return API version and environment."""
    settings = get_settings()
    return {
        "version": settings.app_version,
        "environment": settings.environment,
    }
