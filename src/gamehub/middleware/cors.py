"""Cross-origin access for the browser game clients."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gamehub.config import Settings


def setup_cors(app: FastAPI, settings: Settings) -> None:
    """Let ``GAMEHUB_CORS_ORIGINS`` read boards and post rounds.

    The API is cookie-less, so credentials stay off. Clients can read the
    request id and rate-limit headers to show quota and report errors.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id", "X-RateLimit-Remaining", "X-RateLimit-Limit"],
    )
