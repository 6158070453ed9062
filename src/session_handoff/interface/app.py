"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from session_handoff.interface.dependencies import shutdown, startup
from session_handoff.interface.error_handlers import register_error_handlers
from session_handoff.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="Session Handoff Generator",
        version="1.0.0",
        description=(
            "Takes an AI-assisted coding session (chat transcript plus the "
            "resulting code) and returns a short summary, a continuation-"
            "context document for another assistant, or a handoff README."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    # ── Health check (simple liveness probe) ────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
