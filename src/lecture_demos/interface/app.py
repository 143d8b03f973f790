"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from lecture_demos.infrastructure.config import get_settings
from lecture_demos.infrastructure.memory_store import InMemoryForecastStore
from lecture_demos.interface.dependencies import shutdown, startup
from lecture_demos.interface.error_handlers import register_error_handlers
from lecture_demos.interface.routes import chat_router, forecast_router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app(forecast_store: InMemoryForecastStore | None = None) -> FastAPI:
    """Build and wire the FastAPI application.

    A seeded in-memory store is created unless *forecast_store* is given.
    """
    settings = get_settings()
    app = FastAPI(
        title="Lecture Demos",
        version="1.0.0",
        description=(
            "Two instructional demos: a chat endpoint that extracts key "
            "phrases through an LLM with structured output, and an "
            "in-memory weather forecast CRUD API."
        ),
        lifespan=_lifespan,
    )

    if forecast_store is None:
        forecast_store = InMemoryForecastStore.seeded(settings.forecast_seed_count)
    app.state.forecast_store = forecast_store

    register_error_handlers(app)
    app.include_router(chat_router)
    app.include_router(forecast_router)

    # ── Health check (simple liveness probe) ────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
