"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cookify.api.ai import router as ai_router
from cookify.api.favorites import router as favorites_router
from cookify.api.recipes import router as recipes_router
from cookify.app_logging import configure_logging
from cookify.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Cookify", lifespan=lifespan)
    app.state.container = container

    app.include_router(recipes_router)
    app.include_router(favorites_router)
    app.include_router(ai_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
