"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from netra_gallery.api.categories import router as categories_router
from netra_gallery.api.errors import install_error_handlers
from netra_gallery.api.events import router as events_router
from netra_gallery.api.exhibitions import router as exhibitions_router
from netra_gallery.api.photographers import router as photographers_router
from netra_gallery.api.photos import router as photos_router
from netra_gallery.app_logging import configure_logging
from netra_gallery.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store = app.state.container.store
        logger.info(
            "Gallery API starting (%s): %d photographers, %d photos, "
            "%d exhibitions",
            app.state.container.settings.environment,
            len(store.photographers),
            len(store.photos),
            len(store.exhibitions),
        )
        yield

    app = FastAPI(title="NETRA Gallery API", lifespan=lifespan)
    app.state.container = container

    install_error_handlers(app)
    app.include_router(photographers_router)
    app.include_router(categories_router)
    app.include_router(photos_router)
    app.include_router(exhibitions_router)
    app.include_router(events_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
