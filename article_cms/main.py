"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from article_cms.config import get_settings
from article_cms.infrastructure.container import build_container
from article_cms.infrastructure.logging.log_config import setup_logging
from article_cms.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging and report the data source."""
    setup_logging()
    settings = get_settings()
    if not settings.remote_api_enabled:
        logger.info("Remote content API disabled; serving from in-memory store")
    yield


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    Each call gets its own content container, hence its own in-memory stores.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.content = build_container(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Data-Source", "X-Fallback-Reason"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "article_cms.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
