"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from article_cms.application.services import ArticleService, CategoryService
from article_cms.infrastructure.container import ContentContainer


def get_container(request: Request) -> ContentContainer:
    """The container built by ``create_app`` for this application instance."""
    return request.app.state.content


async def get_article_service(
    container: ContentContainer = Depends(get_container),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService bound to the app's article store."""
    yield ArticleService(container.article_store, container.remote_api, container.probe)


async def get_category_service(
    container: ContentContainer = Depends(get_container),
) -> AsyncGenerator[CategoryService, None]:
    """Provides a CategoryService bound to the app's category store."""
    yield CategoryService(container.category_store, container.remote_api, container.probe)
