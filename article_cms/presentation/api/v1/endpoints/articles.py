"""Article endpoints: CRUD, search, and the editor compose, edit and preview actions."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from article_cms.application.schemas import (
    ArticleCreate,
    ArticleForm,
    ArticlePageResponse,
    ArticlePreviewRequest,
    ArticlePreviewResponse,
    ArticleResponse,
    ArticleUpdate,
    DeleteResponse,
)
from article_cms.application.services import ArticleService
from article_cms.application.services.article_listing import Role
from article_cms.application.services.content_formatter import render_markdown_preview
from article_cms.config import get_settings
from article_cms.domain.entities import Article, ServiceResult
from article_cms.domain.exceptions import EntityNotFoundError
from article_cms.infrastructure.dependencies import get_article_service
from article_cms.presentation.api.provenance import tag_response

router = APIRouter(prefix="/articles", tags=["Articles"])


def _ensure_found(result: ServiceResult, article_id: int) -> None:
    if result.data is None:
        error = EntityNotFoundError("Article", article_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))


def _found(result: ServiceResult[Article | None], article_id: int) -> ArticleResponse:
    """Unwrap a single-article result or raise 404."""
    _ensure_found(result, article_id)
    return ArticleResponse.from_entity(result.data)


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    response: Response,
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve every article in store order."""
    result = await service.list_articles()
    tag_response(response, result)
    return [ArticleResponse.from_entity(a) for a in result.data]


@router.get("/search", response_model=ArticlePageResponse)
async def search_articles(
    response: Response,
    search: str | None = Query(None, description="Case-insensitive text to match"),
    category: str | None = Query(None, description="Exact category name, or 'all'"),
    article_status: str | None = Query(None, alias="status", description="Published, Draft or 'all'"),
    role: Role = Query(Role.USER, description="Trusted role hint; changes which fields are searched"),
    page: int = Query(1, ge=1),
    per_page: int | None = Query(None, ge=1, le=100),
    service: ArticleService = Depends(get_article_service),
) -> ArticlePageResponse:
    """Filter and paginate articles the way the dashboards do."""
    result = await service.search_articles(
        search=search,
        category=category,
        status=article_status,
        role=role,
        page=page,
        per_page=per_page or get_settings().page_size,
    )
    tag_response(response, result)
    found = result.data
    return ArticlePageResponse(
        items=[ArticleResponse.from_entity(a) for a in found.items],
        page=found.page,
        per_page=found.per_page,
        total=found.total,
        total_pages=found.total_pages,
        page_numbers=found.page_numbers,
    )


@router.post("/preview", response_model=ArticlePreviewResponse)
async def preview_article(data: ArticlePreviewRequest) -> ArticlePreviewResponse:
    """Render editor text the way the live preview pane shows it."""
    return ArticlePreviewResponse(html=render_markdown_preview(data.content))


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int,
    response: Response,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    result = await service.get_article(article_id)
    tag_response(response, result)
    return _found(result, article_id)


@router.get("/{article_id}/related", response_model=list[ArticleResponse])
async def get_related_articles(
    article_id: int,
    response: Response,
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Articles linked from the given one; empty when it does not exist."""
    result = await service.related_articles(article_id)
    tag_response(response, result)
    return [ArticleResponse.from_entity(a) for a in result.data]


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    response: Response,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create an article; missing fields receive their defaults."""
    result = await service.create_article(data)
    tag_response(response, result)
    return ArticleResponse.from_entity(result.data)


@router.post("/compose", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def compose_article(
    form: ArticleForm,
    response: Response,
    draft: bool = Query(False, description="Save as Draft instead of publishing"),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create an article from raw editor input."""
    result = await service.submit_form(form, draft=draft)
    tag_response(response, result)
    return ArticleResponse.from_entity(result.data)


@router.get("/{article_id}/compose", response_model=ArticleForm)
async def get_editor_form(
    article_id: int,
    response: Response,
    service: ArticleService = Depends(get_article_service),
) -> ArticleForm:
    """Editor fields of an existing article, content as plain text."""
    result = await service.editor_form(article_id)
    tag_response(response, result)
    _ensure_found(result, article_id)
    return result.data


@router.put("/{article_id}/compose", response_model=ArticleResponse)
async def edit_article(
    article_id: int,
    form: ArticleForm,
    response: Response,
    draft: bool = Query(False, description="Save as Draft, keeping stored values for empty fields"),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Apply editor input to an existing article."""
    result = await service.submit_edit(article_id, form, draft=draft)
    tag_response(response, result)
    return _found(result, article_id)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: int,
    data: ArticleUpdate,
    response: Response,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Replace an article wholesale.

    An unknown id is echoed back as if it had been saved.
    """
    result = await service.update_article(article_id, data)
    tag_response(response, result)
    return ArticleResponse.from_entity(result.data)


@router.post("/{article_id}/publish", response_model=ArticleResponse)
async def publish_article(
    article_id: int,
    response: Response,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Publish an article and stamp today's date."""
    result = await service.publish_article(article_id)
    tag_response(response, result)
    return _found(result, article_id)


@router.post("/{article_id}/draft", response_model=ArticleResponse)
async def save_draft(
    article_id: int,
    response: Response,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Move an article back to Draft and stamp today's date."""
    result = await service.save_draft(article_id)
    tag_response(response, result)
    return _found(result, article_id)


@router.delete("/{article_id}", response_model=DeleteResponse)
async def delete_article(
    article_id: int,
    response: Response,
    service: ArticleService = Depends(get_article_service),
) -> DeleteResponse:
    """Delete an article by ID. Succeeds whether or not it existed."""
    result = await service.delete_article(article_id)
    tag_response(response, result)
    return DeleteResponse(success=result.data.success, id=result.data.id)
