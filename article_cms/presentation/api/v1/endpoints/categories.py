"""Category CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from article_cms.application.schemas import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    DeleteResponse,
)
from article_cms.application.services import CategoryService
from article_cms.domain.exceptions import CategoryInUseError, EntityNotFoundError
from article_cms.infrastructure.dependencies import get_category_service
from article_cms.presentation.api.provenance import tag_response

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    response: Response,
    search: str | None = Query(None, description="Case-insensitive name filter"),
    service: CategoryService = Depends(get_category_service),
) -> list[CategoryResponse]:
    """Retrieve every category, optionally filtered by name."""
    result = await service.list_categories(search=search)
    tag_response(response, result)
    return [CategoryResponse.from_entity(c) for c in result.data]


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int,
    response: Response,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """Retrieve a single category by ID."""
    result = await service.get_category(category_id)
    tag_response(response, result)
    if result.data is None:
        error = EntityNotFoundError("Category", category_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    return CategoryResponse.from_entity(result.data)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    data: CategoryCreate,
    response: Response,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """Create a category. Its article count always starts at 0."""
    result = await service.create_category(data)
    tag_response(response, result)
    return CategoryResponse.from_entity(result.data)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    data: CategoryUpdate,
    response: Response,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """Replace a category wholesale."""
    result = await service.update_category(category_id, data)
    tag_response(response, result)
    return CategoryResponse.from_entity(result.data)


async def _ensure_deletable(service: CategoryService, category_id: int) -> None:
    """Refuse to delete a category that still reports articles."""
    current = await service.get_category(category_id)
    if current.data is not None and current.data.article_count > 0:
        raise CategoryInUseError(category_id, current.data.article_count)


@router.delete("/{category_id}", response_model=DeleteResponse)
async def delete_category(
    category_id: int,
    response: Response,
    service: CategoryService = Depends(get_category_service),
) -> DeleteResponse:
    """Delete a category by ID, unless it still has articles."""
    try:
        await _ensure_deletable(service, category_id)
    except CategoryInUseError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    result = await service.delete_category(category_id)
    tag_response(response, result)
    return DeleteResponse(success=result.data.success, id=result.data.id)
