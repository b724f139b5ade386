"""Application service (use case) for Category operations."""

from typing import Any

from article_cms.application.schemas import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
)
from article_cms.application.services.article_listing import filter_categories
from article_cms.application.services.content_service import ContentService
from article_cms.domain.entities import Category, DeleteAcknowledgement, ServiceResult


class CategoryService(ContentService[Category]):
    """Category CRUD with remote-first, store-fallback semantics.

    ``delete_category`` does not look at ``article_count``; refusing to delete
    a category that still has articles is the caller's job.
    """

    resource = "categories"
    entity_name = "Category"

    def _decode(self, payload: Any) -> Category:
        return CategoryResponse.model_validate(payload).to_entity()

    def _encode(self, entity: Category) -> dict[str, Any]:
        return CategoryUpdate.payload_from_entity(entity)

    async def list_categories(self, search: str | None = None) -> ServiceResult[list[Category]]:
        result = await self._list_records()
        if search:
            result.data = filter_categories(result.data, search)
        return result

    async def get_category(self, category_id: int | str) -> ServiceResult[Category | None]:
        return await self._get_record(category_id)

    async def create_category(self, data: CategoryCreate) -> ServiceResult[Category]:
        # New categories always start empty, whatever count the caller sent.
        return await self._create_record(Category(name=data.name, article_count=0))

    async def update_category(
        self, category_id: int | str, data: CategoryUpdate
    ) -> ServiceResult[Category]:
        return await self._update_record(
            category_id, Category(name=data.name, article_count=data.article_count)
        )

    async def delete_category(self, category_id: int | str) -> ServiceResult[DeleteAcknowledgement]:
        return await self._delete_record(category_id)
