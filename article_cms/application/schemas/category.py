"""Pydantic DTOs for the Category feature."""

from dataclasses import asdict
from typing import Any

from pydantic import BaseModel, Field

from article_cms.application.schemas.article import CAMEL_CASE_CONFIG
from article_cms.domain.entities import Category


class CategoryCreate(BaseModel):
    """Schema for creating a category.

    ``article_count`` is accepted for compatibility but always reset to 0.
    """

    name: str = Field(..., min_length=1, max_length=100, examples=["Technology"])
    article_count: int | None = None

    model_config = CAMEL_CASE_CONFIG


class CategoryUpdate(BaseModel):
    """Schema for updating a category (full record replace)."""

    name: str = Field(..., min_length=1, max_length=100)
    article_count: int = 0

    model_config = CAMEL_CASE_CONFIG

    @classmethod
    def payload_from_entity(cls, category: Category) -> dict[str, Any]:
        return cls.model_validate(asdict(category)).model_dump(by_alias=True, mode="json")


class CategoryResponse(BaseModel):
    """Schema returned to the client, and expected back from the remote API."""

    id: int
    name: str
    article_count: int = 0

    model_config = CAMEL_CASE_CONFIG

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryResponse":
        return cls.model_validate(asdict(category))

    def to_entity(self) -> Category:
        return Category(**self.model_dump())
