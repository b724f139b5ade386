"""Pydantic DTOs (Data Transfer Objects) for the Article feature.

Field names are snake_case in Python and camelCase on the wire
(``readTime``, ``relatedArticles``), matching the remote content API.
"""

from dataclasses import asdict
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from article_cms.domain.entities import Article, ArticleStatus

CAMEL_CASE_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class ArticleFields(BaseModel):
    """Every article field except ``id``; the shape sent to the remote API."""

    title: str = Field(..., min_length=1, max_length=255, examples=["The Future of AI"])
    category: str | None = Field(None, examples=["Technology"])
    author: str | None = Field(None, examples=["John Smith"])
    date: str | None = Field(None, examples=["2024-05-01"])
    read_time: str | None = Field(None, examples=["8 min read"])
    status: ArticleStatus | None = None
    excerpt: str | None = None
    content: str | None = None
    related_articles: list[int] = Field(default_factory=list)

    model_config = CAMEL_CASE_CONFIG

    @classmethod
    def payload_from_entity(cls, article: Article) -> dict[str, Any]:
        """Serialize an entity into a camelCase JSON payload (no ``id``)."""
        return cls.model_validate(asdict(article)).model_dump(by_alias=True, mode="json")


class ArticleCreate(BaseModel):
    """Schema for creating an article. Only the title is required."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Getting Started"])
    category: str | None = None
    author: str | None = None
    date: str | None = None
    read_time: str | None = None
    status: ArticleStatus | None = None
    excerpt: str | None = None
    content: str | None = None
    related_articles: list[int] | None = None

    model_config = CAMEL_CASE_CONFIG


class ArticleUpdate(ArticleFields):
    """Schema for updating an article: a full record, omitted fields are cleared."""


class ArticleForm(BaseModel):
    """Raw input from the admin editor, before it is shaped into an article."""

    title: str = Field(..., min_length=1, max_length=255)
    category: str | None = None
    content: str | None = Field(None, examples=["First paragraph.\n\nSecond paragraph."])
    excerpt: str | None = None

    model_config = CAMEL_CASE_CONFIG


class ArticlePreviewRequest(BaseModel):
    """Editor text to render for the preview pane."""

    content: str | None = None


class ArticlePreviewResponse(BaseModel):
    html: str


class ArticleResponse(ArticleFields):
    """Schema returned to the client, and expected back from the remote API."""

    id: int

    @classmethod
    def from_entity(cls, article: Article) -> "ArticleResponse":
        return cls.model_validate(asdict(article))

    def to_entity(self) -> Article:
        return Article(**self.model_dump())


class ArticlePageResponse(BaseModel):
    """One page of a filtered article listing."""

    items: list[ArticleResponse]
    page: int
    per_page: int
    total: int
    total_pages: int
    page_numbers: list[int]

    model_config = CAMEL_CASE_CONFIG
