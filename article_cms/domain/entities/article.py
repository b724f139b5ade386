"""A short-form article, independent of transport and storage."""

from dataclasses import dataclass, field
from enum import Enum


class ArticleStatus(str, Enum):
    """Publication state of an article."""

    PUBLISHED = "Published"
    DRAFT = "Draft"


@dataclass
class Article:
    """Core domain entity representing an article.

    Only ``id`` uniqueness and the ``status`` enum are invariants; every other
    field is carried as supplied. ``related_articles`` may reference ids that
    no longer exist.
    """

    title: str
    category: str | None = None
    author: str | None = None
    date: str | None = None           # ISO calendar date, YYYY-MM-DD
    read_time: str | None = None      # free-text label, e.g. "8 min read"
    status: ArticleStatus | None = None
    excerpt: str | None = None
    content: str | None = None        # HTML-bearing text
    related_articles: list[int] = field(default_factory=list)
    id: int | None = None
