"""In-memory search, filtering and pagination over article and category lists.

Readers search titles and excerpts; admins search titles and category names
and can additionally filter by status.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Sequence, TypeVar

from article_cms.domain.entities import Article, Category

T = TypeVar("T")

ALL = "all"
DEFAULT_PER_PAGE = 5
PAGE_WINDOW_SIZE = 5


class Role(str, Enum):
    """Trusted role hint passed by the caller. Never enforced."""

    ADMIN = "admin"
    USER = "user"


@dataclass
class Page(Generic[T]):
    items: list[T]
    page: int
    per_page: int
    total: int
    total_pages: int
    page_numbers: list[int] = field(default_factory=list)


def _is_wildcard(value: str | None) -> bool:
    return not value or value.lower() == ALL


def _contains(haystack: str | None, needle: str) -> bool:
    return bool(haystack) and needle in haystack.lower()


def filter_articles(
    articles: Sequence[Article],
    *,
    search: str | None = None,
    category: str | None = None,
    status: str | None = None,
    role: Role = Role.USER,
) -> list[Article]:
    """Return the articles matching every supplied criterion, order preserved."""
    needle = (search or "").lower()
    results: list[Article] = []
    for article in articles:
        if needle:
            if role is Role.ADMIN:
                matched = _contains(article.title, needle) or _contains(article.category, needle)
            else:
                matched = _contains(article.title, needle) or _contains(article.excerpt, needle)
            if not matched:
                continue
        if not _is_wildcard(category) and article.category != category:
            continue
        if not _is_wildcard(status):
            current = article.status.value if article.status else ""
            if current.lower() != status.lower():
                continue
        results.append(article)
    return results


def filter_categories(categories: Sequence[Category], search: str | None = None) -> list[Category]:
    needle = (search or "").lower()
    if not needle:
        return list(categories)
    return [c for c in categories if _contains(c.name, needle)]


def related_to(article: Article, articles: Sequence[Article]) -> list[Article]:
    """Articles listed in ``article.related_articles``; dangling ids are skipped."""
    wanted = set(article.related_articles or [])
    return [a for a in articles if a.id in wanted]


def page_window(current: int, total_pages: int, size: int = PAGE_WINDOW_SIZE) -> list[int]:
    """Page numbers to show in a pager: at most ``size``, sliding past page 3."""
    numbers: list[int] = []
    for i in range(min(total_pages, size)):
        number = i + 1
        if total_pages > size and current > 3:
            number = current - 3 + i
        if number > total_pages:
            break
        numbers.append(number)
    return numbers


def paginate(items: Sequence[T], page: int = 1, per_page: int = DEFAULT_PER_PAGE) -> Page[T]:
    """Slice one page out of ``items``. Pages past the end are empty."""
    if per_page < 1:
        raise ValueError("per_page must be at least 1")
    page = max(page, 1)
    total = len(items)
    total_pages = math.ceil(total / per_page)
    start = (page - 1) * per_page
    return Page(
        items=list(items[start : start + per_page]),
        page=page,
        per_page=per_page,
        total=total,
        total_pages=total_pages,
        page_numbers=page_window(page, total_pages),
    )
