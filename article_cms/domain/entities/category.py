"""Article categories."""

from dataclasses import dataclass


@dataclass
class Category:
    """A named grouping of articles.

    ``article_count`` is denormalised: nothing keeps it in step with the
    articles that actually name this category.
    """

    name: str
    article_count: int = 0
    id: int | None = None
