from .article_service import ArticleService
from .category_service import CategoryService
from .content_service import ContentService

__all__ = [
    "ArticleService",
    "CategoryService",
    "ContentService",
]
