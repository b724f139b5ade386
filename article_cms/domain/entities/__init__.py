from .article import Article, ArticleStatus
from .category import Category
from .service_result import (
    DeleteAcknowledgement,
    FallbackReason,
    ResultSource,
    ServiceResult,
)

__all__ = [
    "Article",
    "ArticleStatus",
    "Category",
    "DeleteAcknowledgement",
    "FallbackReason",
    "ResultSource",
    "ServiceResult",
]
