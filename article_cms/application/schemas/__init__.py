from .article import (
    ArticleCreate,
    ArticleFields,
    ArticleForm,
    ArticlePageResponse,
    ArticlePreviewRequest,
    ArticlePreviewResponse,
    ArticleResponse,
    ArticleUpdate,
)
from .category import CategoryCreate, CategoryResponse, CategoryUpdate
from .common import DeleteResponse

__all__ = [
    "ArticleCreate",
    "ArticleFields",
    "ArticleForm",
    "ArticlePageResponse",
    "ArticlePreviewRequest",
    "ArticlePreviewResponse",
    "ArticleResponse",
    "ArticleUpdate",
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "DeleteResponse",
]
