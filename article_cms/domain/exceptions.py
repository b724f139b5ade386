"""Domain-specific exceptions: framework-independent."""

from article_cms.domain.entities import FallbackReason


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class CategoryInUseError(Exception):
    """Raised when deleting a category that still reports articles."""

    def __init__(self, category_id: int, article_count: int):
        self.category_id = category_id
        self.article_count = article_count
        super().__init__(
            f"Category with id '{category_id}' still has {article_count} article(s)"
        )


class TransportError(Exception):
    """Raised when the remote content API cannot serve a request.

    ``reason`` doubles as the fallback reason reported to callers once the
    service layer has recovered from the failure.
    """

    def __init__(
        self,
        reason: FallbackReason,
        message: str,
        status_code: int | None = None,
    ):
        self.reason = reason
        self.message = message
        self.status_code = status_code
        prefix = f"[{reason.value}]"
        if status_code is not None:
            prefix += f" {status_code}"
        super().__init__(f"{prefix}: {message}")
