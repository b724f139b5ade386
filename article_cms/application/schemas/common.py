"""DTOs shared by the article and category endpoints."""

from pydantic import BaseModel


class DeleteResponse(BaseModel):
    """Acknowledgement returned by every delete, matched or not."""

    success: bool
    id: int | str
