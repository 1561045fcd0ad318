"""
Common response schemas.
"""
from pydantic import BaseModel
from typing import Optional, List, Generic, TypeVar

T = TypeVar("T")


class MessageResponse(BaseModel):
    """Generic message response."""
    success: bool
    message: str
    data: Optional[dict] = None


class ErrorResponse(BaseModel):
    """Error response."""
    error: str
    detail: Optional[str] = None


class PageResponse(BaseModel, Generic[T]):
    """One page of a paginated listing."""
    items: List[T]
    page: int
    size: int
    total: int
