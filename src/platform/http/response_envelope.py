from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel


T = TypeVar('T')


class ResponseEnvelope(BaseModel, Generic[T]):
    """Shape shared by every success and error body: {status, message, data, meta}"""

    status: str
    message: str
    data: Optional[T] = None
    meta: Optional[Any] = None


class PaginationMeta(BaseModel):
    page: int
    size: int
    total: int
