"""Uniform success and error envelopes for API responses."""
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Wraps every successful payload: {"status": "OK", "message": "success", "data": ...}."""

    status: str = "OK"
    message: str = "success"
    data: Optional[T] = None

    @classmethod
    def ok(cls, data: T) -> "SuccessResponse[T]":
        return cls(data=data)


class ErrorResponse(BaseModel):
    """Body of every error raised as AppError (and of mapped database errors)."""

    status: str
    message: str
