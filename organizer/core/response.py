"""Uniform service response wrapper."""

from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ResultKind(str, Enum):
    """Outcome of a service operation."""
    OK = "ok"
    INVALID_ID = "invalid_id"
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    STORE_UNAVAILABLE = "store_unavailable"
    STORE_ERROR = "store_error"


class ServiceResponse(BaseModel, Generic[T]):
    """Result of a service call: a kind, an optional payload and a message."""
    success: bool = Field(..., description="Whether the operation succeeded")
    kind: ResultKind = Field(ResultKind.OK, description="Outcome category")
    data: Optional[T] = Field(None, description="Payload on success")
    message: str = Field("", description="Human readable status")

    @classmethod
    def success_response(cls, data: Optional[T] = None, message: str = "OK") -> "ServiceResponse[T]":
        return cls(success=True, kind=ResultKind.OK, data=data, message=message)

    @classmethod
    def invalid_id(cls, message: str = "Invalid id") -> "ServiceResponse[T]":
        return cls(success=False, kind=ResultKind.INVALID_ID, message=message)

    @classmethod
    def not_found(cls, message: str = "Not found") -> "ServiceResponse[T]":
        return cls(success=False, kind=ResultKind.NOT_FOUND, message=message)

    @classmethod
    def validation_error(cls, message: str) -> "ServiceResponse[T]":
        return cls(success=False, kind=ResultKind.VALIDATION_ERROR, message=message)

    @classmethod
    def unavailable(cls, message: str = "MongoDB is not connected") -> "ServiceResponse[T]":
        return cls(success=False, kind=ResultKind.STORE_UNAVAILABLE, message=message)

    @classmethod
    def error_response(cls, message: str) -> "ServiceResponse[T]":
        return cls(success=False, kind=ResultKind.STORE_ERROR, message=message)
