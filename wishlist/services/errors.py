"""Typed service errors raised at decision points in the service layer."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes exposed to API clients."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL = "INTERNAL"


class ServiceError(Exception):
    """A failure the HTTP boundary knows how to translate into a response.

    ``context`` carries extra diagnostic values (ids, filters) for the logs.
    """

    def __init__(self, code: ErrorCode, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = context or {}

    def __repr__(self) -> str:
        return f"ServiceError(code={self.code.value!r}, message={self.message!r})"

    @classmethod
    def not_found(cls, message: str, context: dict[str, Any] | None = None) -> "ServiceError":
        return cls(ErrorCode.NOT_FOUND, message, context)

    @classmethod
    def unauthorized(cls, message: str, context: dict[str, Any] | None = None) -> "ServiceError":
        return cls(ErrorCode.UNAUTHORIZED, message, context)

    @classmethod
    def forbidden(cls, message: str, context: dict[str, Any] | None = None) -> "ServiceError":
        return cls(ErrorCode.FORBIDDEN, message, context)

    @classmethod
    def conflict(cls, message: str, context: dict[str, Any] | None = None) -> "ServiceError":
        return cls(ErrorCode.CONFLICT, message, context)
