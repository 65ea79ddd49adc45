"""Error response schema."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every error response."""

    code: str
    details: Any
    stack: list[str] | None = None
