"""Body returned for every failed request, whatever the status code."""

from typing import Any

from pydantic import BaseModel


class ErrorBody(BaseModel):
    code: str  # e.g. INVALID_CREDENTIALS, UNAUTHENTICATED, VALIDATION_ERROR
    message: str
    details: Any = None


class ErrorResponse(BaseModel):
    error: ErrorBody
    request_id: str | None = None
