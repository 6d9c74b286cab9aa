"""
Domain exceptions for the construction office service.
"""
from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base exception for domain-specific errors."""

    status_code = 400

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)


class InvalidCredentialsError(DomainError):
    """Raised on a failed login. Unknown user and wrong password look the same."""

    status_code = 401

    def __init__(self, message: str = "invalid credentials"):
        super().__init__(code="INVALID_CREDENTIALS", message=message)


class UnauthenticatedError(DomainError):
    """Raised when a protected endpoint is called without a live session."""

    status_code = 401

    def __init__(self, message: str = "not logged in"):
        super().__init__(code="UNAUTHENTICATED", message=message)
