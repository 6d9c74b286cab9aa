"""Password hashing and the session gate for business endpoints."""

from fastapi import Request
from passlib.context import CryptContext

from ..exceptions import UnauthenticatedError
from .sessions import SessionData

SESSION_KEY = "sid"

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def burn_password_check() -> None:
    """Spend the same time as a real verify when there is no user to check against."""
    pwd_context.dummy_verify()


def current_session(request: Request) -> SessionData | None:
    return request.app.state.sessions.get(request.session.get(SESSION_KEY))


def require_session(request: Request) -> SessionData:
    """
    Gate for business endpoints.

    Raises 401 before any database work when the cookie carries no live session.
    """
    data = current_session(request)
    if data is None:
        raise UnauthenticatedError()
    return data
