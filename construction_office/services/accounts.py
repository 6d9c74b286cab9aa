from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.security import burn_password_check, hash_password, verify_password
from ..exceptions import InvalidCredentialsError
from ..models.user import User

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"
ADMIN_ROLE = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.execute(select(User).where(User.username == username)).scalar_one_or_none()


def seed_admin(db: Session, password: str = DEFAULT_ADMIN_PASSWORD) -> bool:
    """
    Create the administrator account unless one named "admin" already exists.

    Returns True when a user was inserted. Later boots are a no-op, so a changed
    ADMIN_PASSWORD does not overwrite an existing account.
    """
    if get_user_by_username(db, ADMIN_USERNAME) is not None:
        return False

    db.add(User(username=ADMIN_USERNAME, password=hash_password(password), role=ADMIN_ROLE))
    db.commit()
    logger.info("seed_admin: created user %s", ADMIN_USERNAME)
    if password == DEFAULT_ADMIN_PASSWORD:
        logger.warning("seed_admin: %s uses the default password; rotate it", ADMIN_USERNAME)
    return True


def authenticate(db: Session, username: str, password: str) -> User:
    """Return the matching user or raise InvalidCredentialsError."""
    user = get_user_by_username(db, username)
    if user is None:
        burn_password_check()
        raise InvalidCredentialsError()
    if not verify_password(password, user.password):
        raise InvalidCredentialsError()
    return user
