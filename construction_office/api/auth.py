from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ..core.security import SESSION_KEY, require_session
from ..core.sessions import SessionData
from ..database import get_db
from ..exceptions import InvalidCredentialsError
from ..observability import log_json, request_id_of
from ..schemas.auth import Identity, LoginRequest, LogoutResponse, UserRead
from ..services import accounts

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=UserRead)
def login(payload: LoginRequest, request: Request, db: Session = Depends(get_db)):
    sessions = request.app.state.sessions
    try:
        user = accounts.authenticate(db, payload.username, payload.password)
    except InvalidCredentialsError:
        log_json(
            {"event": "auth.login_failed", "username": payload.username, "request_id": request_id_of(request)},
            level="warning",
        )
        raise

    # never reuse an id issued before login
    sessions.destroy(request.session.get(SESSION_KEY))
    sessions.purge_expired()
    request.session[SESSION_KEY] = sessions.create(user.id, user.username)

    log_json({"event": "auth.login", "user_id": user.id, "request_id": request_id_of(request)})
    return user


@router.post("/logout", response_model=LogoutResponse)
def logout(request: Request):
    request.app.state.sessions.destroy(request.session.get(SESSION_KEY))
    request.session.clear()
    log_json({"event": "auth.logout", "request_id": request_id_of(request)})
    return LogoutResponse(success=True)


@router.get("/me", response_model=Identity)
def me(identity: SessionData = Depends(require_session)):
    return Identity(id=identity.user_id, username=identity.username)
