"""Server-side session store.

The browser only ever holds an opaque session id inside the signed session
cookie; who that id belongs to lives here, in process memory. Dropping an id
from the store logs the browser out even if it replays an old cookie.
"""
import secrets
import time
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class SessionData:
    user_id: int
    username: str
    expires_at: float

    def expired(self, now: Optional[float] = None) -> bool:
        return (now if now is not None else time.time()) >= self.expires_at


class SessionStore:
    def __init__(self, max_age: int):
        self.max_age = max_age
        self._sessions: Dict[str, SessionData] = {}

    def create(self, user_id: int, username: str) -> str:
        sid = secrets.token_urlsafe(32)
        self._sessions[sid] = SessionData(
            user_id=user_id, username=username, expires_at=time.time() + self.max_age
        )
        return sid

    def get(self, sid: Optional[str]) -> Optional[SessionData]:
        if not sid:
            return None
        data = self._sessions.get(sid)
        if data is None:
            return None
        if data.expired():
            self._sessions.pop(sid, None)
            return None
        return data

    def destroy(self, sid: Optional[str]) -> None:
        if sid:
            self._sessions.pop(sid, None)

    def purge_expired(self) -> int:
        now = time.time()
        stale = [sid for sid, data in self._sessions.items() if data.expired(now)]
        for sid in stale:
            self._sessions.pop(sid, None)
        return len(stale)

    def __len__(self) -> int:
        return len(self._sessions)
