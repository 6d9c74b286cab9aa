"""
Programmatic client for the records API.

Mirrors the browser dashboard: one active view, an authenticated flag, and
a list per view that is replaced wholesale on every fetch. Network failures
are logged and leave the previous state in place.
"""
from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional

import httpx

logger = logging.getLogger(__name__)

VIEWS = ("dashboard", "inspections", "trip-reports", "estimates", "minutes")

# the dashboard summarises inspections
ENDPOINTS = {
    "dashboard": "/api/inspections",
    "inspections": "/api/inspections",
    "trip-reports": "/api/trip-reports",
    "estimates": "/api/estimates",
    "minutes": "/api/minutes",
}

INSPECTION_STATUSES = ("pending", "completed", "urgent")
RECENT_LIMIT = 5


class LoginFailed(Exception):
    """The server refused the username/password pair."""


def status_counts(inspections: Iterable[Dict[str, Any]]) -> Dict[str, int]:
    """Count inspections per dashboard status. Other status values are ignored."""
    counts = Counter(row.get("status") for row in inspections)
    return {status: counts.get(status, 0) for status in INSPECTION_STATUSES}


def _error_message(resp: httpx.Response) -> str:
    # a proxy in front of the API may answer with HTML
    try:
        return resp.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return resp.reason_phrase or f"HTTP {resp.status_code}"


class OfficeClient:
    def __init__(self, http: httpx.Client):
        self.http = http
        self.user: Optional[Dict[str, Any]] = None
        self.view = "dashboard"
        self.rows: Dict[str, List[Dict[str, Any]]] = {view: [] for view in VIEWS}

    @property
    def authenticated(self) -> bool:
        return self.user is not None

    def _request(self, method: str, url: str, **kwargs) -> Optional[httpx.Response]:
        try:
            return self.http.request(method, url, **kwargs)
        except httpx.HTTPError:
            logger.exception("%s %s failed", method, url)
            return None

    def mount(self) -> bool:
        """Ask the server who we are; load the active view when logged in."""
        resp = self._request("GET", "/api/me")
        if resp is not None and resp.is_success:
            self.user = resp.json()
            self.refresh()
        else:
            self.user = None
        return self.authenticated

    def login(self, username: str, password: str) -> Dict[str, Any]:
        resp = self._request("POST", "/api/login", json={"username": username, "password": password})
        if resp is None:
            raise LoginFailed("server unreachable")
        if not resp.is_success:
            raise LoginFailed(_error_message(resp))
        self.user = resp.json()
        self.refresh()
        return self.user

    def logout(self) -> None:
        self._request("POST", "/api/logout")
        self.user = None
        self.view = "dashboard"

    def set_view(self, view: str) -> None:
        if view not in VIEWS:
            raise ValueError(f"unknown view: {view}")
        self.view = view
        if self.authenticated:
            self.refresh()

    def refresh(self) -> List[Dict[str, Any]]:
        """Fetch the active view's list and replace the local copy."""
        resp = self._request("GET", ENDPOINTS[self.view])
        if resp is not None and resp.is_success:
            self.rows[self.view] = resp.json()
        return self.rows[self.view]

    def create(self, fields: Dict[str, Any]) -> Optional[int]:
        """
        POST the form fields to the active view, then re-fetch its list.

        Returns the new id, or None when the server rejected the request.
        """
        if self.view == "dashboard":
            raise ValueError("records cannot be created from the dashboard")
        resp = self._request("POST", ENDPOINTS[self.view], json=fields)
        if resp is None or not resp.is_success:
            return None
        self.refresh()
        return resp.json()["id"]

    @property
    def dashboard_stats(self) -> Dict[str, Any]:
        inspections = self.rows["dashboard"]
        return {"counts": status_counts(inspections), "recent": inspections[:RECENT_LIMIT]}
