"""Tests for the programmatic dashboard client."""

import httpx
import pytest

from construction_office.client import LoginFailed, OfficeClient, status_counts

from .payloads import ADMIN, VALID_FIELDS, with_changes


def test_status_counts():
    """Test that statuses [pending, urgent, completed, pending] count as 2/1/1."""
    rows = [{"status": s} for s in ("pending", "urgent", "completed", "pending")]
    assert status_counts(rows) == {"pending": 2, "completed": 1, "urgent": 1}


def test_status_counts_ignores_other_values():
    """Test that status values outside the dashboard set are not counted."""
    rows = [{"status": "on-hold"}, {"status": None}, {}]
    assert status_counts(rows) == {"pending": 0, "completed": 0, "urgent": 0}


def test_mount_without_session_shows_login(client):
    """Test that mounting without a session leaves the client on the login screen."""
    office = OfficeClient(client)
    assert office.mount() is False
    assert office.authenticated is False


def test_mount_with_session_loads_dashboard(auth_client):
    """Test that mounting with a session loads the dashboard's inspections."""
    auth_client.post("/api/inspections", json=VALID_FIELDS["inspections"])
    office = OfficeClient(auth_client)

    assert office.mount() is True
    assert office.user["username"] == "admin"
    assert office.view == "dashboard"
    assert len(office.rows["dashboard"]) == 1


def test_dashboard_counts_from_fetched_inspections(auth_client):
    """Test that dashboard counts and recent rows come from the fetched inspections."""
    for status in ("pending", "urgent", "completed", "pending"):
        auth_client.post("/api/inspections", json=with_changes("inspections", status=status))

    office = OfficeClient(auth_client)
    office.mount()
    stats = office.dashboard_stats

    assert stats["counts"] == {"pending": 2, "completed": 1, "urgent": 1}
    assert [row["status"] for row in stats["recent"]] == ["pending", "completed", "urgent", "pending"]


def test_dashboard_recent_is_capped_at_five(auth_client):
    """Test that the dashboard shows at most five recent inspections."""
    for _ in range(7):
        auth_client.post("/api/inspections", json=VALID_FIELDS["inspections"])
    office = OfficeClient(auth_client)
    office.mount()
    assert len(office.dashboard_stats["recent"]) == 5
    assert office.dashboard_stats["counts"]["urgent"] == 7


def test_login_and_logout(client):
    """Test that login authenticates the client and logout resets it to the dashboard."""
    office = OfficeClient(client)
    user = office.login(**ADMIN)
    assert user["username"] == "admin"
    assert office.authenticated

    office.set_view("minutes")
    office.logout()
    assert office.authenticated is False
    assert office.view == "dashboard"
    assert office.mount() is False


def test_login_failure_raises(client):
    """Test that bad credentials raise LoginFailed."""
    office = OfficeClient(client)
    with pytest.raises(LoginFailed):
        office.login("admin", "wrong")
    assert office.authenticated is False


def test_login_failure_with_non_json_body_raises():
    """Test that an HTML error page on login still raises LoginFailed."""
    def handler(request):
        return httpx.Response(502, text="<html>Bad Gateway</html>", request=request)

    http = httpx.Client(transport=httpx.MockTransport(handler), base_url="http://office.test")
    office = OfficeClient(http)
    with pytest.raises(LoginFailed, match="Bad Gateway"):
        office.login(**ADMIN)
    assert office.authenticated is False
    http.close()


def test_view_change_replaces_rows(auth_client):
    """Test that switching views fetches and replaces that view's rows."""
    office = OfficeClient(auth_client)
    office.mount()
    auth_client.post("/api/estimates", json=VALID_FIELDS["estimates"])

    office.set_view("estimates")
    assert len(office.rows["estimates"]) == 1
    assert office.rows["estimates"][0]["client_name"] == "Tanaka Holdings"


def test_unknown_view(auth_client):
    """Test that switching to an unknown view raises ValueError."""
    office = OfficeClient(auth_client)
    with pytest.raises(ValueError):
        office.set_view("invoices")


def test_create_refetches_active_list(auth_client):
    """Test that a successful create re-fetches the active list."""
    office = OfficeClient(auth_client)
    office.mount()
    office.set_view("trip-reports")
    assert office.rows["trip-reports"] == []

    new_id = office.create(VALID_FIELDS["trip-reports"])

    assert new_id is not None
    assert [row["id"] for row in office.rows["trip-reports"]] == [new_id]


def test_create_rejected_keeps_rows(auth_client):
    """Test that a rejected create returns None and keeps the current rows."""
    office = OfficeClient(auth_client)
    office.mount()
    office.set_view("minutes")
    assert office.create({"title": "incomplete"}) is None
    assert office.rows["minutes"] == []


def test_create_from_dashboard_is_not_allowed(auth_client):
    """Test that creating from the dashboard raises ValueError."""
    office = OfficeClient(auth_client)
    office.mount()
    with pytest.raises(ValueError):
        office.create(VALID_FIELDS["inspections"])


def test_network_failure_keeps_previous_state():
    """Test that network errors keep the previous rows and fail login cleanly."""
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    http = httpx.Client(transport=httpx.MockTransport(handler), base_url="http://office.test")
    office = OfficeClient(http)
    office.user = {"id": 1, "username": "admin"}
    office.rows["dashboard"] = [{"id": 1, "status": "pending"}]

    assert office.refresh() == [{"id": 1, "status": "pending"}]
    with pytest.raises(LoginFailed):
        office.login(**ADMIN)
    http.close()
