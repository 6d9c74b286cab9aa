"""Request bodies shared across test modules."""

ADMIN = {"username": "admin", "password": "admin123"}

VALID_FIELDS = {
    "inspections": {
        "project_name": "Shibuya redevelopment",
        "date": "2026-10-01",
        "location": "Shibuya, Tokyo",
        "findings": "Scaffolding on level 3 missing toe boards.",
        "status": "urgent",
    },
    "trip-reports": {
        "destination": "Osaka",
        "date_start": "2026-09-10",
        "date_end": "2026-09-12",
        "purpose": "Supplier audit",
        "results": "Two suppliers approved.",
        "expenses": 48000,
    },
    "estimates": {
        "client_name": "Tanaka Holdings",
        "project_name": "Warehouse extension",
        "amount": 12500000,
        "details": "Foundation, steel frame, roofing.",
        "status": "draft",
    },
    "minutes": {
        "title": "Weekly site meeting",
        "date": "2026-10-05",
        "attendees": "Sato, Suzuki, Takahashi",
        "content": "Reviewed the concrete pour schedule.",
        "action_items": "Sato to confirm pump truck booking.",
    },
}

RESOURCE_NAMES = list(VALID_FIELDS)


def with_changes(resource, **changes):
    body = dict(VALID_FIELDS[resource])
    body.update(changes)
    return body
