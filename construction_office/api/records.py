from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ..core.security import require_session
from ..core.sessions import SessionData
from ..database import get_db
from ..observability import log_json, request_id_of
from ..schemas.record import CreatedResponse
from ..services import records as record_service
from ..services.records import RESOURCES, Resource

router = APIRouter(prefix="/api", tags=["records"])


def _register(resource: Resource) -> None:
    """Mount the list and create endpoints for one resource.

    There are deliberately no update or delete routes.
    """
    create_schema = resource.create_schema
    slug = resource.name.replace("-", "_")

    def list_rows(
        identity: SessionData = Depends(require_session),
        db: Session = Depends(get_db),
    ):
        return record_service.list_all(db, resource)

    def create_row(
        payload: create_schema,
        request: Request,
        identity: SessionData = Depends(require_session),
        db: Session = Depends(get_db),
    ):
        row_id = record_service.insert(db, resource, payload.model_dump(), identity.user_id)
        log_json(
            {
                "event": "record.created",
                "resource": resource.name,
                "id": row_id,
                "user_id": identity.user_id,
                "request_id": request_id_of(request),
            }
        )
        return CreatedResponse(id=row_id)

    router.add_api_route(
        f"/{resource.name}",
        list_rows,
        methods=["GET"],
        response_model=List[resource.read_schema],
        name=f"list_{slug}",
        summary=f"List all {resource.name}, newest first",
    )
    router.add_api_route(
        f"/{resource.name}",
        create_row,
        methods=["POST"],
        response_model=CreatedResponse,
        name=f"create_{slug}",
        summary=f"Create one {resource.name} entry",
    )


for _resource in RESOURCES.values():
    _register(_resource)
