"""
Resource registry and the two store operations every resource supports:
list everything newest first, and insert one row.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Type

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..database import Base
from ..models.record import Estimate, Inspection, Minute, TripReport
from ..schemas import record as schemas

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resource:
    name: str  # URL segment, e.g. "trip-reports"
    model: Type[Base]
    create_schema: Type[BaseModel]
    read_schema: Type[BaseModel]

    @property
    def fields(self) -> List[str]:
        return list(self.create_schema.model_fields)


RESOURCES: Dict[str, Resource] = {
    r.name: r
    for r in (
        Resource("inspections", Inspection, schemas.InspectionCreate, schemas.InspectionRead),
        Resource("trip-reports", TripReport, schemas.TripReportCreate, schemas.TripReportRead),
        Resource("estimates", Estimate, schemas.EstimateCreate, schemas.EstimateRead),
        Resource("minutes", Minute, schemas.MinuteCreate, schemas.MinuteRead),
    )
}


def list_all(db: Session, resource: Resource) -> List[Any]:
    """Every row of the resource, newest first. No paging."""
    model = resource.model
    stmt = select(model).order_by(model.created_at.desc(), model.id.desc())
    return list(db.execute(stmt).scalars().all())


def insert(db: Session, resource: Resource, fields: Dict[str, Any], user_id: int) -> int:
    """
    Insert one row owned by ``user_id`` and return its id.

    Only the resource's own fields are taken from ``fields``. Database errors
    propagate untouched; nothing is written when the commit fails.
    """
    values = {name: fields.get(name) for name in resource.fields}
    row = resource.model(user_id=user_id, **values)
    db.add(row)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(row)
    logger.debug("insert: %s row %s by user %s", resource.name, row.id, user_id)
    return row.id
