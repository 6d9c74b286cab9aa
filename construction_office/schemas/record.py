"""Per-resource input and output schemas.

Every create schema lists exactly the domain fields of its resource. All of
them are required; ``status`` stays free text.
"""
import datetime as dt
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

# SQLite INTEGER is a signed 64-bit value
StoredInt = Annotated[int, Field(ge=-(2**63), le=2**63 - 1)]


class RecordCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def text_not_blank(cls, v):
        if isinstance(v, str) and not v.strip():
            raise ValueError("must not be empty")
        return v


class RecordRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    created_at: dt.datetime


class CreatedResponse(BaseModel):
    id: int


class InspectionCreate(RecordCreate):
    project_name: str
    date: dt.date
    location: str
    findings: str
    status: str


class InspectionRead(RecordRead, InspectionCreate):
    pass


class TripReportCreate(RecordCreate):
    destination: str
    date_start: dt.date
    date_end: dt.date
    purpose: str
    results: str
    expenses: StoredInt


class TripReportRead(RecordRead, TripReportCreate):
    pass


class EstimateCreate(RecordCreate):
    client_name: str
    project_name: str
    amount: StoredInt
    details: str
    status: str


class EstimateRead(RecordRead, EstimateCreate):
    pass


class MinuteCreate(RecordCreate):
    title: str
    date: dt.date
    attendees: str
    content: str
    action_items: str


class MinuteRead(RecordRead, MinuteCreate):
    pass
