import datetime as dt

from sqlalchemy import Date, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class RecordMixin:
    """Columns shared by every business record.

    ``user_id`` names the creating user but is deliberately not a foreign key.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime, default=dt.datetime.utcnow, nullable=False, index=True
    )


class Inspection(RecordMixin, Base):
    __tablename__ = "inspections"

    project_name: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    findings: Mapped[str] = mapped_column(Text, nullable=False)
    # pending, completed, urgent are what the UI offers; not enforced here
    status: Mapped[str] = mapped_column(String(32), nullable=False)

    def __repr__(self) -> str:
        return f"<Inspection id={self.id} project={self.project_name} status={self.status}>"


class TripReport(RecordMixin, Base):
    __tablename__ = "trip_reports"

    destination: Mapped[str] = mapped_column(String(255), nullable=False)
    date_start: Mapped[dt.date] = mapped_column(Date, nullable=False)
    date_end: Mapped[dt.date] = mapped_column(Date, nullable=False)
    purpose: Mapped[str] = mapped_column(String(255), nullable=False)
    results: Mapped[str] = mapped_column(Text, nullable=False)
    expenses: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<TripReport id={self.id} destination={self.destination}>"


class Estimate(RecordMixin, Base):
    __tablename__ = "estimates"

    client_name: Mapped[str] = mapped_column(String(255), nullable=False)
    project_name: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    details: Mapped[str] = mapped_column(Text, nullable=False)
    # draft, sent, approved, rejected
    status: Mapped[str] = mapped_column(String(32), nullable=False)

    def __repr__(self) -> str:
        return f"<Estimate id={self.id} client={self.client_name} status={self.status}>"


class Minute(RecordMixin, Base):
    __tablename__ = "minutes"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    # comma-separated names, kept as typed
    attendees: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    action_items: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Minute id={self.id} title={self.title}>"
