from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def _get_engine_kwargs(database_url: str) -> dict:
    """Return engine configuration based on database type."""
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url:
            # one shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
        return kwargs
    elif database_url.startswith("postgresql"):
        return {
            "pool_pre_ping": True,  # Verify connections before using
            "pool_recycle": 3600,  # Recycle connections after 1 hour
        }
    return {}


class Store:
    """Handle on the record database: one engine and its session factory."""

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine = create_engine(database_url, **_get_engine_kwargs(database_url))
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def init_schema(self) -> None:
        """Create every table that does not exist yet. Safe to call on each boot."""
        # models register themselves on Base when imported
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()


# Dependency for FastAPI
def get_db(request: Request):
    db = request.app.state.store.session()
    try:
        yield db
    finally:
        db.close()
