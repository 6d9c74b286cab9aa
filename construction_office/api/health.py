from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db

router = APIRouter()


@router.get("/health")
def health(request: Request, db: Session = Depends(get_db)):
    """
    Health check endpoint that validates:
    - API is responding
    - Database connection is working
    """
    settings = request.app.state.settings
    health_status = {
        "status": "ok",
        "service": settings.PROJECT_NAME,
        "version": settings.APP_VERSION,
        "checks": {"api": "ok", "database": "unknown"},
    }

    try:
        db.execute(text("SELECT 1"))
        health_status["checks"]["database"] = "ok"
    except SQLAlchemyError as e:
        health_status["status"] = "degraded"
        health_status["checks"]["database"] = f"error: {str(e)}"
        # Return 503 Service Unavailable if database is down
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=health_status
        ) from e

    return health_status
