import json
import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

# service logger; structured JSON strings go to stdout
logger = logging.getLogger("construction_office")


def configure_logging(level: str = "INFO") -> None:
    # Avoid adding duplicate handlers if the app factory runs more than once
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    # Prevent double-logging via propagation to root handlers
    logger.propagate = False
    logger.setLevel(level.upper())


def log_json(obj: dict, level: str = "info") -> None:
    try:
        payload = json.dumps(obj, default=str)
    except (TypeError, ValueError):
        payload = json.dumps({"msg": "failed to serialize log object"})
    getattr(logger, level)(payload)


def request_id_of(request: Request):
    return getattr(request.state, "request_id", None)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint):
        started_at = time.time()
        # support X-Request-ID header propagation
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        log_json(
            {
                "event": "request.start",
                "method": request.method,
                "path": request.url.path,
                "request_id": request_id,
            },
            level="debug",
        )

        response = await call_next(request)

        duration_ms = int((time.time() - started_at) * 1000)

        log_json(
            {
                "event": "request.end",
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "request_id": request_id,
            },
            level="info",
        )
        # attach request id header back to client
        response.headers["X-Request-ID"] = request_id
        return response
