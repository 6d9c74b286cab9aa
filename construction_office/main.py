from http import HTTPStatus
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from .api import auth, health, records
from .config import Settings
from .config import settings as default_settings
from .core.sessions import SessionStore
from .database import Store
from .exceptions import DomainError
from .observability import RequestLoggingMiddleware, configure_logging, log_json, logger, request_id_of
from .schemas.error import ErrorBody, ErrorResponse
from .services.accounts import seed_admin

STATIC_DIR = Path(__file__).parent / "static"


def _error(status_code: int, request: Request, code: str, message: str, details=None) -> JSONResponse:
    body = ErrorResponse(
        error=ErrorBody(code=code, message=message, details=details),
        request_id=request_id_of(request),
    ).model_dump()
    return JSONResponse(status_code=status_code, content=body)


# Exception handlers: domain errors -> structured JSON
async def domain_error_handler(request: Request, exc: DomainError):
    log_json(
        {
            "event": "domain.error",
            "error": {"code": exc.code, "message": exc.message},
            "path": request.url.path,
            "request_id": request_id_of(request),
        },
        level="warning",
    )
    return _error(exc.status_code, request, exc.code, exc.message, exc.details)


# Pydantic/validation errors -> standardized 422 body
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # ctx may hold exception instances, keep only the serializable parts
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    log_json(
        {"event": "validation.error", "details": details, "request_id": request_id_of(request)},
        level="warning",
    )
    return _error(422, request, "VALIDATION_ERROR", "Validation failed", details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    try:
        code, phrase = HTTPStatus(exc.status_code).name, HTTPStatus(exc.status_code).phrase
    except ValueError:
        code, phrase = "HTTP_ERROR", "HTTP error"
    if isinstance(exc.detail, str):
        message, details = exc.detail, None
    else:
        message, details = phrase, exc.detail
    response = _error(exc.status_code, request, code, message, details)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


# catch-all for unexpected errors -> 500 but safe response
async def generic_exception_handler(request: Request, exc: Exception):
    request_id = request_id_of(request)
    # log full stack trace for server-side investigation
    logger.exception("unhandled exception (request_id=%s)", request_id)
    return _error(500, request, "INTERNAL_ERROR", "Internal server error")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application and its context.

    The store handle and the session store hang off ``app.state``; handlers
    reach them through dependencies. Tables are created and the administrator
    seeded before the app is returned.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Construction Office Records", version=settings.APP_VERSION)

    store = Store(settings.DATABASE_URL)
    store.init_schema()
    with store.session() as db:
        seed_admin(db, settings.ADMIN_PASSWORD)

    app.state.settings = settings
    app.state.store = store
    app.state.sessions = SessionStore(max_age=settings.SESSION_MAX_AGE)

    # middleware added last runs first: logging wraps sessions wraps CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET,
        session_cookie=settings.SESSION_COOKIE,
        max_age=settings.SESSION_MAX_AGE,
        same_site=settings.SESSION_SAME_SITE,
        https_only=settings.is_production,
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(health.router, tags=["health"])
    app.include_router(auth.router)
    app.include_router(records.router)

    # the browser client; API routes above take precedence
    app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")

    log_json(
        {
            "event": "app.start",
            "env": settings.APP_ENV,
            "database": settings.DATABASE_URL.split("://", 1)[0],
        }
    )
    return app
