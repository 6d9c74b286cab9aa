import uvicorn

from .config import settings


def main() -> None:
    uvicorn.run(
        "construction_office.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=3000,
        log_level=settings.LOG_LEVEL.lower(),
        reload=not settings.is_production,
    )


if __name__ == "__main__":
    main()
