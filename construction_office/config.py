from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./construction.db"

    # Application Settings
    PROJECT_NAME: str = "construction_office"
    APP_VERSION: str = "0.1.0"

    # Environment Configuration
    APP_ENV: str = "dev"  # dev, prod
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL

    # Session cookie
    SESSION_SECRET: str = "construction-secret-key"
    SESSION_COOKIE: str = "construction_sid"
    SESSION_MAX_AGE: int = 60 * 60 * 8
    SESSION_SAME_SITE: str = "none"

    # Seeded administrator; rotate in any real deployment
    ADMIN_PASSWORD: str = "admin123"

    # CORS, comma separated
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:8000"

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.lower() in ("prod", "production")

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


settings = Settings()
