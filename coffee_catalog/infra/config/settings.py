"""
Application configuration settings.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore"
    )

    # Application
    app_name: str = Field("Coffee Catalog API", alias="APP_NAME")

    # Environment
    environment: str = Field("development", alias="ENVIRONMENT")
    debug: bool = Field(False, alias="DEBUG")

    # Server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3000, alias="PORT")

    # Database
    database_host: str = Field(..., alias="DATABASE_HOST")
    database_port: int = Field(5432, alias="DATABASE_PORT")
    database_user: str = Field(..., alias="DATABASE_USER")
    database_password: str = Field(..., alias="DATABASE_PASSWORD")
    database_name: str = Field(..., alias="DATABASE_NAME")
    # Creates tables on startup. NEVER enable in production.
    database_synchronize: bool = Field(..., alias="DATABASE_SYNCHRONIZE")
    database_url_override: Optional[str] = Field(None, alias="DATABASE_URL")
    debug_sql: bool = Field(False, alias="DATABASE_ECHO")

    # Security
    api_key: str = Field(..., min_length=1, alias="API_KEY")

    # Pagination
    pagination_max_limit: int = Field(100, ge=1, alias="PAGINATION_MAX_LIMIT")

    # CORS
    cors_origins: str = Field("*", alias="CORS_ORIGINS")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: str = Field("json", alias="LOG_FORMAT")

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL, either the explicit override or the assembled Postgres URL."""
        if self.database_url_override:
            return self.database_url_override
        return URL.create(
            "postgresql+asyncpg",
            username=self.database_user,
            password=self.database_password,
            host=self.database_host,
            port=self.database_port,
            database=self.database_name,
        ).render_as_string(hide_password=False)

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins from string."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]


_settings = None


def get_settings() -> Settings:
    """Get settings instance (useful for dependency injection)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

