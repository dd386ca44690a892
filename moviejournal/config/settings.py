"""
Application Settings

Centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with sensible defaults.

Configuration Categories:
=========================
- Application: Basic app info (name, environment, debug mode)
- Database: Connection URL, credentials and pool settings
- Security: Password hashing work factor
- Ledger: Review ledger behaviour toggles

Environment Variables:
======================
Settings are loaded from environment variables or .env file.
Environment variables take precedence over .env file values.

Usage:
======
    from moviejournal.config.settings import settings

    db_url = settings.database_url
    is_dev = settings.is_development
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Use .env file for local development.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # APPLICATION
    # ═══════════════════════════════════════════════════════════════════════════════

    APP_NAME: str = "Movie Journal"
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ═══════════════════════════════════════════════════════════════════════════════
    # DATABASE
    # ═══════════════════════════════════════════════════════════════════════════════

    DATABASE_URL: str = Field(
        default="sqlite:///moviejournal.db",
        description="SQLAlchemy connection URL (mysql+pymysql://, postgresql://, sqlite:///)",
    )
    DATABASE_USER: str = Field(
        default="",
        description="Optional user name applied on top of DATABASE_URL",
    )
    DATABASE_PASSWORD: str = Field(
        default="",
        description="Optional password applied on top of DATABASE_URL",
    )
    DATABASE_POOL_SIZE: int = Field(
        default=5,
        description="Number of persistent connections in the pool",
    )
    DATABASE_MAX_OVERFLOW: int = Field(
        default=10,
        description="Extra connections allowed when pool is exhausted",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # SECURITY
    # ═══════════════════════════════════════════════════════════════════════════════

    BCRYPT_ROUNDS: int = Field(
        default=12,
        ge=4,
        le=31,
        description="bcrypt work factor used when hashing passwords",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # LEDGER
    # ═══════════════════════════════════════════════════════════════════════════════

    SEED_PLACEHOLDER_USERS: bool = Field(
        default=True,
        description="Insert a placeholder users row when a ledger is scoped to an unknown id",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # PROPERTIES
    # ═══════════════════════════════════════════════════════════════════════════════

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"

    @property
    def database_url(self) -> str:
        """
        DATABASE_URL with DATABASE_USER / DATABASE_PASSWORD applied.

        Credentials already present in the URL are overridden only when
        the corresponding setting is non-empty.
        """
        url = make_url(self.DATABASE_URL)
        if self.DATABASE_USER:
            url = url.set(username=self.DATABASE_USER)
        if self.DATABASE_PASSWORD:
            url = url.set(password=self.DATABASE_PASSWORD)
        return url.render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.

    Returns:
        Settings: Application settings instance
    """
    return Settings()


# Global settings instance for convenient import
settings = get_settings()
