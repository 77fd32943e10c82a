"""Application settings and configuration.

This module defines all configuration options for the Hashvote application.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Hashvote", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")

    # Database configuration
    database_url: str = Field(default="sqlite:///./hashvote.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")
    # e.g. "SERIALIZABLE" or "REPEATABLE READ"; None keeps the driver default.
    db_isolation_level: str | None = Field(default=None, alias="DB_ISOLATION_LEVEL")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Client identity: only honour X-Forwarded-For behind a trusted proxy.
    trust_forwarded_for: bool = Field(default=False, alias="TRUST_FORWARDED_FOR")

    # Pagination
    votes_page_size: int = Field(default=10, alias="VOTES_PAGE_SIZE")
    titles_page_size: int = Field(default=20, alias="TITLES_PAGE_SIZE")
    max_page_size: int = Field(default=100, alias="MAX_PAGE_SIZE")

    title_key_max_length: int = Field(default=64, alias="TITLE_KEY_MAX_LENGTH")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PATCH", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def sqlalchemy_database_url(self) -> str:
        """Return the database URL with the installed PostgreSQL driver named.

        Bare ``postgresql://`` and ``postgres://`` URLs would make SQLAlchemy
        load psycopg2; they are pointed at psycopg 3 instead. URLs that
        already name a driver are returned unchanged.

        Returns:
            Database URL used by the engine and by Alembic migrations
        """
        url = self.effective_database_url
        for scheme in ("postgresql://", "postgres://"):
            if url.startswith(scheme):
                return "postgresql+psycopg://" + url[len(scheme):]
        return url

    @property
    def effective_database_url(self) -> str:
        """Return the database URL respecting testing overrides.

        Returns:
            The active database URL (test database if in testing mode, otherwise production)
        """
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url


settings = Settings()
