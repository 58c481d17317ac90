"""Centralized configuration management for the Pokédex battle API."""

from __future__ import annotations

import logging
from functools import lru_cache
from urllib.parse import quote

from dotenv import load_dotenv
from pydantic import Field, PrivateAttr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load a local .env file before the settings singleton is built so every
# consumer of :mod:`pokedex_api.settings` observes the same environment.
load_dotenv()

# -- Application-wide constants -------------------------------------------------

DEFAULT_SQLITE_DATABASE_URL = "sqlite+aiosqlite:///./data/pokedex.db"
POSTGRES_ASYNC_PREFIX = "postgresql+psycopg://"
POSTGRES_SYNC_PREFIXES = ("postgres://", "postgresql://")
SQLITE_PREFIX = "sqlite"
DEFAULT_DB_PORT = 5432
DEFAULT_LOG_LEVEL = "INFO"


def _normalize_origin(origin: str) -> str:
    """Return the origin stripped of whitespace and trailing slashes."""

    return origin.strip().rstrip("/")


class AppSettings(BaseSettings):
    """Typed configuration surface built on top of ``pydantic-settings``.

    Connection parameters may be supplied either as a single ``DATABASE_URL``
    or as discrete ``DB_*`` components; :attr:`resolved_database_url` folds
    both forms (plus the SQLite fallback) into one async SQLAlchemy URL.
    """

    _explicit_cors_allow_origins: bool = PrivateAttr(default=False)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    def __init__(self, **values: object) -> None:
        """Capture explicit overrides prior to delegating to ``BaseSettings``."""

        normalized_keys = {str(key).lower() for key in values}
        super().__init__(**values)
        self._explicit_cors_allow_origins = (
            "cors_allow_origins_raw" in normalized_keys
            or "cors_allow_origins" in normalized_keys
            or bool(self.cors_allow_origins_raw and self.cors_allow_origins_raw.strip())
        )

    database_url: str | None = Field(
        default=None,
        alias="DATABASE_URL",
        description=(
            "Full SQLAlchemy-compatible database URL. Postgres URLs supplied in"
            " sync format (postgres:// or postgresql://) are coerced into the"
            " async psycopg driver string at runtime."
        ),
    )
    db_host: str | None = Field(
        default=None,
        alias="DB_HOST",
        description="PostgreSQL host used when DATABASE_URL is not supplied.",
    )
    db_port: int = Field(default=DEFAULT_DB_PORT, alias="DB_PORT")
    db_user: str | None = Field(default=None, alias="DB_USER")
    db_password: str | None = Field(default=None, alias="DB_PASSWORD")
    db_name: str = Field(default="pokedex", alias="DB_NAME")
    db_pool_size: int = Field(
        default=10,
        alias="DB_POOL_SIZE",
        description="Number of warm connections maintained by the engine pool.",
    )
    db_max_overflow: int = Field(
        default=20,
        alias="DB_MAX_OVERFLOW",
        description="Connections allowed beyond the pool size under load.",
    )
    use_sqlite: bool = Field(
        default=False,
        alias="USE_SQLITE",
        description=(
            "Force SQLite usage regardless of DATABASE_URL. Helpful for local"
            " development and test suites that do not require PostgreSQL."
        ),
    )
    cors_allow_origins_raw: str | None = Field(
        default=None,
        alias="CORS_ALLOW_ORIGINS",
        description="Comma-separated list of CORS origins allowed to call the API.",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        alias="LOG_LEVEL",
        description="Root logging level (e.g. INFO, DEBUG, WARNING).",
    )
    slow_query_threshold: float = Field(
        default=0.1,
        alias="SLOW_QUERY_THRESHOLD",
        description=(
            "Threshold in seconds after which queries are considered slow for"
            " monitoring instrumentation."
        ),
    )

    def _component_database_url(self) -> str | None:
        """Assemble a PostgreSQL URL from the ``DB_*`` settings when present."""

        if not self.db_host:
            return None

        credentials = ""
        if self.db_user:
            credentials = quote(self.db_user, safe="")
            if self.db_password:
                credentials += ":" + quote(self.db_password, safe="")
            credentials += "@"

        return (
            f"{POSTGRES_ASYNC_PREFIX}{credentials}{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def resolved_database_url(self) -> str:
        """Return the async-compatible database URL after applying fallbacks."""

        if self.use_sqlite:
            return DEFAULT_SQLITE_DATABASE_URL

        url = (self.database_url or "").strip() or self._component_database_url()
        if not url:
            return DEFAULT_SQLITE_DATABASE_URL

        for prefix in POSTGRES_SYNC_PREFIXES:
            if url.startswith(prefix):
                return url.replace(prefix, POSTGRES_ASYNC_PREFIX, 1)

        if url.startswith(POSTGRES_ASYNC_PREFIX) or url.startswith(SQLITE_PREFIX):
            return url

        raise RuntimeError(
            f"Expected a PostgreSQL or SQLite connection string, received: {url}"
        )

    @property
    def database_type(self) -> str:
        """Return ``sqlite`` when using SQLite otherwise ``postgresql``."""

        if self.resolved_database_url.startswith(SQLITE_PREFIX):
            return "sqlite"
        return "postgresql"

    @property
    def cors_allow_origins(self) -> list[str]:
        """Return normalised CORS origins supplied via environment variables."""

        if not self.cors_allow_origins_raw:
            return []

        origins = [
            _normalize_origin(origin)
            for origin in self.cors_allow_origins_raw.split(",")
            if origin.strip()
        ]
        return [origin for origin in origins if origin]

    @property
    def log_level_numeric(self) -> int:
        """Translate ``log_level`` into the numeric constant expected by logging."""

        candidate = logging.getLevelName(self.log_level.upper())
        if isinstance(candidate, int):
            return candidate
        return logging.INFO

    def optional_config_warnings(self) -> list[str]:
        """Return human-readable warnings for unset optional configuration."""

        warnings: list[str] = []

        if self.database_type == "sqlite" and not self.use_sqlite:
            warnings.append(
                "DATABASE_URL/DB_HOST are not set - falling back to the local "
                "SQLite database (not suitable for production)"
            )

        if not self._explicit_cors_allow_origins and not self.cors_allow_origins:
            warnings.append(
                "CORS_ALLOW_ORIGINS is not set - using default localhost origins only "
                "(may cause CORS issues in production)"
            )

        return warnings


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return a cached instance of :class:`AppSettings`."""

    return AppSettings()


__all__ = [
    "AppSettings",
    "DEFAULT_DB_PORT",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_SQLITE_DATABASE_URL",
    "POSTGRES_ASYNC_PREFIX",
    "POSTGRES_SYNC_PREFIXES",
    "get_settings",
]
