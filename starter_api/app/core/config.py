"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all: it listens on port 3000
and keeps its SQLite file under ``data/``.  Each field is read when
``Settings`` is instantiated, which lets tests build their own
instance after adjusting the environment.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


_TRUTHY = {"1", "true", "yes"}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


def _optional_env_flag(name: str) -> Optional[bool]:
    value = os.getenv(name)
    if value is None:
        return None
    return value.lower() in _TRUTHY


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Starter API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    # Path to the SQLite database file.  If a relative path is given it
    # is resolved against the project root by the ``db`` module.
    database_url: str = field(default_factory=lambda: os.getenv("DB_PATH", "data/db.sqlite"))

    # Deployment mode.  ``production`` turns on static serving of the
    # built front end unless SERVE_STATIC says otherwise; ``None`` means
    # "not set" and is resolved from ``environment`` after init.
    environment: str = field(default_factory=lambda: os.getenv("APP_ENV", "development"))
    serve_static: Optional[bool] = field(default_factory=lambda: _optional_env_flag("SERVE_STATIC"))
    static_dir: str = field(default_factory=lambda: os.getenv("STATIC_DIR", "frontend_dist"))

    # When static serving is on, unmatched non-API paths return
    # ``index.html`` so the client-side router can take over.  Set
    # SPA_FALLBACK=false to answer them with 404 instead.
    spa_fallback: bool = field(default_factory=lambda: _env_flag("SPA_FALLBACK", "true"))

    # Reject blank user names with HTTP 400.  Off by default: names are
    # stored exactly as submitted.
    validate_names: bool = field(default_factory=lambda: _env_flag("VALIDATE_NAMES", "false"))

    # Comma-separated list of origins allowed to call the API, e.g. a
    # Vite dev server on another port.  Empty disables CORS entirely.
    cors_origins: str = field(default_factory=lambda: os.getenv("CORS_ORIGINS", ""))

    def __post_init__(self) -> None:
        if self.serve_static is None:
            self.serve_static = self.environment.lower() == "production"

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import the process
# defaults without repeatedly reading environment variables.
settings = Settings()
