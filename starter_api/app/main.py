"""
Main entrypoint for the Starter API.

This module assembles the FastAPI application.  ``create_app`` sets up
logging, wires the user store into the application lifespan, mounts
the JSON API under ``/api`` and, when enabled, serves the built front
end for every other path.  A default instance is created at import
time as ``app`` so it can be served directly::

    uvicorn starter_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.endpoints import frontend
from .api.router import router as api_router
from .core.config import Settings, settings
from .core.db import PROJECT_ROOT, UserStore, resolve_database_path
from .core.exceptions import register_exception_handlers
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _resolve_static_dir(static_dir: str) -> str:
    path = PROJECT_ROOT / static_dir
    return str(path.resolve())


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to build the app from.  Defaults to the module-level
        ``settings`` read from the environment at import time.

    Returns
    -------
    FastAPI
        A configured application.  The user store is opened when the
        application starts up and closed when it shuts down.
    """
    cfg = app_settings or settings
    setup_logging(cfg.log_level, cfg.log_file or None)

    store = UserStore(resolve_database_path(cfg.database_url))

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store.open()
        try:
            yield
        finally:
            store.close()

    app = FastAPI(title=cfg.project_name, version=cfg.api_version, lifespan=lifespan)
    app.state.settings = cfg
    app.state.store = store

    if cfg.cors_origin_list:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cfg.cors_origin_list,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")

    # The catch-all route must be registered last so that it never
    # shadows the API routes above.
    if cfg.serve_static:
        static_dir = _resolve_static_dir(cfg.static_dir)
        logger.info("Serving static files from %s (spa_fallback=%s)", static_dir, cfg.spa_fallback)
        app.include_router(frontend.build_router(static_dir, spa_fallback=cfg.spa_fallback))
    else:
        logger.info("Static file serving disabled")

    return app


app = create_app()
