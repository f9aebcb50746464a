"""
FastAPI gateway exposing the racing and sports services over HTTP.
Run as `uvicorn catalog.api:app` or `uvicorn --factory catalog.api:create_app`,
or build your own with `create_app(config)`.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI

from . import __version__
from .config import AppConfig, load_config
from .logs import ensure_log_schema
from .repository.races_repo import RacesRepo
from .repository.sports_repo import SportsRepo
from .services.racing_svc import RacingService
from .services.sports_svc import SportsService

logger = logging.getLogger(__name__)


def create_app(config: AppConfig | None = None) -> FastAPI:
    config = config or load_config()
    app = FastAPI(title="racing-sports-catalog", version=__version__)

    races_repo = RacesRepo(config.racing_db_path, config.seed_count)
    sports_repo = SportsRepo(config.sports_db_path, config.seed_count)
    app.state.config = config
    app.state.races_repo = races_repo
    app.state.sports_repo = sports_repo
    app.state.racing_service = RacingService(races_repo)
    app.state.sports_service = SportsService(sports_repo)

    @app.on_event("startup")
    def on_startup():
        ensure_log_schema(config.log_db_path)
        races_repo.init()
        sports_repo.init()
        logger.info("catalog ready: racing=%s sports=%s", config.racing_db_path, config.sports_db_path)

    # Include routers
    from .routes import base as base_routes
    from .routes import racing as racing_routes
    from .routes import sports as sports_routes
    from .routes import logs as logs_routes

    app.include_router(base_routes.router)
    app.include_router(racing_routes.router)
    app.include_router(sports_routes.router)
    app.include_router(logs_routes.router)
    return app


def __getattr__(name):
    # `app` is built on first access so importing this module never reads config
    if name == "app":
        app = create_app()
        globals()["app"] = app
        return app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
