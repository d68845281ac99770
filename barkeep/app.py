from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from barkeep.core.config import Settings, get_settings
from barkeep.core.logging import configure_logging
from barkeep.domain.validation import ValidationError
from barkeep.repositories.repo_registry import RepoRegistry
from barkeep.routers import auth as auth_router
from barkeep.routers import saved_searches as saved_searches_router
from barkeep.routers import users as users_router

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Map field validation failures to 422 responses."""

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        return JSONResponse({"errors": exc.errors}, status_code=422)


def create_app(settings: Optional[Settings] = None, registry: Optional[RepoRegistry] = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``)."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(title="Barkeep API")
    # Demo accounts keep their saved searches in this cookie for a year.
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret_key,
        session_cookie=settings.session_cookie_name,
        max_age=settings.session_max_age_seconds,
        same_site="lax",
        https_only=settings.app_env == "prod",
    )
    app.state.settings = settings
    app.state.repo_registry = registry or RepoRegistry(settings.repos_root)

    app.include_router(auth_router.router)
    app.include_router(users_router.router)
    app.include_router(saved_searches_router.router)
    register_error_handlers(app)

    logger.info("Barkeep app created (env=%s)", settings.app_env)
    return app
