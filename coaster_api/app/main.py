"""
Main entrypoint for the Coaster API.

This module assembles the FastAPI application.  The ``create_app``
function configures logging, builds the coaster store, attaches it
and the settings to ``app.state`` and mounts the routers.  Because the
admin password is mandatory, no application is built at import time;
use the ``run`` script, or run uvicorn in factory mode::

    ADMIN_PASSWORD=secret uvicorn coaster_api.app.main:create_app --factory --port 8080
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router
from .core.config import Settings
from .core.logging_config import setup_logging
from .services.coaster_store import CoasterStore


logger = logging.getLogger(__name__)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render HTTP errors as plain text, keeping any headers they carry."""
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def internal_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return PlainTextResponse(str(exc), status_code=500)


def create_app(settings: Optional[Settings] = None, store: Optional[CoasterStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Application settings.  Read from the environment when omitted,
        which raises ``ConfigurationError`` if ``ADMIN_PASSWORD`` is
        not set.
    store : Optional[CoasterStore]
        Coaster store to serve.  A fresh, empty store is created when
        omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    if settings is None:
        settings = Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)

    # ``/coasters/`` must be a 404, not a redirect to ``/coasters``.
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else CoasterStore()

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)
    app.include_router(router)
    return app
