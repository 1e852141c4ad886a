"""
Main entrypoint for the KMCA site API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app from an explicit ``Settings`` object; the module
also instantiates ``app`` at import time so it can be served
directly, e.g.::

    uvicorn kmca_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.middleware import KmcaHttpMiddleware
from .api.router import router as api_router
from .core.config import Settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import CASES, CONTACT, get_store

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Read from the environment when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or Settings.from_env()

    # Initialise logging before anything else so that the modules
    # below can log safely.
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Create empty data files up front; every request re-checks anyway.
        for kind in (CASES, CONTACT):
            store = get_store(settings, kind)
            store.ensure_file()
            logger.info("[%s] data file: %s", kind, store.path)
        if not settings.admin_secret:
            logger.warning("KMCA_API_SECRET is not set; case mutations will fail with 500")
        yield

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(KmcaHttpMiddleware)
    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
