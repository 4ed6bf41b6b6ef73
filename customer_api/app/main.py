"""
Main entrypoint for the Customer API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds the customer store
once per application, seeds it when configured and exposes it to the
handlers through ``app.state``.  The module‑level ``app`` makes it
easy to run with uvicorn::

    uvicorn customer_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.customer_service import CustomerService
from .services.customer_store import CustomerStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the environment‑derived defaults.
        Tests pass their own instance to control credentials and
        seeding.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    store = CustomerStore()
    if settings.seed_customers:
        store.seed()

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        store.clear()
        logger.info("Customer store cleared")

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.customer_store = store
    app.state.customer_service = CustomerService(store)

    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()
