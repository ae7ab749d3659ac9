# =============================================================================
# hello_service/main.py - FastAPI Application Entry Point
# =============================================================================
# Builds the FastAPI application: one router, exception handlers, and no
# auto-generated documentation routes, so GET /hello is the only thing
# the service answers.
#
# Usage:
#   uvicorn hello_service.main:app --port 3000
# =============================================================================

import logging

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from hello_service import __version__
from hello_service.config import Settings, settings as default_settings
from hello_service.exceptions import (
    http_exception_handler,
    unhandled_exception_handler,
)
from hello_service.routers import hello

# Configure logging
logging.basicConfig(
    level=default_settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create the FastAPI application.

    The route table is fixed here and never changes afterwards.

    Args:
        settings: Settings to serve with (defaults to the global settings)

    Returns:
        FastAPI: The configured application
    """
    settings = settings or default_settings

    application = FastAPI(
        title="Hello Service",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        # Exact path match only: /hello/ is 404, not a redirect
        redirect_slashes=False,
    )
    application.state.settings = settings

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    application.include_router(hello.router)

    logger.debug(f"Application created ({settings.ENVIRONMENT}), greeting={settings.GREETING!r}")
    return application


# Module-level application for `uvicorn hello_service.main:app`
app = create_app()
