# =============================================================================
# hello_service/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the service.
#
# There are two kinds of failure:
# - BindError: the listener cannot be established (fatal at startup)
# - Transport errors: malformed requests or dropped connections, which
#   uvicorn handles per-connection by closing the socket
#
# Everything the router cannot match is reported as 404.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class HelloServiceException(Exception):
    """
    Base exception for the Hello Service.

    Provides structured error details with an actionable suggestion.
    """

    def __init__(
        self,
        message: str,
        code: str = "HELLO_SERVICE_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Startup Exceptions
# =============================================================================

class BindError(HelloServiceException):
    """Raised when the listening socket cannot be established."""

    def __init__(self, host: str, port: int, error: str):
        super().__init__(
            message=f"Cannot bind to {host}:{port}: {error}",
            code="BIND_ERROR",
            suggestion="Check that the port is free and the address belongs to this host "
                       "(set HELLO_HOST / HELLO_PORT to use another one)",
            details={"host": host, "port": port, "error": error}
        )
        self.host = host
        self.port = port


# =============================================================================
# Exception Handlers
# =============================================================================

async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Render routing failures.

    The route table matches on (method, path) as a whole, so a known path
    with the wrong method is just as unmatched as an unknown path: both
    404 and 405 become 404 Not Found.
    """
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={"detail": "Not Found", "code": "NOT_FOUND"}
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": "HTTP_ERROR"},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
