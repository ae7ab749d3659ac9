# =============================================================================
# hello_service/routers/hello.py - Greeting Endpoint
# =============================================================================
# GET /hello returns the configured greeting as plain text.
# =============================================================================

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/hello", response_class=PlainTextResponse)
async def hello(request: Request) -> str:
    """
    Greeting endpoint.

    Returns the fixed greeting with status 200. The text comes from the
    settings the application was built with, so it never changes while
    the process is running.
    """
    return request.app.state.settings.GREETING
