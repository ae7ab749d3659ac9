# =============================================================================
# hello_service/routers/ - API Route Definitions
# =============================================================================
# - hello.py: GET /hello, the service's only route
#
# Each router is mounted in main.py.
# =============================================================================

from . import hello

__all__ = [
    "hello",
]
