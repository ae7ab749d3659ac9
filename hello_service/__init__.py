# =============================================================================
# hello_service/ - Hello Service Package
# =============================================================================
# A minimal FastAPI service with a single static route:
# - main.py: App factory, logging setup, exception handlers
# - config.py: Environment variable loading and settings
# - routers/: The one route the service exposes (GET /hello)
# - server.py: Listener binding and the uvicorn serving loop
#
# Run with:
#   python -m hello_service
# =============================================================================

__version__ = "1.0.0"
