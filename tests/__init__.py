# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Hello Service:
# - test_config.py: Settings defaults and environment overrides
# - test_routes.py: In-process request/response contract via TestClient
# - test_server.py: Live uvicorn server, concurrency, and bind failures
#
# Run tests with: pytest
# =============================================================================
