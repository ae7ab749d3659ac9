# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides an in-process TestClient and a live uvicorn server
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing hello_service.config which loads settings immediately

os.environ.setdefault("HELLO_ENVIRONMENT", "development")
os.environ.setdefault("HELLO_LOG_LEVEL", "DEBUG")

import threading
import time

import pytest
from fastapi.testclient import TestClient

from hello_service.config import Settings
from hello_service.main import create_app
from hello_service.server import bind_listener, build_server


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings with the contract defaults, independent of the environment."""
    return Settings(HOST="127.0.0.1", PORT=3000, GREETING="Hello, World!")


@pytest.fixture
def client(test_settings):
    """In-process client for the application."""
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


@pytest.fixture
def live_server(test_settings):
    """
    Run a real uvicorn server on an ephemeral port in a background thread.

    Yields the base URL, e.g. "http://127.0.0.1:54321".
    """
    sock = bind_listener("127.0.0.1", 0)
    port = sock.getsockname()[1]
    server = build_server(create_app(test_settings), "127.0.0.1", port)

    thread = threading.Thread(target=server.run, kwargs={"sockets": [sock]}, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline or not thread.is_alive():
            raise RuntimeError("uvicorn did not start")
        time.sleep(0.01)

    yield f"http://127.0.0.1:{port}"

    server.should_exit = True
    thread.join(timeout=10)
    sock.close()
