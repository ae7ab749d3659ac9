# =============================================================================
# hello_service/server.py - Listener and Serving Loop
# =============================================================================
# Binds the listening socket ourselves and hands it to uvicorn.
#
# uvicorn's own bind path logs and calls sys.exit() on failure; binding
# here first lets an unavailable address surface as a BindError that the
# caller decides what to do with.
#
# Usage:
#   from hello_service.server import start
#   start("0.0.0.0", 3000)   # blocks while serving
# =============================================================================

import argparse
import logging
import socket

import uvicorn
from fastapi import FastAPI

from hello_service.config import get_settings
from hello_service.exceptions import BindError

logger = logging.getLogger(__name__)

LISTEN_BACKLOG = 2048


def bind_listener(host: str, port: int) -> socket.socket:
    """
    Create a TCP socket bound to host:port and listening.

    Raises:
        BindError: If the address is in use, not permitted, or invalid
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        # listen() here so a second bind on the same address fails now
        sock.listen(LISTEN_BACKLOG)
    except OSError as e:
        sock.close()
        raise BindError(host, port, e.strerror or str(e)) from e

    sock.set_inheritable(True)
    return sock


def build_server(app: FastAPI | str, host: str, port: int) -> uvicorn.Server:
    """
    Build a uvicorn server for the application.

    log_config=None leaves logging to the root handler configured in
    hello_service.main, so uvicorn's records share its format.
    """
    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_config=None,
    )
    return uvicorn.Server(config)


def start(host: str, port: int, app: FastAPI | None = None) -> None:
    """
    Bind a listener and serve until the process is told to stop.

    Raises:
        BindError: If the listener cannot be established
    """
    if app is None:
        from hello_service.main import app

    sock = bind_listener(host, port)
    logger.info(f"Hello Service listening on {host}:{port}")
    try:
        build_server(app, host, port).run(sockets=[sock])
    finally:
        sock.close()
        logger.info("Hello Service stopped")


def run(argv: list[str] | None = None) -> int:
    """
    Command-line entry point.

    Returns:
        int: Process exit status (1 if the listener could not be bound)
    """
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="hello-service",
        description="Serve GET /hello over HTTP/1.1",
    )
    parser.add_argument("--host", default=settings.HOST, help=f"bind address (default: {settings.HOST})")
    parser.add_argument("--port", type=int, default=settings.PORT, help=f"bind port (default: {settings.PORT})")
    args = parser.parse_args(argv)

    # Importing main configures logging
    from hello_service.main import app

    try:
        start(args.host, args.port, app)
    except BindError as e:
        logger.error(f"{e.message}. {e.suggestion}")
        return 1
    return 0
