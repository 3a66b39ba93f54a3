"""Command-line entry point: bind the port and serve with uvicorn."""

from __future__ import annotations

import argparse
import socket
import sys
from pathlib import Path

import uvicorn

from .app import create_app
from .core.config import get_settings
from .core.logging import configure_logging
from .services.clock import ProcessClock


def build_parser() -> argparse.ArgumentParser:
    defaults = get_settings()
    parser = argparse.ArgumentParser(description="Serve a static directory with a /health endpoint")
    parser.add_argument(
        "--host",
        type=str,
        default=defaults.host,
        help=f"Host address to bind to (default: {defaults.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=defaults.port,
        help="Port number to listen on (default: PORT env var or 3000)",
    )
    parser.add_argument(
        "--static-root",
        type=Path,
        default=defaults.static_root,
        help=f"Directory to serve (default: {defaults.static_root})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=defaults.log_level,
        help="Logging level for the server logger",
    )
    return parser


def bind_socket(host: str, port: int) -> socket.socket:
    """Open a listening TCP socket, raising ``OSError`` if the address is taken."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(2048)
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def main(argv: list[str] | None = None) -> int:
    clock = ProcessClock()
    args = build_parser().parse_args(argv)
    logger = configure_logging(args.log_level)

    settings = get_settings().model_copy(
        update={
            "host": args.host,
            "port": args.port,
            "static_root": args.static_root.expanduser().resolve(),
            "log_level": args.log_level.upper(),
        }
    )
    if not settings.static_root.is_dir():
        logger.warning("Static root %s does not exist; every file request will 404", settings.static_root)

    try:
        sock = bind_socket(settings.host, settings.port)
    except OSError as e:
        logger.error("Failed to bind %s:%d: %s", settings.host, settings.port, e)
        return 1

    app = create_app(settings, clock=clock)
    # uvicorn's own startup chatter stays hidden unless debugging.
    uvicorn_level = "debug" if settings.log_level == "DEBUG" else "warning"
    server = uvicorn.Server(uvicorn.Config(app, log_level=uvicorn_level))

    logger.info("Server running on port %d", sock.getsockname()[1])
    try:
        server.run(sockets=[sock])
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    finally:
        sock.close()
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
