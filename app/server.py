"""Process bootstrap: bind the listening socket and serve the app with uvicorn.

A failed bind is logged and ends the process with exit code 1. It is never
retried.
"""
from __future__ import annotations

import argparse
import socket
import sys

import uvicorn

from app.config import DEFAULT_HOST, DEFAULT_PORT, get_host_from_env, get_port_from_env
from app.logging_conf import get_logger
from app.main import app as application

__all__ = ["StartupError", "bind_socket", "start", "parse_args", "main"]

logger = get_logger("server")


class StartupError(RuntimeError):
    """Raised when the listening socket cannot be bound."""


def bind_socket(host: str, port: int) -> socket.socket:
    """Create and bind a TCP socket on ``(host, port)``.

    Raises:
        StartupError: if the address is in use, not permitted, or the port
            is outside 0-65535.
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except (OSError, OverflowError) as e:
        sock.close()
        reason = getattr(e, "strerror", None) or e
        raise StartupError(f"cannot bind {host}:{port}: {reason}") from e
    sock.set_inheritable(True)
    return sock


def start(port: int = DEFAULT_PORT, host: str = DEFAULT_HOST) -> None:
    """Serve the application on ``host:port`` until the process is killed."""
    try:
        sock = bind_socket(host, port)
    except StartupError:
        logger.exception(
            "server.bind_failed",
            extra={"event": "bind_failed", "host": host, "port": port},
        )
        raise SystemExit(1)

    config = uvicorn.Config(application, host=host, port=port, log_config=None)
    server = uvicorn.Server(config)
    logger.info(
        "server.listen",
        extra={"event": "listen", "host": host, "port": sock.getsockname()[1]},
    )
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the server."""
    parser = argparse.ArgumentParser(description="Usuarios API server")
    parser.add_argument("--host", default=get_host_from_env())
    parser.add_argument("--port", type=int, default=get_port_from_env())
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    start(port=args.port, host=args.host)


if __name__ == "__main__":
    main()
