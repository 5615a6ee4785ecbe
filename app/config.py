"""Runtime settings read from the environment.

With no environment set the defaults give a fixed listener on
127.0.0.1:3000; HOST, PORT and APP_VERSION are optional overrides.
"""
from __future__ import annotations

import os

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "get_host_from_env",
    "get_port_from_env",
    "get_app_version",
]

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
_MAX_PORT = 65535


def get_host_from_env() -> str:
    """Return HOST from environment, defaulting to the loopback address."""
    return os.getenv("HOST", DEFAULT_HOST)


def get_port_from_env() -> int:
    """Return PORT from environment, defaulting to 3000."""
    raw = os.getenv("PORT")
    if raw is None:
        return DEFAULT_PORT
    try:
        val = int(raw, 10)
    except ValueError as e:
        raise ValueError("PORT must be an integer") from e
    if not (0 <= val <= _MAX_PORT):
        raise ValueError(f"PORT must be in [0,{_MAX_PORT}]")
    return val


def get_app_version(default: str) -> str:
    return os.getenv("APP_VERSION", default)
