"""
pytest configuration and fixtures.
"""

import socket
from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.main import create_app


@pytest.fixture
def api() -> FastAPI:
    """A freshly built application."""
    return create_app()


@pytest.fixture
def client(api: FastAPI) -> Iterator[TestClient]:
    """In-process HTTP client; runs startup/shutdown events."""
    with TestClient(api) as c:
        yield c


@pytest.fixture
def busy_port() -> Iterator[int]:
    """A loopback port held by another listening socket for the test's duration."""
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    s.bind(("127.0.0.1", 0))
    s.listen(1)
    try:
        yield s.getsockname()[1]
    finally:
        s.close()
