from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Check:
    """One request to send and the exact response expected back."""

    name: str
    method: str
    path: str
    expected_body: dict[str, Any]
    expected_status: int = 200
    json: Any = None


@dataclass
class CheckResult:
    """Outcome of a single check against a live server."""

    name: str
    passed: bool
    status_code: int | None = None
    body: Any = None
    error: str | None = None
    elapsed_ms: float = 0.0


class SmokeError(RuntimeError):
    """Raised when the smoke flow cannot proceed (e.g., server never healthy)."""
