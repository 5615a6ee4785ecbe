#!/usr/bin/env python3
"""Smoke runner exercising every route of a running server.

Steps:
- wait for the liveness route
- send one request per scenario
- log a summary and exit 0 only if every check matched exactly
"""
from __future__ import annotations

import asyncio
import sys

import httpx

from app.logging_conf import get_logger, setup_logging
from runner.cli import parse_args
from runner.client import run_checks, wait_for_health
from runner.types import Check, CheckResult

setup_logging()
logger = get_logger("runner")

SCENARIOS: tuple[Check, ...] = (
    Check(name="liveness", method="GET", path="/", expected_body={"hello": "world"}),
    Check(
        name="create",
        method="POST",
        path="/usuarios",
        json={"name": "Ana"},
        expected_body={"status": "OK - POST"},
    ),
    Check(
        name="list",
        method="GET",
        path="/usuarios",
        expected_body={"status": "OK - GET", "usuarios": []},
    ),
    Check(
        name="update",
        method="PUT",
        path="/usuarios/42",
        expected_body={"status": "Usuario con ID 42 actualizado"},
    ),
    Check(
        name="delete",
        method="DELETE",
        path="/usuarios/abc",
        expected_body={"status": "Usuario con ID abc eliminado"},
    ),
)


def summarize(results: list[CheckResult]) -> tuple[dict, int]:
    """Compute summary dict and an exit code from check results."""
    failures = [
        {"check": r.name, "status_code": r.status_code, "body": r.body, "error": r.error}
        for r in results
        if not r.passed
    ]
    summary = {
        "component": "runner",
        "event": "summary",
        "checks": len(results),
        "passed": len(results) - len(failures),
        "failed": len(failures),
        "max_ms": max((r.elapsed_ms for r in results), default=0.0),
        "failures": failures,
    }
    exit_code = 0 if results and not failures else 1
    return summary, exit_code


async def run_smoke(
    *,
    base_url: str,
    timeout_s: float = 20.0,
    checks: tuple[Check, ...] = SCENARIOS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    await wait_for_health(base_url, timeout_s, transport=transport)
    results = await run_checks(base_url, list(checks), transport=transport)
    summary, exit_code = summarize(results)
    logger.info("runner.summary", extra=summary)
    return exit_code


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    code = asyncio.run(run_smoke(base_url=args.base_url, timeout_s=args.timeout))
    raise SystemExit(code)


if __name__ == "__main__":
    main()
