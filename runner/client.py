from __future__ import annotations

import asyncio
import time

import httpx

from app.logging_conf import get_logger
from runner.types import Check, CheckResult, SmokeError

logger = get_logger("runner.client")


async def wait_for_health(
    base_url: str,
    timeout_s: float = 20.0,
    *,
    poll_interval_s: float = 0.25,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """Ping the liveness route until it answers hello/world or raise after a timeout."""
    deadline = time.monotonic() + timeout_s
    async with httpx.AsyncClient(base_url=base_url, timeout=5.0, transport=transport) as client:
        while time.monotonic() < deadline:
            try:
                r = await client.get("/")
                if r.status_code == 200 and r.json() == {"hello": "world"}:
                    logger.info("health.ok", extra={"event": "health_ok"})
                    return
            except (httpx.HTTPError, ValueError) as e:
                logger.debug("health.retry", extra={"event": "health_retry", "error": str(e)})
            await asyncio.sleep(poll_interval_s)
    raise SmokeError("Health check did not pass within timeout")


async def run_check(client: httpx.AsyncClient, check: Check) -> CheckResult:
    """Send one request and compare status and JSON body against expectations.

    Transport errors and non-JSON bodies are reported as a failed result.
    """
    start = time.perf_counter()
    try:
        r = await client.request(check.method, check.path, json=check.json)
        body = r.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning(
            "check.error",
            extra={"event": "check_error", "check": check.name, "error": str(e)},
        )
        return CheckResult(
            name=check.name,
            passed=False,
            error=str(e),
            elapsed_ms=round((time.perf_counter() - start) * 1000.0, 2),
        )

    passed = r.status_code == check.expected_status and body == check.expected_body
    result = CheckResult(
        name=check.name,
        passed=passed,
        status_code=r.status_code,
        body=body,
        elapsed_ms=round((time.perf_counter() - start) * 1000.0, 2),
    )
    if not passed:
        result.error = f"expected {check.expected_status} {check.expected_body!r}"
    logger.info(
        "check.done",
        extra={
            "event": "check_done",
            "check": check.name,
            "passed": passed,
            "status_code": r.status_code,
        },
    )
    return result


async def run_checks(
    base_url: str,
    checks: list[Check],
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[CheckResult]:
    """Run all checks concurrently; requests are independent of each other."""
    async with httpx.AsyncClient(base_url=base_url, timeout=10.0, transport=transport) as client:
        return list(await asyncio.gather(*(run_check(client, c) for c in checks)))
