"""FastAPI app factory: liveness route, request logging, and the user routes."""
from __future__ import annotations

import time
from collections.abc import Callable
from uuid import uuid4

from fastapi import FastAPI, Request, Response

from app import __version__
from app.api import router as api_router
from app.api.models import HelloResponse
from app.config import get_app_version
from app.logging_conf import get_logger, setup_logging

# Configure logging before anything else.
setup_logging()
logger = get_logger("app")


def _route_template(request: Request) -> str | None:
    """Path pattern of the matched route, e.g. ``/usuarios/{usuario_id:path}``."""
    route = request.scope.get("route")
    return getattr(route, "path", None)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Usuarios API",
        version=get_app_version(__version__),
    )

    @app.on_event("startup")
    async def _on_startup() -> None:
        logger.info("startup", extra={"event": "startup"})

    @app.on_event("shutdown")
    async def _on_shutdown() -> None:
        logger.info("shutdown", extra={"event": "shutdown"})

    @app.middleware("http")
    async def access_log(request: Request, call_next: Callable[[Request], Response]):
        """One ``request.start``/``request.end`` pair per request, correlated by X-Request-ID."""
        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        request.state.request_id = request_id
        fields = {"method": request.method, "path": request.url.path, "request_id": request_id}

        logger.info("request.start", extra={"event": "request_start", **fields})
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("request.error", extra={"event": "request_error", **fields})
            raise

        response.headers["X-Request-ID"] = request_id
        logger.info(
            "request.end",
            extra={
                "event": "request_end",
                **fields,
                "route": _route_template(request),
                "status_code": response.status_code,
                "elapsed_ms": round((time.perf_counter() - started) * 1000.0, 2),
            },
        )
        return response

    @app.get("/", response_model=HelloResponse, summary="Liveness check")
    async def root() -> HelloResponse:
        return HelloResponse()

    app.include_router(api_router)

    return app


# ASGI entrypoint for uvicorn: `uvicorn app.main:app --port 3000`
app = create_app()
