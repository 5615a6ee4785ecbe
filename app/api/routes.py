"""User route table.

``ROUTES`` is built once at import time and never mutated. Each entry binds a
method and path to an endpoint; ``build_router`` registers them in order.
Handlers never read the request body and always answer 200. Ids are matched
on the raw path segment and decoded afterwards.
"""
from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote_to_bytes

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel

from ..logging_conf import get_logger
from ..service import usuarios_service
from .models import StatusResponse, UsuariosListResponse

__all__ = ["ALLOWED_METHODS", "RouteDescriptor", "ROUTES", "build_router", "router"]

logger = get_logger("api")

ALLOWED_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})

_USUARIOS_PREFIX = b"/usuarios/"


@dataclass(frozen=True)
class RouteDescriptor:
    """A method + path pattern bound to an endpoint coroutine."""

    method: str
    path: str
    endpoint: Callable[..., Awaitable[Any]]
    response_model: type[BaseModel]
    summary: str = ""

    def __post_init__(self) -> None:
        if self.method not in ALLOWED_METHODS:
            raise ValueError(f"unsupported method {self.method!r}")


# ------------------------
# Endpoints
# ------------------------

async def create_usuario() -> StatusResponse:
    """Acknowledge a user creation; the payload is ignored."""
    out = usuarios_service.create_usuario()
    return StatusResponse(**out)


async def list_usuarios() -> UsuariosListResponse:
    out = usuarios_service.list_usuarios()
    return UsuariosListResponse(**out)


def usuario_id_from_raw_path(request: Request) -> str:
    """Return the id segment of ``/usuarios/<id>``, matched before decoding.

    The path pattern captures everything after ``/usuarios/``; only a single
    non-empty raw segment is accepted, so ``a%2Fb`` yields ``a/b`` while
    ``a/b`` is not routed.
    """
    raw = request.scope.get("raw_path") or request.url.path.encode("utf-8")
    raw = raw.split(b"?", 1)[0]
    _, sep, segment = raw.partition(_USUARIOS_PREFIX)
    if not sep or not segment or b"/" in segment:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return unquote_to_bytes(segment).decode("utf-8", errors="replace")


async def update_usuario(usuario_id: str = Depends(usuario_id_from_raw_path)) -> StatusResponse:
    """Acknowledge an update; any path segment is accepted as the id."""
    out = usuarios_service.update_usuario(usuario_id=usuario_id)
    return StatusResponse(**out)


async def delete_usuario(usuario_id: str = Depends(usuario_id_from_raw_path)) -> StatusResponse:
    out = usuarios_service.delete_usuario(usuario_id=usuario_id)
    return StatusResponse(**out)


ROUTES: tuple[RouteDescriptor, ...] = (
    RouteDescriptor(
        method="POST",
        path="/usuarios",
        endpoint=create_usuario,
        response_model=StatusResponse,
        summary="Create a user (no-op)",
    ),
    RouteDescriptor(
        method="GET",
        path="/usuarios",
        endpoint=list_usuarios,
        response_model=UsuariosListResponse,
        summary="List users (always empty)",
    ),
    RouteDescriptor(
        method="PUT",
        path="/usuarios/{usuario_id:path}",
        endpoint=update_usuario,
        response_model=StatusResponse,
        summary="Update a user (no-op)",
    ),
    RouteDescriptor(
        method="DELETE",
        path="/usuarios/{usuario_id:path}",
        endpoint=delete_usuario,
        response_model=StatusResponse,
        summary="Delete a user (no-op)",
    ),
)


def build_router(routes: Iterable[RouteDescriptor] = ROUTES) -> APIRouter:
    """Register every descriptor on a fresh router, preserving order."""
    api = APIRouter()
    for route in routes:
        api.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            response_model=route.response_model,
            summary=route.summary,
        )
        logger.debug(
            "route.register",
            extra={"event": "route_register", "method": route.method, "path": route.path},
        )
    return api


router = build_router()
