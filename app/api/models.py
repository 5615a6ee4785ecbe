from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HelloResponse(BaseModel):
    """Body of the liveness route."""
    hello: str = "world"


class StatusResponse(BaseModel):
    """Plain acknowledgment carrying a human-readable status line."""
    status: str


class UsuariosListResponse(StatusResponse):
    """Acknowledgment plus the user listing (always empty)."""
    usuarios: list[dict[str, Any]] = Field(default_factory=list)
