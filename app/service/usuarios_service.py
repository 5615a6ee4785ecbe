from __future__ import annotations

from ..logging_conf import get_logger

logger = get_logger("service.usuarios")


# ------------------------
# Use-cases
# ------------------------

def create_usuario() -> dict:
    """Acknowledge a create request. Nothing is stored."""
    logger.info("usuario.create", extra={"event": "usuario_create"})
    return {"status": "OK - POST"}


def list_usuarios() -> dict:
    """Return the (always empty) user listing."""
    logger.info("usuarios.list", extra={"event": "usuarios_list"})
    return {"status": "OK - GET", "usuarios": []}


def update_usuario(*, usuario_id: str) -> dict:
    """Acknowledge an update of ``usuario_id``; the id is echoed verbatim."""
    logger.info(
        "usuario.update",
        extra={"event": "usuario_update", "usuario_id": usuario_id},
    )
    return {"status": f"Usuario con ID {usuario_id} actualizado"}


def delete_usuario(*, usuario_id: str) -> dict:
    """Acknowledge a delete of ``usuario_id`` (no-op)."""
    logger.info(
        "usuario.delete",
        extra={"event": "usuario_delete", "usuario_id": usuario_id},
    )
    return {"status": f"Usuario con ID {usuario_id} eliminado"}
