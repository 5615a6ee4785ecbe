import logging

from app.service import usuarios_service


def test_create():
    assert usuarios_service.create_usuario() == {"status": "OK - POST"}


def test_list_returns_fresh_empty_list():
    first = usuarios_service.list_usuarios()
    first["usuarios"].append({"name": "Ana"})
    assert usuarios_service.list_usuarios() == {"status": "OK - GET", "usuarios": []}


def test_update_and_delete_echo_id():
    assert usuarios_service.update_usuario(usuario_id="x1") == {
        "status": "Usuario con ID x1 actualizado"
    }
    assert usuarios_service.delete_usuario(usuario_id="x1") == {
        "status": "Usuario con ID x1 eliminado"
    }


def test_events_are_logged(caplog):
    caplog.set_level(logging.INFO, logger="service.usuarios")

    usuarios_service.update_usuario(usuario_id="7")
    usuarios_service.delete_usuario(usuario_id="8")

    events = [(r.event, r.usuario_id) for r in caplog.records if r.name == "service.usuarios"]
    assert events == [("usuario_update", "7"), ("usuario_delete", "8")]
