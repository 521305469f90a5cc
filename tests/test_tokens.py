# tests/test_tokens.py

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient

from mercado_gaucho.models import TokenAutenticacion, Usuario

pytestmark = pytest.mark.asyncio

TOKEN_VALIDO = "a" * 64


def _expiracion(horas: int = 1) -> str:
    return (datetime.now(timezone.utc) + timedelta(hours=horas)).isoformat()


async def test_create_token_generates_value(client: AsyncClient, usuario: Usuario):
    response = await client.post(
        "/api/tokens-autenticacion", json={"id_usuario": usuario.id_usuario, "expiracion": _expiracion()}
    )

    assert response.status_code == 201
    data = response.json()
    assert len(data["token"]) == 64
    assert data["ip_origen"] == "127.0.0.1"
    assert data["email_usuario"] == "juan@example.com"


async def test_create_token_with_explicit_value(client: AsyncClient, usuario: Usuario):
    datos = {"id_usuario": usuario.id_usuario, "expiracion": _expiracion(), "token": TOKEN_VALIDO}

    response = await client.post("/api/tokens-autenticacion", json=datos)
    assert response.status_code == 201
    assert response.json()["token"] == TOKEN_VALIDO

    response = await client.post("/api/tokens-autenticacion", json=datos)
    assert response.status_code == 409
    assert response.json()["detail"] == "El token proporcionado ya existe."


@pytest.mark.parametrize("token", ["corto", "a" * 65, "a" * 32 + " " + "a" * 31])
async def test_create_token_rejects_bad_format(client: AsyncClient, usuario: Usuario, token: str):
    response = await client.post(
        "/api/tokens-autenticacion",
        json={"id_usuario": usuario.id_usuario, "expiracion": _expiracion(), "token": token},
    )
    assert response.status_code == 400


async def test_create_token_rejects_past_expiration(client: AsyncClient, usuario: Usuario, db_session):
    response = await client.post(
        "/api/tokens-autenticacion", json={"id_usuario": usuario.id_usuario, "expiracion": _expiracion(-1)}
    )

    assert response.status_code == 400
    assert "expiracion" in response.json()["detail"]
    assert db_session.query(TokenAutenticacion).count() == 0


async def test_create_token_unknown_user(client: AsyncClient):
    response = await client.post("/api/tokens-autenticacion", json={"id_usuario": 999, "expiracion": _expiracion()})
    assert response.status_code == 400


async def test_validar_token(client: AsyncClient, vendedor: Usuario, nuevo_token):
    nuevo_token(vendedor, TOKEN_VALIDO)

    response = await client.get(f"/api/tokens-autenticacion/validar/{TOKEN_VALIDO}")

    assert response.status_code == 200
    data = response.json()
    assert data["id_usuario"] == vendedor.id_usuario
    assert data["rol"] == "vendedor"
    assert "token" not in data


async def test_validar_token_bad_format(client: AsyncClient):
    response = await client.get("/api/tokens-autenticacion/validar/corto")
    assert response.status_code == 400
    assert response.json()["detail"] == "Formato de token inválido."


async def test_validar_token_unknown(client: AsyncClient):
    response = await client.get(f"/api/tokens-autenticacion/validar/{'b' * 64}")
    assert response.status_code == 401
    assert response.json()["detail"] == "Token inválido o expirado."


async def test_validar_token_expired(client: AsyncClient, usuario: Usuario, nuevo_token):
    nuevo_token(usuario, TOKEN_VALIDO, horas=-1)

    response = await client.get(f"/api/tokens-autenticacion/validar/{TOKEN_VALIDO}")
    assert response.status_code == 401


async def test_validar_token_is_rate_limited(client: AsyncClient):
    # Лимит по умолчанию - 30 запросов в минуту с одного адреса
    for _ in range(30):
        response = await client.get("/api/tokens-autenticacion/validar/corto")
        assert response.status_code == 400

    response = await client.get("/api/tokens-autenticacion/validar/corto")
    assert response.status_code == 429


async def test_delete_token_by_value(client: AsyncClient, usuario: Usuario, nuevo_token):
    nuevo_token(usuario, TOKEN_VALIDO)

    response = await client.delete(f"/api/tokens-autenticacion/valor/{TOKEN_VALIDO}")
    assert response.status_code == 204

    response = await client.delete(f"/api/tokens-autenticacion/valor/{TOKEN_VALIDO}")
    assert response.status_code == 404
    assert response.json()["detail"] == "Token no encontrado."


async def test_delete_all_tokens_of_user(client: AsyncClient, usuario: Usuario, vendedor: Usuario, nuevo_token):
    nuevo_token(usuario, "a" * 64)
    nuevo_token(usuario, "b" * 64, horas=-2)
    nuevo_token(vendedor, "c" * 64)

    response = await client.delete(f"/api/tokens-autenticacion/usuario/{usuario.id_usuario}/all")
    assert response.status_code == 200
    assert response.json()["message"] == f"2 token(s) eliminados para el usuario {usuario.id_usuario}."

    # Повторный вызов - не ошибка
    response = await client.delete(f"/api/tokens-autenticacion/usuario/{usuario.id_usuario}/all")
    assert response.status_code == 200
    assert response.json()["message"].startswith("0 token(s)")

    response = await client.get(f"/api/tokens-autenticacion/validar/{'c' * 64}")
    assert response.status_code == 200


async def test_list_tokens_by_expiration(client: AsyncClient, usuario: Usuario, nuevo_token):
    nuevo_token(usuario, "a" * 64)
    nuevo_token(usuario, "b" * 64, horas=-2)

    response = await client.get("/api/tokens-autenticacion", params={"expirado": "true"})
    assert [t["token"] for t in response.json()] == ["b" * 64]

    response = await client.get("/api/tokens-autenticacion", params={"expirado": "false"})
    assert [t["token"] for t in response.json()] == ["a" * 64]


async def test_update_token_expiration(client: AsyncClient, usuario: Usuario, nuevo_token):
    token = nuevo_token(usuario, TOKEN_VALIDO)
    url = f"/api/tokens-autenticacion/{token.id_token}"

    response = await client.put(url, json={"ip_origen": "192.168.0.10"})
    assert response.status_code == 200
    assert response.json()["ip_origen"] == "192.168.0.10"

    response = await client.put(url, json={"expiracion": _expiracion(-1)})
    assert response.status_code == 400

    response = await client.put(url, json={})
    assert response.status_code == 400
