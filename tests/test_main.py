# tests/test_main.py

import pytest
from httpx import ASGITransport, AsyncClient

from mercado_gaucho.core.config import settings
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.main import app

pytestmark = pytest.mark.asyncio


@pytest.fixture
async def client_sin_errores(client: AsyncClient):
    """Клиент, который получает ответ 500 вместо проброса исключения из приложения."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def test_read_root(client: AsyncClient):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "API de Mercado Gaucho funcionando", "version": "1.0.0"}


async def test_estado_db(client: AsyncClient):
    response = await client.get("/estado-db")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_estado_db_unavailable(client: AsyncClient, mocker):
    from sqlalchemy.exc import OperationalError

    db = mocker.Mock()
    db.execute.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))
    app.dependency_overrides[get_db] = lambda: db

    response = await client.get("/estado-db")
    assert response.status_code == 503
    assert response.json()["status"] == "error"


async def test_unknown_route(client: AsyncClient):
    response = await client.get("/api/no-existe")
    assert response.status_code == 404
    assert response.json() == {"detail": "Ruta no encontrada."}


async def test_resource_not_found_keeps_its_message(client: AsyncClient):
    response = await client.get("/api/categorias/999")
    assert response.status_code == 404
    assert response.json() == {"detail": "Categoría no encontrada."}


async def test_validation_error_is_400(client: AsyncClient):
    response = await client.post("/api/categorias", json={"descripcion": "sin nombre"})

    assert response.status_code == 400
    assert "nombre_categoria" in response.json()["detail"]


async def test_path_param_validation_is_400(client: AsyncClient):
    response = await client.get("/api/categorias/abc")
    assert response.status_code == 400


async def test_unhandled_error_in_development(client_sin_errores: AsyncClient, mocker):
    mocker.patch("mercado_gaucho.crud.catalogo.get_categorias", side_effect=RuntimeError("boom"))

    response = await client_sin_errores.get("/api/categorias")

    assert response.status_code == 500
    assert response.json()["error"] == "boom"
    assert response.json()["detail"]


async def test_unhandled_error_in_production_hides_details(client_sin_errores: AsyncClient, mocker, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    mocker.patch("mercado_gaucho.crud.catalogo.get_categorias", side_effect=RuntimeError("boom"))

    response = await client_sin_errores.get("/api/categorias")

    assert response.status_code == 500
    assert "error" not in response.json()
