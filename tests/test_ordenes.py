# tests/test_ordenes.py

from decimal import Decimal

import pytest
from httpx import AsyncClient

from mercado_gaucho.core.config import settings
from mercado_gaucho.models import Orden, DetalleOrden, Producto, Usuario

pytestmark = pytest.mark.asyncio


def _orden(usuario: Usuario, producto: Producto, **extra):
    datos = {
        "id_usuario": usuario.id_usuario,
        "total": "150.00",
        "detalles": [{"id_producto": producto.id_producto, "cantidad": 2, "precio_unitario": "75.00"}],
    }
    datos.update(extra)
    return datos


async def test_create_orden_with_items(client: AsyncClient, usuario: Usuario, producto: Producto):
    response = await client.post("/api/ordenes", json=_orden(usuario, producto))

    assert response.status_code == 201
    data = response.json()
    assert data["estado"] == "pendiente"
    assert Decimal(data["total"]) == Decimal("150.00")
    assert data["email_usuario"] == "juan@example.com"
    assert len(data["detalles"]) == 1
    detalle = data["detalles"][0]
    assert detalle["nombre_producto"] == "Mate de calabaza"
    assert detalle["cantidad"] == 2
    assert Decimal(detalle["precio_unitario"]) == Decimal("75.00")


async def test_create_orden_invalid_item_rolls_back(
    client: AsyncClient, usuario: Usuario, producto: Producto, db_session
):
    detalles = [
        {"id_producto": producto.id_producto, "cantidad": 1, "precio_unitario": "75.00"},
        {"id_producto": producto.id_producto, "cantidad": 0, "precio_unitario": "75.00"},
    ]
    response = await client.post("/api/ordenes", json=_orden(usuario, producto, detalles=detalles))

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert "posición 2" in detail
    assert "cantidad" in detail
    # Ни заказа, ни первой позиции не осталось
    assert db_session.query(Orden).count() == 0
    assert db_session.query(DetalleOrden).count() == 0


async def test_create_orden_item_must_be_object(client: AsyncClient, usuario: Usuario, producto: Producto, db_session):
    response = await client.post("/api/ordenes", json=_orden(usuario, producto, detalles=["mate"]))

    assert response.status_code == 400
    assert "posición 1" in response.json()["detail"]
    assert db_session.query(Orden).count() == 0


async def test_create_orden_unknown_product_rolls_back(
    client: AsyncClient, usuario: Usuario, producto: Producto, db_session
):
    detalles = [{"id_producto": 999, "cantidad": 1, "precio_unitario": "10.00"}]
    response = await client.post("/api/ordenes", json=_orden(usuario, producto, detalles=detalles))

    assert response.status_code == 400
    assert response.json()["detail"] == "El usuario o uno de los productos especificados no existe."
    assert db_session.query(Orden).count() == 0


async def test_create_orden_unknown_user(client: AsyncClient, usuario: Usuario, producto: Producto, db_session):
    response = await client.post("/api/ordenes", json=_orden(usuario, producto, id_usuario=999))

    assert response.status_code == 400
    assert db_session.query(Orden).count() == 0


async def test_create_orden_invalid_estado(client: AsyncClient, usuario: Usuario, producto: Producto, db_session):
    response = await client.post("/api/ordenes", json=_orden(usuario, producto, estado="perdido"))

    assert response.status_code == 400
    assert db_session.query(Orden).count() == 0


async def test_create_orden_without_items(client: AsyncClient, usuario: Usuario, producto: Producto):
    response = await client.post("/api/ordenes", json=_orden(usuario, producto, detalles=[], total="0"))

    assert response.status_code == 201
    assert response.json()["detalles"] == []


async def test_orden_status_transitions(client: AsyncClient, usuario: Usuario, producto: Producto):
    orden = (await client.post("/api/ordenes", json=_orden(usuario, producto))).json()
    url = f"/api/ordenes/{orden['id_orden']}"

    response = await client.put(url, json={"estado": "pagado"})
    assert response.status_code == 200
    assert response.json()["estado"] == "pagado"

    # Повторная запись того же статуса разрешена
    response = await client.put(url, json={"estado": "pagado"})
    assert response.status_code == 200

    response = await client.put(url, json={"estado": "pendiente"})
    assert response.status_code == 409
    assert response.json()["detail"] == "Transición de estado no permitida: pagado -> pendiente."

    response = await client.put(url, json={"estado": "desconocido"})
    assert response.status_code == 400


async def test_orden_transitions_can_be_disabled(
    client: AsyncClient, usuario: Usuario, producto: Producto, monkeypatch
):
    monkeypatch.setattr(settings, "ENFORCE_ORDER_TRANSITIONS", False)
    orden = (await client.post("/api/ordenes", json=_orden(usuario, producto, estado="entregado"))).json()

    response = await client.put(f"/api/ordenes/{orden['id_orden']}", json={"estado": "pendiente"})
    assert response.status_code == 200
    assert response.json()["estado"] == "pendiente"


async def test_update_orden_errors(client: AsyncClient, usuario: Usuario, producto: Producto):
    orden = (await client.post("/api/ordenes", json=_orden(usuario, producto))).json()

    response = await client.put(f"/api/ordenes/{orden['id_orden']}", json={})
    assert response.status_code == 400

    response = await client.put("/api/ordenes/999", json={"estado": "pagado"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Orden no encontrada."


async def test_get_orden_includes_shipment_and_payments(client: AsyncClient, usuario: Usuario, producto: Producto):
    orden = (await client.post("/api/ordenes", json=_orden(usuario, producto))).json()
    id_orden = orden["id_orden"]

    response = await client.get(f"/api/ordenes/{id_orden}")
    assert response.status_code == 200
    assert response.json()["envio"] is None
    assert response.json()["pagos"] == []

    pago = await client.post(
        "/api/pagos", json={"id_orden": id_orden, "metodo_pago": "tarjeta", "monto_pagado": "150.00"}
    )
    assert pago.status_code == 201
    assert pago.json()["estado_pago"] == "pendiente"

    envio = await client.post(
        "/api/envios",
        json={"id_orden": id_orden, "direccion_entrega": "Av. Siempreviva 742", "metodo_envio": "correo"},
    )
    assert envio.status_code == 201
    assert envio.json()["estado_envio"] == "preparando"
    assert Decimal(envio.json()["costo_envio"]) == Decimal("0")

    data = (await client.get(f"/api/ordenes/{id_orden}")).json()
    assert data["envio"]["id_envio"] == envio.json()["id_envio"]
    assert [p["id_pago"] for p in data["pagos"]] == [pago.json()["id_pago"]]
    assert len(data["detalles"]) == 1


async def test_second_shipment_for_orden_conflicts(client: AsyncClient, usuario: Usuario, producto: Producto):
    orden = (await client.post("/api/ordenes", json=_orden(usuario, producto))).json()
    envio = {"id_orden": orden["id_orden"], "direccion_entrega": "Calle 1", "metodo_envio": "correo"}

    assert (await client.post("/api/envios", json=envio)).status_code == 201
    response = await client.post("/api/envios", json=envio)
    assert response.status_code == 409

    response = await client.get(f"/api/envios/orden/{orden['id_orden']}")
    assert response.status_code == 200


async def test_payment_for_unknown_orden(client: AsyncClient):
    response = await client.post(
        "/api/pagos", json={"id_orden": 999, "metodo_pago": "tarjeta", "monto_pagado": "10.00"}
    )
    assert response.status_code == 400


async def test_list_ordenes_rejects_inverted_date_range(client: AsyncClient):
    response = await client.get("/api/ordenes", params={"fecha_desde": "2024-05-10", "fecha_hasta": "2024-05-01"})
    assert response.status_code == 400


async def test_list_ordenes_filters_by_usuario(
    client: AsyncClient, usuario: Usuario, vendedor: Usuario, producto: Producto
):
    await client.post("/api/ordenes", json=_orden(usuario, producto))
    await client.post("/api/ordenes", json=_orden(vendedor, producto))

    response = await client.get("/api/ordenes", params={"id_usuario": usuario.id_usuario})
    assert response.status_code == 200
    assert [o["id_usuario"] for o in response.json()] == [usuario.id_usuario]


async def test_delete_orden_removes_items(client: AsyncClient, usuario: Usuario, producto: Producto, db_session):
    orden = (await client.post("/api/ordenes", json=_orden(usuario, producto))).json()

    response = await client.delete(f"/api/ordenes/{orden['id_orden']}")
    assert response.status_code == 204
    assert db_session.query(DetalleOrden).count() == 0

    response = await client.delete(f"/api/ordenes/{orden['id_orden']}")
    assert response.status_code == 404
