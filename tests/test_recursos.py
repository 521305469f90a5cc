# tests/test_recursos.py

from decimal import Decimal

import pytest
from httpx import AsyncClient

from mercado_gaucho.core.security import verify_password
from mercado_gaucho.models import Categoria, Producto, Usuario

pytestmark = pytest.mark.asyncio


# --- Пользователи ---

async def test_create_usuario_hides_password(client: AsyncClient, db_session):
    response = await client.post(
        "/api/usuarios",
        json={"nombre": "Lucía", "apellido": "Gómez", "email": "lucia@example.com", "contrasena": "mate123"},
    )

    assert response.status_code == 201
    data = response.json()
    assert "contrasena" not in data
    assert "contrasena_hash" not in data
    assert data["tipo_usuario"] == "comprador"
    assert data["tipo_cuenta"] == "personal"

    guardado = db_session.get(Usuario, data["id_usuario"])
    assert guardado.contrasena_hash != "mate123"
    assert verify_password("mate123", guardado.contrasena_hash)


async def test_create_usuario_duplicate_email(client: AsyncClient, usuario: Usuario):
    response = await client.post(
        "/api/usuarios",
        json={"nombre": "Otro", "apellido": "Juan", "email": "juan@example.com", "contrasena": "x"},
    )
    assert response.status_code == 409
    assert response.json()["detail"] == "El email ya está registrado."


async def test_create_usuario_invalid_type(client: AsyncClient):
    response = await client.post(
        "/api/usuarios",
        json={"nombre": "A", "apellido": "B", "email": "ab@example.com", "contrasena": "x", "tipo_usuario": "jefe"},
    )
    assert response.status_code == 400


async def test_create_usuario_invalid_email(client: AsyncClient):
    response = await client.post(
        "/api/usuarios", json={"nombre": "A", "apellido": "B", "email": "no-es-email", "contrasena": "x"}
    )
    assert response.status_code == 400
    assert "email" in response.json()["detail"]


async def test_update_usuario(client: AsyncClient, usuario: Usuario):
    url = f"/api/usuarios/{usuario.id_usuario}"

    response = await client.put(url, json={"telefono": "099123456"})
    assert response.status_code == 200
    assert response.json()["telefono"] == "099123456"
    assert response.json()["nombre"] == "Juan"

    response = await client.put(url, json={})
    assert response.status_code == 400

    response = await client.put("/api/usuarios/999", json={"nombre": "X"})
    assert response.status_code == 404


async def test_delete_usuario_twice(client: AsyncClient, usuario: Usuario):
    response = await client.delete(f"/api/usuarios/{usuario.id_usuario}")
    assert response.status_code == 204

    response = await client.delete(f"/api/usuarios/{usuario.id_usuario}")
    assert response.status_code == 404


async def test_delete_usuario_with_products_conflicts(client: AsyncClient, producto: Producto, vendedor: Usuario):
    response = await client.delete(f"/api/usuarios/{vendedor.id_usuario}")

    assert response.status_code == 409
    assert "productos" in response.json()["detail"]


async def test_perfil_personal_one_per_user(client: AsyncClient, usuario: Usuario):
    datos = {"id_usuario": usuario.id_usuario, "dni": "12345678", "genero": "masculino"}

    response = await client.post("/api/cuentas-personales", json=datos)
    assert response.status_code == 201
    assert response.json()["email_usuario"] == "juan@example.com"

    response = await client.post("/api/cuentas-personales", json=datos)
    assert response.status_code == 409

    response = await client.put(f"/api/cuentas-personales/{usuario.id_usuario}", json={"genero": "robot"})
    assert response.status_code == 400


async def test_ubicacion_requires_city_or_coordinates(client: AsyncClient, usuario: Usuario):
    response = await client.post("/api/ubicaciones-usuario", json={"id_usuario": usuario.id_usuario, "latitud": "10"})
    assert response.status_code == 400

    response = await client.post(
        "/api/ubicaciones-usuario",
        json={"id_usuario": usuario.id_usuario, "latitud": "-34.9011", "longitud": "-56.1645"},
    )
    assert response.status_code == 201


# --- Категории и товары ---

async def test_categoria_unique_name(client: AsyncClient, categoria: Categoria):
    response = await client.post("/api/categorias", json={"nombre_categoria": "Mates"})
    assert response.status_code == 409
    assert response.json()["detail"] == "Ya existe una categoría con ese nombre."


async def test_delete_categoria_in_use(client: AsyncClient, producto: Producto, categoria: Categoria):
    response = await client.delete(f"/api/categorias/{categoria.id_categoria}")
    assert response.status_code == 409


def _producto(vendedor: Usuario, categoria: Categoria, **extra):
    datos = {
        "id_usuario": vendedor.id_usuario,
        "id_categoria": categoria.id_categoria,
        "titulo": "Bombilla de alpaca",
        "precio": "20.50",
        "stock": 3,
        "estado": "nuevo",
    }
    datos.update(extra)
    return datos


async def test_create_producto(client: AsyncClient, vendedor: Usuario, categoria: Categoria):
    response = await client.post("/api/productos", json=_producto(vendedor, categoria))

    assert response.status_code == 201
    data = response.json()
    assert Decimal(data["precio"]) == Decimal("20.50")
    assert data["nombre_categoria"] == "Mates"


async def test_create_producto_invalid_estado(client: AsyncClient, vendedor: Usuario, categoria: Categoria):
    response = await client.post("/api/productos", json=_producto(vendedor, categoria, estado="roto"))
    assert response.status_code == 400
    assert response.json()["detail"] == 'Estado inválido. Debe ser "nuevo" o "usado".'


async def test_create_producto_unknown_categoria(client: AsyncClient, vendedor: Usuario, categoria: Categoria):
    response = await client.post("/api/productos", json=_producto(vendedor, categoria, id_categoria=999))
    assert response.status_code == 400
    assert response.json()["detail"] == "El usuario (vendedor) o la categoría especificada no existe."


async def test_list_productos_by_price(client: AsyncClient, producto: Producto, vendedor: Usuario, categoria: Categoria):
    await client.post("/api/productos", json=_producto(vendedor, categoria))

    response = await client.get("/api/productos", params={"precio_min": "50"})
    assert response.status_code == 200
    assert [p["titulo"] for p in response.json()] == ["Mate de calabaza"]


async def test_update_producto_rejects_negative_stock(client: AsyncClient, producto: Producto):
    response = await client.put(f"/api/productos/{producto.id_producto}", json={"stock": -1})
    assert response.status_code == 400


# --- Сообщения ---

async def test_mensaje_answered_once(client: AsyncClient, usuario: Usuario, vendedor: Usuario, producto: Producto):
    response = await client.post(
        "/api/mensajes",
        json={
            "id_emisor": usuario.id_usuario,
            "id_receptor": vendedor.id_usuario,
            "id_producto": producto.id_producto,
            "mensaje": "¿Tiene stock?",
        },
    )
    assert response.status_code == 201
    mensaje = response.json()
    assert mensaje["respuesta"] is None
    assert mensaje["email_receptor"] == "vendedora@example.com"
    assert mensaje["nombre_producto"] == "Mate de calabaza"

    url = f"/api/mensajes/{mensaje['id_mensaje']}/respuesta"
    response = await client.put(url, json={"respuesta": "Sí, 10 unidades."})
    assert response.status_code == 200
    assert response.json()["respuesta"] == "Sí, 10 unidades."
    assert response.json()["fecha_respuesta"] is not None

    response = await client.put(url, json={"respuesta": "Otra respuesta"})
    assert response.status_code == 409
    assert response.json()["detail"] == "El mensaje ya fue respondido."

    response = await client.put("/api/mensajes/999/respuesta", json={"respuesta": "Hola"})
    assert response.status_code == 404


async def test_mensaje_to_self_rejected(client: AsyncClient, usuario: Usuario):
    response = await client.post(
        "/api/mensajes",
        json={"id_emisor": usuario.id_usuario, "id_receptor": usuario.id_usuario, "mensaje": "Hola"},
    )
    assert response.status_code == 400


# --- Официальные магазины ---

async def test_tienda_unique_fields_have_distinct_messages(
    client: AsyncClient, vendedor: Usuario, usuario: Usuario
):
    response = await client.post(
        "/api/tiendas-oficiales", json={"id_usuario": vendedor.id_usuario, "nombre_tienda": "La Pulpería"}
    )
    assert response.status_code == 201
    assert response.json()["estado"] == "en_revision"
    assert response.json()["email_propietario"] == "vendedora@example.com"

    response = await client.post(
        "/api/tiendas-oficiales", json={"id_usuario": vendedor.id_usuario, "nombre_tienda": "Otra"}
    )
    assert response.status_code == 409
    assert response.json()["detail"] == "Este usuario ya tiene una tienda oficial."

    response = await client.post(
        "/api/tiendas-oficiales", json={"id_usuario": usuario.id_usuario, "nombre_tienda": "La Pulpería"}
    )
    assert response.status_code == 409
    assert response.json()["detail"] == "El nombre de la tienda ya está en uso."


# --- Акции ---

async def test_promocion_lookup_by_codigo(client: AsyncClient):
    response = await client.post(
        "/api/promociones",
        json={"titulo": "Primavera", "descuento_porcentaje": 15, "codigo_promocion": "PRIMAVERA15"},
    )
    assert response.status_code == 201

    response = await client.get("/api/promociones/codigo/primavera15")
    assert response.status_code == 200
    assert response.json()["titulo"] == "Primavera"

    response = await client.get("/api/promociones/codigo/NOEXISTE")
    assert response.status_code == 404


@pytest.mark.parametrize("codigo", ["%25", "VIP%25", "VIP-SECRETO-9_", "%25SECRETO%25"])
async def test_promocion_codigo_matches_exactly(client: AsyncClient, codigo: str):
    response = await client.post("/api/promociones", json={"titulo": "Secreta", "codigo_promocion": "VIP-SECRETO-90"})
    assert response.status_code == 201

    # % и _ в коде не работают как шаблоны LIKE
    response = await client.get(f"/api/promociones/codigo/{codigo}")
    assert response.status_code == 404

    response = await client.get("/api/promociones", params={"codigo_promocion": "VIP%"})
    assert response.json() == []

    response = await client.get("/api/promociones", params={"codigo_promocion": "vip-secreto-90"})
    assert [p["titulo"] for p in response.json()] == ["Secreta"]


async def test_promocion_date_range(client: AsyncClient):
    response = await client.post(
        "/api/promociones", json={"titulo": "Mal", "fecha_inicio": "2024-03-10", "fecha_fin": "2024-03-01"}
    )
    assert response.status_code == 400

    promo = (await client.post(
        "/api/promociones", json={"titulo": "Bien", "fecha_inicio": "2024-03-01", "fecha_fin": "2024-03-10"}
    )).json()

    # Новая дата начала позже уже сохранённой даты окончания
    response = await client.put(f"/api/promociones/{promo['id_promocion']}", json={"fecha_inicio": "2024-04-01"})
    assert response.status_code == 400


async def test_producto_promocionado_link_and_unlink(client: AsyncClient, producto: Producto):
    promo = (await client.post("/api/promociones", json={"titulo": "Invierno"})).json()
    clave = {"id_producto": producto.id_producto, "id_promocion": promo["id_promocion"]}

    response = await client.post("/api/productos-promocionados", json=clave)
    assert response.status_code == 201
    assert response.json()["nombre_promocion"] == "Invierno"

    response = await client.post("/api/productos-promocionados", json=clave)
    assert response.status_code == 409

    response = await client.get(f"/api/productos-promocionados/producto/{producto.id_producto}")
    assert len(response.json()) == 1

    response = await client.request("DELETE", "/api/productos-promocionados", json=clave)
    assert response.status_code == 204

    response = await client.request("DELETE", "/api/productos-promocionados", json=clave)
    assert response.status_code == 404


# --- Выделенные товары ---

async def test_destacado_upsert_keeps_id(client: AsyncClient, producto: Producto, db_session):
    primero = await client.post(
        "/api/productos-destacados", json={"id_producto": producto.id_producto, "tipo_destacado": "portada"}
    )
    segundo = await client.post(
        "/api/productos-destacados", json={"id_producto": producto.id_producto, "tipo_destacado": "busqueda"}
    )

    assert primero.status_code == 200
    assert segundo.status_code == 200
    assert segundo.json()["id_destacado"] == primero.json()["id_destacado"]
    assert segundo.json()["tipo_destacado"] == "busqueda"

    response = await client.get(f"/api/productos-destacados/producto/{producto.id_producto}")
    assert response.json()["nombre_producto"] == "Mate de calabaza"


async def test_destacado_errors(client: AsyncClient, producto: Producto):
    response = await client.post("/api/productos-destacados", json={"id_producto": 999})
    assert response.status_code == 400

    response = await client.post(
        "/api/productos-destacados", json={"id_producto": producto.id_producto, "tipo_destacado": "lateral"}
    )
    assert response.status_code == 400

    response = await client.delete(f"/api/productos-destacados/producto/{producto.id_producto}")
    assert response.status_code == 404


# --- Баннеры ---

async def test_banner_crud(client: AsyncClient):
    response = await client.post(
        "/api/banners", json={"titulo": "Envío gratis", "imagen_url": "https://cdn.example.com/b.png"}
    )
    assert response.status_code == 201
    banner = response.json()
    assert banner["prioridad"] == 0

    response = await client.put(f"/api/banners/{banner['id_banner']}", json={"prioridad": 5})
    assert response.json()["prioridad"] == 5

    response = await client.delete(f"/api/banners/{banner['id_banner']}")
    assert response.status_code == 204
    response = await client.get(f"/api/banners/{banner['id_banner']}")
    assert response.status_code == 404


# --- Изображения, адреса, корпоративный профиль ---

async def test_imagenes_ordered_by_position(client: AsyncClient, producto: Producto):
    for url, orden in (("https://cdn.example.com/2.jpg", 2), ("https://cdn.example.com/1.jpg", 1)):
        response = await client.post(
            "/api/imagenes-producto", json={"id_producto": producto.id_producto, "url_imagen": url, "orden": orden}
        )
        assert response.status_code == 201

    response = await client.get("/api/imagenes-producto", params={"id_producto": producto.id_producto})
    data = response.json()
    assert [i["orden"] for i in data] == [1, 2]
    assert data[0]["nombre_producto"] == "Mate de calabaza"


async def test_imagen_for_unknown_product(client: AsyncClient):
    response = await client.post("/api/imagenes-producto", json={"id_producto": 999, "url_imagen": "x.jpg"})
    assert response.status_code == 400


async def test_direccion_round_trip(client: AsyncClient, usuario: Usuario, vendedor: Usuario):
    datos = {"id_usuario": usuario.id_usuario, "direccion": "18 de Julio 1234", "ciudad": "Montevideo", "pais": "Uruguay"}
    creada = (await client.post("/api/direcciones", json=datos)).json()

    response = await client.get(f"/api/direcciones/{creada['id_direccion']}")
    assert response.status_code == 200
    assert response.json() == creada
    assert creada["email_usuario"] == "juan@example.com"

    response = await client.get("/api/direcciones", params={"id_usuario": vendedor.id_usuario})
    assert response.json() == []


async def test_cuenta_empresa(client: AsyncClient, vendedor: Usuario):
    datos = {"id_usuario": vendedor.id_usuario, "ruc": "211234560019", "razon_social": "Mates del Sur S.A."}

    response = await client.post("/api/cuentas-empresa", json=datos)
    assert response.status_code == 201

    response = await client.put(f"/api/cuentas-empresa/{vendedor.id_usuario}", json={"nombre_contacto": "Ana"})
    assert response.json()["nombre_contacto"] == "Ana"
    assert response.json()["razon_social"] == "Mates del Sur S.A."

    response = await client.post("/api/cuentas-empresa", json=datos)
    assert response.status_code == 409


# --- Позиции заказа (административная правка) ---

async def test_detalle_orden_correction(client: AsyncClient, usuario: Usuario, producto: Producto):
    orden = (await client.post(
        "/api/ordenes", json={"id_usuario": usuario.id_usuario, "total": "75.00", "detalles": []}
    )).json()

    response = await client.post(
        "/api/detalle-orden",
        json={"id_orden": orden["id_orden"], "id_producto": producto.id_producto, "cantidad": 1, "precio_unitario": "75"},
    )
    assert response.status_code == 201
    detalle = response.json()
    assert detalle["id_usuario"] == usuario.id_usuario

    response = await client.put(f"/api/detalle-orden/{detalle['id_detalle']}", json={"cantidad": 3})
    assert response.json()["cantidad"] == 3

    response = await client.post(
        "/api/detalle-orden",
        json={"id_orden": 999, "id_producto": producto.id_producto, "cantidad": 1, "precio_unitario": "75"},
    )
    assert response.status_code == 400
