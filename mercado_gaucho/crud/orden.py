# mercado_gaucho/crud/orden.py
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from mercado_gaucho.crud.base import date_range_filter, fetch_all, fetch_one, usuario_columns
from mercado_gaucho.models.catalogo import Producto
from mercado_gaucho.models.orden import Orden, DetalleOrden, Pago, Envio
from mercado_gaucho.models.usuario import Usuario

ORDEN_CAMPOS_ACTUALIZABLES = frozenset({"estado", "total"})
DETALLE_ORDEN_CAMPOS_ACTUALIZABLES = frozenset({"cantidad", "precio_unitario"})
PAGO_CAMPOS_ACTUALIZABLES = frozenset(
    {"metodo_pago", "monto_pagado", "fecha_pago", "estado_pago", "id_transaccion_externa"}
)
ENVIO_CAMPOS_ACTUALIZABLES = frozenset(
    {"direccion_entrega", "metodo_envio", "estado_envio", "fecha_envio", "fecha_entrega", "costo_envio", "numero_seguimiento"}
)


# --- Заказы ---

def get_orden(db: Session, id_orden: int) -> Optional[Orden]:
    return db.query(Orden).filter(Orden.id_orden == id_orden).first()


def _orden_view():
    return (
        select(*Orden.__table__.c, *usuario_columns())
        .join(Usuario, Usuario.id_usuario == Orden.id_usuario)
    )


def get_orden_view(db: Session, id_orden: int, completa: bool = False) -> Optional[Dict[str, Any]]:
    """
    Заказ с данными покупателя.
    completa=True добавляет позиции (detalles), отправку (envio) и платежи (pagos).
    """
    orden = fetch_one(db, _orden_view().where(Orden.id_orden == id_orden))
    if orden is None:
        return None
    orden["detalles"] = get_detalles_orden_view(db, id_orden=id_orden)
    if completa:
        orden["envio"] = get_envio_view_by_orden(db, id_orden)
        orden["pagos"] = get_pagos_view(db, id_orden=id_orden)
    return orden


def get_ordenes_view(
    db: Session,
    id_usuario: Optional[int] = None,
    estado: Optional[str] = None,
    fecha_desde: Optional[date] = None,
    fecha_hasta: Optional[date] = None,
) -> List[Dict[str, Any]]:
    stmt = _orden_view()
    if id_usuario is not None:
        stmt = stmt.where(Orden.id_usuario == id_usuario)
    if estado:
        stmt = stmt.where(Orden.estado == estado)
    stmt = date_range_filter(stmt, Orden.fecha_orden, fecha_desde, fecha_hasta)
    return fetch_all(db, stmt.order_by(Orden.fecha_orden.desc(), Orden.id_orden.desc()))


# --- Позиции заказа ---

def get_detalle_orden(db: Session, id_detalle: int) -> Optional[DetalleOrden]:
    return db.query(DetalleOrden).filter(DetalleOrden.id_detalle == id_detalle).first()


def _detalle_orden_view():
    return (
        select(
            *DetalleOrden.__table__.c,
            Producto.titulo.label("nombre_producto"),
            Producto.descripcion.label("descripcion_producto"),
            Orden.id_usuario,
        )
        .join(Producto, Producto.id_producto == DetalleOrden.id_producto)
        .join(Orden, Orden.id_orden == DetalleOrden.id_orden)
    )


def get_detalle_orden_view(db: Session, id_detalle: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _detalle_orden_view().where(DetalleOrden.id_detalle == id_detalle))


def get_detalles_orden_view(db: Session, id_orden: Optional[int] = None) -> List[Dict[str, Any]]:
    stmt = _detalle_orden_view()
    if id_orden is not None:
        stmt = stmt.where(DetalleOrden.id_orden == id_orden)
    return fetch_all(db, stmt.order_by(DetalleOrden.id_orden, DetalleOrden.id_detalle))


# --- Платежи ---

def get_pago(db: Session, id_pago: int) -> Optional[Pago]:
    return db.query(Pago).filter(Pago.id_pago == id_pago).first()


def _pago_view():
    return (
        select(*Pago.__table__.c, Orden.id_usuario, *usuario_columns())
        .join(Orden, Orden.id_orden == Pago.id_orden)
        .join(Usuario, Usuario.id_usuario == Orden.id_usuario)
    )


def get_pago_view(db: Session, id_pago: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _pago_view().where(Pago.id_pago == id_pago))


def get_pagos_view(
    db: Session,
    id_orden: Optional[int] = None,
    estado_pago: Optional[str] = None,
    fecha_desde: Optional[date] = None,
    fecha_hasta: Optional[date] = None,
) -> List[Dict[str, Any]]:
    stmt = _pago_view()
    if id_orden is not None:
        stmt = stmt.where(Pago.id_orden == id_orden)
    if estado_pago:
        stmt = stmt.where(Pago.estado_pago == estado_pago)
    stmt = date_range_filter(stmt, Pago.fecha_pago, fecha_desde, fecha_hasta)
    return fetch_all(db, stmt.order_by(Pago.fecha_pago.desc(), Pago.id_pago.desc()))


# --- Отправки ---

def get_envio(db: Session, id_envio: int) -> Optional[Envio]:
    return db.query(Envio).filter(Envio.id_envio == id_envio).first()


def _envio_view():
    return (
        select(*Envio.__table__.c, Orden.id_usuario, Orden.fecha_orden)
        .join(Orden, Orden.id_orden == Envio.id_orden)
    )


def get_envio_view(db: Session, id_envio: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _envio_view().where(Envio.id_envio == id_envio))


def get_envio_view_by_orden(db: Session, id_orden: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _envio_view().where(Envio.id_orden == id_orden))


def get_envios_view(db: Session, estado_envio: Optional[str] = None) -> List[Dict[str, Any]]:
    stmt = _envio_view()
    if estado_envio:
        stmt = stmt.where(Envio.estado_envio == estado_envio)
    return fetch_all(db, stmt.order_by(Envio.id_envio.desc()))
