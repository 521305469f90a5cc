# mercado_gaucho/models/orden.py
from sqlalchemy import Column, Integer, String, Text, DateTime, Numeric, ForeignKey, CheckConstraint, func

from mercado_gaucho.db.session import Base
from mercado_gaucho.models.enums import ESTADO_ORDEN, ESTADO_PAGO, ESTADO_ENVIO, db_enum


class Orden(Base):
    __tablename__ = "ordenes"

    id_orden = Column(Integer, primary_key=True, index=True)
    id_usuario = Column(Integer, ForeignKey("usuarios.id_usuario"), nullable=False, index=True)
    fecha_orden = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    total = Column(Numeric(12, 2), nullable=False)
    estado = Column(db_enum(ESTADO_ORDEN, "estado_orden_enum"), nullable=False, default="pendiente")

    __table_args__ = (CheckConstraint("total >= 0", name="ck_ordenes_total"),)


class DetalleOrden(Base):
    __tablename__ = "detalle_orden"

    id_detalle = Column(Integer, primary_key=True, index=True)
    id_orden = Column(Integer, ForeignKey("ordenes.id_orden", ondelete="CASCADE"), nullable=False, index=True)
    id_producto = Column(Integer, ForeignKey("productos.id_producto"), nullable=False)
    cantidad = Column(Integer, nullable=False)
    # Снимок цены на момент заказа, не следует за ценой товара
    precio_unitario = Column(Numeric(12, 2), nullable=False)

    __table_args__ = (
        CheckConstraint("cantidad > 0", name="ck_detalle_orden_cantidad"),
        CheckConstraint("precio_unitario >= 0", name="ck_detalle_orden_precio"),
    )


class Pago(Base):
    __tablename__ = "pagos"

    id_pago = Column(Integer, primary_key=True, index=True)
    id_orden = Column(Integer, ForeignKey("ordenes.id_orden", ondelete="CASCADE"), nullable=False, index=True)
    metodo_pago = Column(String(50), nullable=False)
    monto_pagado = Column(Numeric(12, 2), nullable=False)
    fecha_pago = Column(DateTime(timezone=True), server_default=func.now())
    estado_pago = Column(db_enum(ESTADO_PAGO, "estado_pago_enum"), nullable=False, default="pendiente")
    id_transaccion_externa = Column(String(255), nullable=True)


class Envio(Base):
    __tablename__ = "envios"

    id_envio = Column(Integer, primary_key=True, index=True)
    # Одна отправка на заказ
    id_orden = Column(Integer, ForeignKey("ordenes.id_orden", ondelete="CASCADE"), unique=True, nullable=False)
    direccion_entrega = Column(Text, nullable=False)
    metodo_envio = Column(String(100), nullable=False)
    estado_envio = Column(db_enum(ESTADO_ENVIO, "estado_envio_enum"), nullable=False, default="preparando")
    fecha_envio = Column(DateTime(timezone=True), nullable=True)
    fecha_entrega = Column(DateTime(timezone=True), nullable=True)
    costo_envio = Column(Numeric(12, 2), nullable=False, default=0)
    numero_seguimiento = Column(String(100), nullable=True)
