# mercado_gaucho/schemas/orden.py
from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from mercado_gaucho.schemas.common import UsuarioInfo, as_utc


# --- Позиции заказа ---

class DetalleOrdenItem(BaseModel):
    """Позиция в теле создания заказа: цена фиксируется на момент заказа."""
    id_producto: int
    cantidad: int = Field(gt=0)
    precio_unitario: Decimal = Field(ge=0, max_digits=12, decimal_places=2)


class DetalleOrdenCreate(DetalleOrdenItem):
    id_orden: int


class DetalleOrdenUpdate(BaseModel):
    cantidad: Optional[int] = Field(default=None, gt=0)
    precio_unitario: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)


class DetalleOrden(BaseModel):
    id_detalle: int
    id_orden: int
    id_producto: int
    cantidad: int
    precio_unitario: Decimal
    nombre_producto: Optional[str] = None
    descripcion_producto: Optional[str] = None
    id_usuario: Optional[int] = None


# --- Платежи ---

class PagoCreate(BaseModel):
    id_orden: int
    metodo_pago: str = Field(min_length=1, max_length=50)
    monto_pagado: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    fecha_pago: Optional[datetime] = None
    estado_pago: Optional[str] = None
    id_transaccion_externa: Optional[str] = None

    @field_validator('fecha_pago')
    @classmethod
    def normalizar_fechas(cls, v):
        return as_utc(v)


class PagoUpdate(BaseModel):
    metodo_pago: Optional[str] = Field(default=None, min_length=1, max_length=50)
    monto_pagado: Optional[Decimal] = Field(default=None, gt=0, max_digits=12, decimal_places=2)
    fecha_pago: Optional[datetime] = None
    estado_pago: Optional[str] = None
    id_transaccion_externa: Optional[str] = None

    @field_validator('fecha_pago')
    @classmethod
    def normalizar_fechas(cls, v):
        return as_utc(v)


class Pago(UsuarioInfo):
    id_pago: int
    id_orden: int
    metodo_pago: str
    monto_pagado: Decimal
    fecha_pago: Optional[datetime] = None
    estado_pago: str
    id_transaccion_externa: Optional[str] = None
    id_usuario: Optional[int] = None


# --- Отправки ---

class EnvioCreate(BaseModel):
    id_orden: int
    direccion_entrega: str = Field(min_length=1)
    metodo_envio: str = Field(min_length=1, max_length=100)
    estado_envio: Optional[str] = None
    fecha_envio: Optional[datetime] = None
    fecha_entrega: Optional[datetime] = None
    costo_envio: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    numero_seguimiento: Optional[str] = None

    @field_validator('fecha_envio', 'fecha_entrega')
    @classmethod
    def normalizar_fechas(cls, v):
        return as_utc(v)


class EnvioUpdate(BaseModel):
    direccion_entrega: Optional[str] = Field(default=None, min_length=1)
    metodo_envio: Optional[str] = Field(default=None, min_length=1, max_length=100)
    estado_envio: Optional[str] = None
    fecha_envio: Optional[datetime] = None
    fecha_entrega: Optional[datetime] = None
    costo_envio: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    numero_seguimiento: Optional[str] = None

    @field_validator('fecha_envio', 'fecha_entrega')
    @classmethod
    def normalizar_fechas(cls, v):
        return as_utc(v)


class Envio(BaseModel):
    id_envio: int
    id_orden: int
    direccion_entrega: str
    metodo_envio: str
    estado_envio: str
    fecha_envio: Optional[datetime] = None
    fecha_entrega: Optional[datetime] = None
    costo_envio: Decimal
    numero_seguimiento: Optional[str] = None
    id_usuario: Optional[int] = None
    fecha_orden: Optional[datetime] = None


# --- Заказы ---

class OrdenCreate(BaseModel):
    id_usuario: int = Field(ge=0)
    total: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    estado: Optional[str] = None
    # Позиции проверяются по одной внутри транзакции, см. services.orden
    detalles: List[Any] = []


class OrdenUpdate(BaseModel):
    estado: Optional[str] = None
    total: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)


class Orden(UsuarioInfo):
    id_orden: int
    id_usuario: int
    fecha_orden: Optional[datetime] = None
    total: Decimal
    estado: str


class OrdenConDetalles(Orden):
    detalles: List[DetalleOrden] = []


class OrdenCompleta(OrdenConDetalles):
    envio: Optional[Envio] = None
    pagos: List[Pago] = []
