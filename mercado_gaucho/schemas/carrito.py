# mercado_gaucho/schemas/carrito.py
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from mercado_gaucho.schemas.common import UsuarioInfo


class CarritoCreate(BaseModel):
    id_usuario: int = Field(ge=0)


class Carrito(UsuarioInfo):
    id_carrito: int
    id_usuario: int
    fecha_creacion: Optional[datetime] = None


# Схема для добавления товара в корзину (повторное добавление суммирует количество)
class CarritoDetalleCreate(BaseModel):
    id_carrito: int
    id_producto: int
    cantidad: int = Field(gt=0)


class CarritoDetalleUpdate(BaseModel):
    cantidad: int = Field(gt=0)


class CarritoDetalle(BaseModel):
    id_detalle: int
    id_carrito: int
    id_producto: int
    cantidad: int
    nombre_producto: Optional[str] = None
    precio_unitario_actual_producto: Optional[Decimal] = None
