# mercado_gaucho/schemas/marketing.py
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from mercado_gaucho.schemas.common import check_date_range


class _ConPeriodo(BaseModel):
    """Общая проверка периода действия: fecha_fin не раньше fecha_inicio."""
    fecha_inicio: Optional[date] = None
    fecha_fin: Optional[date] = None

    @model_validator(mode='after')
    def periodo_valido(self):
        check_date_range(self.fecha_inicio, self.fecha_fin)
        return self


# --- Акции ---

class PromocionCreate(_ConPeriodo):
    titulo: str = Field(min_length=1, max_length=255)
    descripcion: Optional[str] = None
    descuento_porcentaje: Optional[int] = Field(default=None, ge=0, le=100)
    condiciones: Optional[str] = None
    codigo_promocion: Optional[str] = Field(default=None, max_length=50)
    activo: bool = True


class PromocionUpdate(_ConPeriodo):
    titulo: Optional[str] = Field(default=None, min_length=1, max_length=255)
    descripcion: Optional[str] = None
    descuento_porcentaje: Optional[int] = Field(default=None, ge=0, le=100)
    condiciones: Optional[str] = None
    codigo_promocion: Optional[str] = Field(default=None, max_length=50)
    activo: Optional[bool] = None


class Promocion(BaseModel):
    id_promocion: int
    titulo: str
    descripcion: Optional[str] = None
    descuento_porcentaje: Optional[int] = None
    fecha_inicio: Optional[date] = None
    fecha_fin: Optional[date] = None
    condiciones: Optional[str] = None
    codigo_promocion: Optional[str] = None
    activo: bool

    class Config:
        from_attributes = True


# --- Товары в акциях ---

class ProductoPromocionadoKey(BaseModel):
    id_producto: int
    id_promocion: int


class ProductoPromocionado(ProductoPromocionadoKey):
    nombre_producto: Optional[str] = None
    precio_original_producto: Optional[Decimal] = None
    nombre_promocion: Optional[str] = None
    descripcion_promocion: Optional[str] = None
    descuento_porcentaje: Optional[int] = None
    promocion_fecha_inicio: Optional[date] = None
    promocion_fecha_fin: Optional[date] = None
    promocion_activa: Optional[bool] = None
    codigo_promocion: Optional[str] = None


# --- Выделенные товары ---

class DestacadoCreate(_ConPeriodo):
    id_producto: int
    tipo_destacado: Optional[str] = None


class DestacadoUpdate(_ConPeriodo):
    tipo_destacado: Optional[str] = None


class Destacado(BaseModel):
    id_destacado: int
    id_producto: int
    tipo_destacado: Optional[str] = None
    fecha_inicio: Optional[date] = None
    fecha_fin: Optional[date] = None
    nombre_producto: Optional[str] = None
    descripcion_producto: Optional[str] = None
    precio_producto: Optional[Decimal] = None


# --- Баннеры ---

class BannerCreate(_ConPeriodo):
    titulo: str = Field(min_length=1, max_length=255)
    descripcion: Optional[str] = None
    imagen_url: str = Field(min_length=1, max_length=500)
    enlace_url: Optional[str] = Field(default=None, max_length=500)
    prioridad: int = 0
    ubicacion: Optional[str] = None


class BannerUpdate(_ConPeriodo):
    titulo: Optional[str] = Field(default=None, min_length=1, max_length=255)
    descripcion: Optional[str] = None
    imagen_url: Optional[str] = Field(default=None, min_length=1, max_length=500)
    enlace_url: Optional[str] = Field(default=None, max_length=500)
    prioridad: Optional[int] = None
    ubicacion: Optional[str] = None


class Banner(BaseModel):
    id_banner: int
    titulo: str
    descripcion: Optional[str] = None
    imagen_url: str
    enlace_url: Optional[str] = None
    fecha_inicio: Optional[date] = None
    fecha_fin: Optional[date] = None
    prioridad: int
    ubicacion: Optional[str] = None

    class Config:
        from_attributes = True


# --- Официальные магазины ---

class TiendaCreate(BaseModel):
    id_usuario: int
    nombre_tienda: str = Field(min_length=1, max_length=150)
    logo_url: Optional[str] = Field(default=None, max_length=500)
    descripcion: Optional[str] = None
    estado: Optional[str] = None


class TiendaUpdate(BaseModel):
    nombre_tienda: Optional[str] = Field(default=None, min_length=1, max_length=150)
    logo_url: Optional[str] = Field(default=None, max_length=500)
    descripcion: Optional[str] = None
    estado: Optional[str] = None


class Tienda(BaseModel):
    id_tienda: int
    id_usuario: int
    nombre_tienda: str
    logo_url: Optional[str] = None
    descripcion: Optional[str] = None
    estado: str
    fecha_creacion: Optional[datetime] = None
    nombre_propietario: Optional[str] = None
    apellido_propietario: Optional[str] = None
    email_propietario: Optional[str] = None
