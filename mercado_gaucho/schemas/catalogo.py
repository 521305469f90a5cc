# mercado_gaucho/schemas/catalogo.py
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


# --- Категории ---

class CategoriaCreate(BaseModel):
    nombre_categoria: str = Field(min_length=1, max_length=100)
    descripcion: Optional[str] = None


class CategoriaUpdate(BaseModel):
    nombre_categoria: Optional[str] = Field(default=None, min_length=1, max_length=100)
    descripcion: Optional[str] = None


class Categoria(BaseModel):
    id_categoria: int
    nombre_categoria: str
    descripcion: Optional[str] = None

    class Config:
        from_attributes = True


# --- Товары ---

class ProductoCreate(BaseModel):
    id_usuario: int
    id_categoria: int
    titulo: str = Field(min_length=1, max_length=255)
    descripcion: Optional[str] = None
    precio: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    stock: int = Field(ge=0)
    estado: str


class ProductoUpdate(BaseModel):
    id_categoria: Optional[int] = None
    titulo: Optional[str] = Field(default=None, min_length=1, max_length=255)
    descripcion: Optional[str] = None
    precio: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    stock: Optional[int] = Field(default=None, ge=0)
    estado: Optional[str] = None


class Producto(BaseModel):
    id_producto: int
    id_usuario: int
    id_categoria: int
    titulo: str
    descripcion: Optional[str] = None
    precio: Decimal
    stock: int
    estado: str
    fecha_publicacion: Optional[datetime] = None
    # Обогащение: продавец и категория
    vendedor_nombre: Optional[str] = None
    vendedor_apellido: Optional[str] = None
    vendedor_email: Optional[str] = None
    nombre_categoria: Optional[str] = None


# --- Изображения ---

class ImagenCreate(BaseModel):
    id_producto: int
    url_imagen: str = Field(min_length=1, max_length=500)
    orden: Optional[int] = None


class ImagenUpdate(BaseModel):
    url_imagen: Optional[str] = Field(default=None, min_length=1, max_length=500)
    orden: Optional[int] = None


class Imagen(BaseModel):
    id_imagen: int
    id_producto: int
    url_imagen: str
    orden: Optional[int] = None
    nombre_producto: Optional[str] = None
