# mercado_gaucho/schemas/usuario.py
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, model_validator

from mercado_gaucho.schemas.common import UsuarioInfo


# --- Пользователи ---

class UsuarioCreate(BaseModel):
    nombre: str = Field(min_length=1, max_length=100)
    apellido: str = Field(min_length=1, max_length=100)
    email: EmailStr
    telefono: Optional[str] = None
    # Открытый пароль живёт только в запросе, в БД уходит bcrypt-хеш
    contrasena: str = Field(min_length=1, max_length=128)
    tipo_usuario: Optional[str] = None
    tipo_cuenta: Optional[str] = None


class UsuarioUpdate(BaseModel):
    nombre: Optional[str] = Field(default=None, min_length=1, max_length=100)
    apellido: Optional[str] = Field(default=None, min_length=1, max_length=100)
    telefono: Optional[str] = None
    tipo_usuario: Optional[str] = None
    tipo_cuenta: Optional[str] = None


class Usuario(BaseModel):
    id_usuario: int
    nombre: str
    apellido: str
    email: str
    telefono: Optional[str] = None
    tipo_usuario: str
    tipo_cuenta: str
    fecha_creacion: Optional[datetime] = None

    class Config:
        from_attributes = True


# --- Персональный профиль ---

class CuentaPersonalCreate(BaseModel):
    id_usuario: int
    dni: Optional[str] = None
    fecha_nacimiento: Optional[date] = None
    genero: Optional[str] = None


class CuentaPersonalUpdate(BaseModel):
    dni: Optional[str] = None
    fecha_nacimiento: Optional[date] = None
    genero: Optional[str] = None


class CuentaPersonal(UsuarioInfo):
    id_usuario: int
    dni: Optional[str] = None
    fecha_nacimiento: Optional[date] = None
    genero: Optional[str] = None


# --- Корпоративный профиль ---

class CuentaEmpresaCreate(BaseModel):
    id_usuario: int
    ruc: str = Field(min_length=1, max_length=20)
    razon_social: str = Field(min_length=1, max_length=255)
    nombre_contacto: Optional[str] = None
    telefono_contacto: Optional[str] = None
    direccion_fiscal: Optional[str] = None


class CuentaEmpresaUpdate(BaseModel):
    ruc: Optional[str] = Field(default=None, min_length=1, max_length=20)
    razon_social: Optional[str] = Field(default=None, min_length=1, max_length=255)
    nombre_contacto: Optional[str] = None
    telefono_contacto: Optional[str] = None
    direccion_fiscal: Optional[str] = None


class CuentaEmpresa(UsuarioInfo):
    id_usuario: int
    ruc: str
    razon_social: str
    nombre_contacto: Optional[str] = None
    telefono_contacto: Optional[str] = None
    direccion_fiscal: Optional[str] = None


# --- Адреса ---

class DireccionCreate(BaseModel):
    id_usuario: int
    direccion: str = Field(min_length=1)
    ciudad: str = Field(min_length=1)
    departamento: Optional[str] = None
    codigo_postal: Optional[str] = None
    pais: str = Field(min_length=1)


class DireccionUpdate(BaseModel):
    direccion: Optional[str] = Field(default=None, min_length=1)
    ciudad: Optional[str] = Field(default=None, min_length=1)
    departamento: Optional[str] = None
    codigo_postal: Optional[str] = None
    pais: Optional[str] = Field(default=None, min_length=1)


class Direccion(UsuarioInfo):
    id_direccion: int
    id_usuario: int
    direccion: str
    ciudad: str
    departamento: Optional[str] = None
    codigo_postal: Optional[str] = None
    pais: str


# --- Местоположение ---

class UbicacionCreate(BaseModel):
    id_usuario: int
    ciudad: Optional[str] = None
    departamento: Optional[str] = None
    pais: Optional[str] = None
    latitud: Optional[Decimal] = Field(default=None, ge=-90, le=90)
    longitud: Optional[Decimal] = Field(default=None, ge=-180, le=180)
    fecha_seleccion: Optional[datetime] = None

    @model_validator(mode='after')
    def ciudad_o_coordenadas(self):
        # Нужен либо город, либо обе координаты
        if not self.ciudad and (self.latitud is None or self.longitud is None):
            raise ValueError("Se requiere al menos ciudad, o latitud y longitud.")
        return self


class UbicacionUpdate(BaseModel):
    ciudad: Optional[str] = None
    departamento: Optional[str] = None
    pais: Optional[str] = None
    latitud: Optional[Decimal] = Field(default=None, ge=-90, le=90)
    longitud: Optional[Decimal] = Field(default=None, ge=-180, le=180)
    fecha_seleccion: Optional[datetime] = None


class Ubicacion(UsuarioInfo):
    id_ubicacion: int
    id_usuario: int
    ciudad: Optional[str] = None
    departamento: Optional[str] = None
    pais: Optional[str] = None
    latitud: Optional[Decimal] = None
    longitud: Optional[Decimal] = None
    fecha_seleccion: Optional[datetime] = None
