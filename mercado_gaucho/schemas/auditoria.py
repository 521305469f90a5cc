# mercado_gaucho/schemas/auditoria.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, StrictBool, field_validator

from mercado_gaucho.core.security import is_valid_token_format
from mercado_gaucho.schemas.common import UsuarioInfo, as_utc


# --- Журнал входов (только запись) ---

class InicioSesionCreate(BaseModel):
    id_usuario: Optional[int] = None
    ip_origen: Optional[str] = Field(default=None, max_length=45)
    dispositivo: Optional[str] = Field(default=None, max_length=255)
    navegador: Optional[str] = Field(default=None, max_length=255)
    # Строго true/false, без приведения "1"/"yes"
    exito: StrictBool


class InicioSesion(UsuarioInfo):
    id_sesion: int
    id_usuario: Optional[int] = None
    fecha_inicio: Optional[datetime] = None
    ip_origen: Optional[str] = None
    dispositivo: Optional[str] = None
    navegador: Optional[str] = None
    exito: bool


# --- Журнал действий (только запись) ---

class LogActividadCreate(BaseModel):
    id_usuario: Optional[int] = None
    accion: str = Field(min_length=1, max_length=255)
    descripcion: Optional[str] = None


class LogActividad(UsuarioInfo):
    id_log: int
    id_usuario: Optional[int] = None
    accion: str
    fecha: Optional[datetime] = None
    descripcion: Optional[str] = None


# --- Токены ---

class _ExpiracionFutura(BaseModel):
    @field_validator('expiracion', check_fields=False)
    @classmethod
    def expiracion_en_el_futuro(cls, v: Optional[datetime]):
        v = as_utc(v)
        if v is not None and v <= datetime.now(v.tzinfo):
            raise ValueError("La fecha de expiracion debe ser una fecha válida y futura.")
        return v


class TokenCreate(_ExpiracionFutura):
    id_usuario: int
    # Если не передан - генерируется на сервере
    token: Optional[str] = None
    expiracion: datetime
    ip_origen: Optional[str] = Field(default=None, max_length=45)

    @field_validator('token')
    @classmethod
    def formato_token(cls, v: Optional[str]):
        if v is None:
            return v
        v = v.strip()
        if not is_valid_token_format(v):
            raise ValueError("El token debe ser un string de 64 caracteres.")
        return v


class TokenUpdate(_ExpiracionFutura):
    expiracion: Optional[datetime] = None
    ip_origen: Optional[str] = Field(default=None, max_length=45)


class Token(UsuarioInfo):
    id_token: int
    id_usuario: int
    token: str
    creado_en: Optional[datetime] = None
    expiracion: datetime
    ip_origen: Optional[str] = None


class TokenValidado(UsuarioInfo):
    """Ответ на проверку токена: без самого значения токена."""
    id_token: int
    id_usuario: int
    creado_en: Optional[datetime] = None
    expiracion: datetime
    ip_origen: Optional[str] = None
    rol: str
