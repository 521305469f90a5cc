# mercado_gaucho/crud/auditoria.py
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from mercado_gaucho.crud.base import date_range_filter, fetch_all, fetch_one, usuario_columns, utcnow
from mercado_gaucho.models.auditoria import InicioSesion, LogActividad, TokenAutenticacion
from mercado_gaucho.models.usuario import Usuario

logger = logging.getLogger(__name__)

TOKEN_CAMPOS_ACTUALIZABLES = frozenset({"expiracion", "ip_origen"})


# --- Журнал входов ---

def _inicio_sesion_view():
    return (
        select(*InicioSesion.__table__.c, *usuario_columns())
        .outerjoin(Usuario, Usuario.id_usuario == InicioSesion.id_usuario)
    )


def get_inicio_sesion_view(db: Session, id_sesion: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _inicio_sesion_view().where(InicioSesion.id_sesion == id_sesion))


def get_inicios_sesion_view(
    db: Session,
    id_usuario: Optional[int] = None,
    exito: Optional[bool] = None,
    fecha_desde: Optional[date] = None,
    fecha_hasta: Optional[date] = None,
) -> List[Dict[str, Any]]:
    stmt = _inicio_sesion_view()
    if id_usuario is not None:
        stmt = stmt.where(InicioSesion.id_usuario == id_usuario)
    if exito is not None:
        stmt = stmt.where(InicioSesion.exito.is_(exito))
    stmt = date_range_filter(stmt, InicioSesion.fecha_inicio, fecha_desde, fecha_hasta)
    return fetch_all(db, stmt.order_by(InicioSesion.fecha_inicio.desc(), InicioSesion.id_sesion.desc()))


# --- Журнал действий ---

def _log_actividad_view():
    return (
        select(*LogActividad.__table__.c, *usuario_columns())
        .outerjoin(Usuario, Usuario.id_usuario == LogActividad.id_usuario)
    )


def get_log_actividad_view(db: Session, id_log: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _log_actividad_view().where(LogActividad.id_log == id_log))


def get_logs_actividad_view(
    db: Session,
    id_usuario: Optional[int] = None,
    accion: Optional[str] = None,
    fecha_desde: Optional[date] = None,
    fecha_hasta: Optional[date] = None,
) -> List[Dict[str, Any]]:
    stmt = _log_actividad_view()
    if id_usuario is not None:
        stmt = stmt.where(LogActividad.id_usuario == id_usuario)
    if accion:
        stmt = stmt.where(LogActividad.accion.ilike(f"%{accion}%"))
    stmt = date_range_filter(stmt, LogActividad.fecha, fecha_desde, fecha_hasta)
    return fetch_all(db, stmt.order_by(LogActividad.fecha.desc(), LogActividad.id_log.desc()))


# --- Токены аутентификации ---

def get_token(db: Session, id_token: int) -> Optional[TokenAutenticacion]:
    return db.query(TokenAutenticacion).filter(TokenAutenticacion.id_token == id_token).first()


def _token_view():
    return (
        select(*TokenAutenticacion.__table__.c, *usuario_columns())
        .outerjoin(Usuario, Usuario.id_usuario == TokenAutenticacion.id_usuario)
    )


def get_token_view(db: Session, id_token: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _token_view().where(TokenAutenticacion.id_token == id_token))


def get_tokens_view(
    db: Session, id_usuario: Optional[int] = None, expirado: Optional[bool] = None
) -> List[Dict[str, Any]]:
    stmt = _token_view()
    if id_usuario is not None:
        stmt = stmt.where(TokenAutenticacion.id_usuario == id_usuario)
    if expirado is not None:
        now = utcnow()
        stmt = stmt.where(TokenAutenticacion.expiracion <= now if expirado else TokenAutenticacion.expiracion > now)
    return fetch_all(db, stmt.order_by(TokenAutenticacion.expiracion.desc()))


def get_token_valido(db: Session, token: str) -> Optional[Dict[str, Any]]:
    """Действующий (не истёкший) токен вместе с пользователем и его ролью."""
    stmt = (
        select(
            TokenAutenticacion.id_token,
            TokenAutenticacion.id_usuario,
            TokenAutenticacion.creado_en,
            TokenAutenticacion.expiracion,
            TokenAutenticacion.ip_origen,
            *usuario_columns(),
            Usuario.tipo_usuario.label("rol"),
        )
        .join(Usuario, Usuario.id_usuario == TokenAutenticacion.id_usuario)
        .where(TokenAutenticacion.token == token, TokenAutenticacion.expiracion > utcnow())
    )
    return fetch_one(db, stmt)
