# mercado_gaucho/crud/usuario.py
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from mercado_gaucho.crud.base import fetch_all, fetch_one, usuario_columns
from mercado_gaucho.models.usuario import (
    Usuario, CuentaPersonal, CuentaEmpresa, Direccion, UbicacionUsuario
)

# Белые списки полей для частичного обновления
USUARIO_CAMPOS_ACTUALIZABLES = frozenset({"nombre", "apellido", "telefono", "tipo_usuario", "tipo_cuenta"})
CUENTA_PERSONAL_CAMPOS_ACTUALIZABLES = frozenset({"dni", "fecha_nacimiento", "genero"})
CUENTA_EMPRESA_CAMPOS_ACTUALIZABLES = frozenset(
    {"ruc", "razon_social", "nombre_contacto", "telefono_contacto", "direccion_fiscal"}
)
DIRECCION_CAMPOS_ACTUALIZABLES = frozenset({"direccion", "ciudad", "departamento", "codigo_postal", "pais"})
UBICACION_CAMPOS_ACTUALIZABLES = frozenset(
    {"ciudad", "departamento", "pais", "latitud", "longitud", "fecha_seleccion"}
)


# --- Пользователи ---

def get_usuario(db: Session, id_usuario: int) -> Optional[Usuario]:
    return db.query(Usuario).filter(Usuario.id_usuario == id_usuario).first()


def get_usuarios(db: Session) -> List[Usuario]:
    return db.query(Usuario).order_by(Usuario.id_usuario).all()


# --- Персональные и корпоративные профили ---

def get_cuenta_personal(db: Session, id_usuario: int) -> Optional[CuentaPersonal]:
    return db.query(CuentaPersonal).filter(CuentaPersonal.id_usuario == id_usuario).first()


def _cuenta_personal_view():
    return (
        select(*CuentaPersonal.__table__.c, *usuario_columns())
        .join(Usuario, Usuario.id_usuario == CuentaPersonal.id_usuario)
    )


def get_cuenta_personal_view(db: Session, id_usuario: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _cuenta_personal_view().where(CuentaPersonal.id_usuario == id_usuario))


def get_cuentas_personales_view(db: Session) -> List[Dict[str, Any]]:
    return fetch_all(db, _cuenta_personal_view().order_by(Usuario.nombre, Usuario.apellido))


def get_cuenta_empresa(db: Session, id_usuario: int) -> Optional[CuentaEmpresa]:
    return db.query(CuentaEmpresa).filter(CuentaEmpresa.id_usuario == id_usuario).first()


def _cuenta_empresa_view():
    return (
        select(*CuentaEmpresa.__table__.c, *usuario_columns())
        .join(Usuario, Usuario.id_usuario == CuentaEmpresa.id_usuario)
    )


def get_cuenta_empresa_view(db: Session, id_usuario: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _cuenta_empresa_view().where(CuentaEmpresa.id_usuario == id_usuario))


def get_cuentas_empresa_view(db: Session) -> List[Dict[str, Any]]:
    return fetch_all(db, _cuenta_empresa_view().order_by(CuentaEmpresa.razon_social))


# --- Адреса ---

def get_direccion(db: Session, id_direccion: int) -> Optional[Direccion]:
    return db.query(Direccion).filter(Direccion.id_direccion == id_direccion).first()


def _direccion_view():
    return (
        select(*Direccion.__table__.c, *usuario_columns())
        .join(Usuario, Usuario.id_usuario == Direccion.id_usuario)
    )


def get_direccion_view(db: Session, id_direccion: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _direccion_view().where(Direccion.id_direccion == id_direccion))


def get_direcciones_view(db: Session, id_usuario: Optional[int] = None) -> List[Dict[str, Any]]:
    stmt = _direccion_view()
    if id_usuario is not None:
        stmt = stmt.where(Direccion.id_usuario == id_usuario)
    return fetch_all(db, stmt.order_by(Direccion.id_usuario, Direccion.id_direccion))


# --- Выбранное местоположение ---

def get_ubicacion(db: Session, id_ubicacion: int) -> Optional[UbicacionUsuario]:
    return db.query(UbicacionUsuario).filter(UbicacionUsuario.id_ubicacion == id_ubicacion).first()


def _ubicacion_view():
    return (
        select(*UbicacionUsuario.__table__.c, *usuario_columns())
        .join(Usuario, Usuario.id_usuario == UbicacionUsuario.id_usuario)
    )


def get_ubicacion_view(db: Session, id_ubicacion: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _ubicacion_view().where(UbicacionUsuario.id_ubicacion == id_ubicacion))


def get_ubicaciones_view(db: Session, id_usuario: Optional[int] = None) -> List[Dict[str, Any]]:
    stmt = _ubicacion_view()
    if id_usuario is not None:
        stmt = stmt.where(UbicacionUsuario.id_usuario == id_usuario)
    return fetch_all(db, stmt.order_by(UbicacionUsuario.fecha_seleccion.desc(), UbicacionUsuario.id_ubicacion.desc()))
