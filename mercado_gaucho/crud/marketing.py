# mercado_gaucho/crud/marketing.py
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from mercado_gaucho.crud.base import dialect_insert, fetch_all, fetch_one
from mercado_gaucho.models.catalogo import Producto
from mercado_gaucho.models.marketing import (
    Promocion, ProductoPromocionado, ProductoDestacado, Banner, TiendaOficial
)
from mercado_gaucho.models.usuario import Usuario

logger = logging.getLogger(__name__)

PROMOCION_CAMPOS_ACTUALIZABLES = frozenset(
    {"titulo", "descripcion", "descuento_porcentaje", "fecha_inicio", "fecha_fin", "condiciones", "codigo_promocion", "activo"}
)
DESTACADO_CAMPOS_ACTUALIZABLES = frozenset({"tipo_destacado", "fecha_inicio", "fecha_fin"})
BANNER_CAMPOS_ACTUALIZABLES = frozenset(
    {"titulo", "descripcion", "imagen_url", "enlace_url", "fecha_inicio", "fecha_fin", "prioridad", "ubicacion"}
)
TIENDA_CAMPOS_ACTUALIZABLES = frozenset({"nombre_tienda", "logo_url", "descripcion", "estado"})


def _vigente_en(fecha_inicio, fecha_fin, hoy: date):
    """Условие 'действует сегодня': NULL в границах означает открытый интервал."""
    return (
        or_(fecha_inicio <= hoy, fecha_inicio.is_(None)),
        or_(fecha_fin >= hoy, fecha_fin.is_(None)),
    )


# --- Акции ---

def get_promocion(db: Session, id_promocion: int) -> Optional[Promocion]:
    return db.query(Promocion).filter(Promocion.id_promocion == id_promocion).first()


def get_promocion_by_codigo(db: Session, codigo: str) -> Optional[Promocion]:
    """Активная акция по точному коду, без учёта регистра."""
    return (
        db.query(Promocion)
        .filter(func.lower(Promocion.codigo_promocion) == codigo.lower(), Promocion.activo.is_(True))
        .first()
    )


def get_promociones(
    db: Session,
    activo: Optional[bool] = None,
    codigo_promocion: Optional[str] = None,
    vigentes_ahora: bool = False,
) -> List[Promocion]:
    query = db.query(Promocion)
    if activo is not None:
        query = query.filter(Promocion.activo.is_(activo))
    if codigo_promocion:
        query = query.filter(func.lower(Promocion.codigo_promocion) == codigo_promocion.lower())
    if vigentes_ahora:
        query = query.filter(
            *_vigente_en(Promocion.fecha_inicio, Promocion.fecha_fin, date.today()),
            Promocion.activo.is_(True),
        )
    return query.order_by(Promocion.fecha_inicio.desc(), Promocion.titulo.asc()).all()


# --- Товары в акциях ---

def _producto_promocionado_view():
    return (
        select(
            ProductoPromocionado.id_producto,
            ProductoPromocionado.id_promocion,
            Producto.titulo.label("nombre_producto"),
            Producto.precio.label("precio_original_producto"),
            Promocion.titulo.label("nombre_promocion"),
            Promocion.descripcion.label("descripcion_promocion"),
            Promocion.descuento_porcentaje,
            Promocion.fecha_inicio.label("promocion_fecha_inicio"),
            Promocion.fecha_fin.label("promocion_fecha_fin"),
            Promocion.activo.label("promocion_activa"),
            Promocion.codigo_promocion,
        )
        .join(Producto, Producto.id_producto == ProductoPromocionado.id_producto)
        .join(Promocion, Promocion.id_promocion == ProductoPromocionado.id_promocion)
    )


def get_producto_promocionado_view(db: Session, id_producto: int, id_promocion: int) -> Optional[Dict[str, Any]]:
    return fetch_one(
        db,
        _producto_promocionado_view().where(
            ProductoPromocionado.id_producto == id_producto,
            ProductoPromocionado.id_promocion == id_promocion,
        ),
    )


def get_productos_promocionados_view(
    db: Session, id_producto: Optional[int] = None, id_promocion: Optional[int] = None
) -> List[Dict[str, Any]]:
    stmt = _producto_promocionado_view()
    if id_producto is not None:
        stmt = stmt.where(ProductoPromocionado.id_producto == id_producto)
    if id_promocion is not None:
        stmt = stmt.where(ProductoPromocionado.id_promocion == id_promocion)
    return fetch_all(db, stmt.order_by(ProductoPromocionado.id_producto, ProductoPromocionado.id_promocion))


# --- Выделенные товары ---

def get_destacado(db: Session, id_destacado: int) -> Optional[ProductoDestacado]:
    return db.query(ProductoDestacado).filter(ProductoDestacado.id_destacado == id_destacado).first()


def _destacado_view():
    return (
        select(
            *ProductoDestacado.__table__.c,
            Producto.titulo.label("nombre_producto"),
            Producto.descripcion.label("descripcion_producto"),
            Producto.precio.label("precio_producto"),
        )
        .join(Producto, Producto.id_producto == ProductoDestacado.id_producto)
    )


def get_destacado_view(db: Session, id_destacado: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _destacado_view().where(ProductoDestacado.id_destacado == id_destacado))


def get_destacado_view_by_producto(db: Session, id_producto: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _destacado_view().where(ProductoDestacado.id_producto == id_producto))


def get_destacados_view(
    db: Session, tipo_destacado: Optional[str] = None, activos_ahora: bool = False
) -> List[Dict[str, Any]]:
    stmt = _destacado_view()
    if tipo_destacado:
        stmt = stmt.where(ProductoDestacado.tipo_destacado == tipo_destacado)
    if activos_ahora:
        stmt = stmt.where(*_vigente_en(ProductoDestacado.fecha_inicio, ProductoDestacado.fecha_fin, date.today()))
    return fetch_all(db, stmt.order_by(ProductoDestacado.fecha_inicio.desc(), Producto.titulo.asc()))


def upsert_destacado(db: Session, values: Dict[str, Any]) -> int:
    """
    Выделяет товар: один INSERT ... ON CONFLICT (id_producto) DO UPDATE.
    Повторное выделение того же товара перезаписывает тип и период.
    """
    insert = dialect_insert(db)
    stmt = insert(ProductoDestacado).values(**values)
    stmt = stmt.on_conflict_do_update(
        index_elements=["id_producto"],
        set_={
            "tipo_destacado": stmt.excluded.tipo_destacado,
            "fecha_inicio": stmt.excluded.fecha_inicio,
            "fecha_fin": stmt.excluded.fecha_fin,
        },
    ).returning(ProductoDestacado.id_destacado)

    id_destacado = db.execute(stmt).scalar_one()
    db.commit()
    logger.info(f"Product {values['id_producto']} featured (id_destacado={id_destacado}).")
    return id_destacado


# --- Баннеры ---

def get_banner(db: Session, id_banner: int) -> Optional[Banner]:
    return db.query(Banner).filter(Banner.id_banner == id_banner).first()


def get_banners(db: Session, ubicacion: Optional[str] = None, activos_ahora: bool = False) -> List[Banner]:
    query = db.query(Banner)
    if ubicacion:
        query = query.filter(Banner.ubicacion == ubicacion)
    if activos_ahora:
        query = query.filter(*_vigente_en(Banner.fecha_inicio, Banner.fecha_fin, date.today()))
    return query.order_by(Banner.prioridad.desc(), Banner.fecha_inicio.desc(), Banner.id_banner).all()


# --- Официальные магазины ---

def get_tienda(db: Session, id_tienda: int) -> Optional[TiendaOficial]:
    return db.query(TiendaOficial).filter(TiendaOficial.id_tienda == id_tienda).first()


def _tienda_view():
    return (
        select(
            *TiendaOficial.__table__.c,
            Usuario.nombre.label("nombre_propietario"),
            Usuario.apellido.label("apellido_propietario"),
            Usuario.email.label("email_propietario"),
        )
        .join(Usuario, Usuario.id_usuario == TiendaOficial.id_usuario)
    )


def get_tienda_view(db: Session, id_tienda: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _tienda_view().where(TiendaOficial.id_tienda == id_tienda))


def get_tienda_view_by_usuario(db: Session, id_usuario: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _tienda_view().where(TiendaOficial.id_usuario == id_usuario))


def get_tiendas_view(
    db: Session, estado: Optional[str] = None, nombre_tienda: Optional[str] = None
) -> List[Dict[str, Any]]:
    stmt = _tienda_view()
    if estado:
        stmt = stmt.where(TiendaOficial.estado == estado)
    if nombre_tienda:
        stmt = stmt.where(TiendaOficial.nombre_tienda.ilike(f"%{nombre_tienda}%"))
    return fetch_all(db, stmt.order_by(TiendaOficial.nombre_tienda.asc()))
