# mercado_gaucho/crud/carrito.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from mercado_gaucho.crud.base import dialect_insert, fetch_all, fetch_one, usuario_columns
from mercado_gaucho.models.carrito import Carrito, CarritoDetalle
from mercado_gaucho.models.catalogo import Producto
from mercado_gaucho.models.usuario import Usuario

logger = logging.getLogger(__name__)

CARRITO_DETALLE_CAMPOS_ACTUALIZABLES = frozenset({"cantidad"})

# --- CRUD для Корзины ---

def get_carrito(db: Session, id_carrito: int) -> Optional[Carrito]:
    return db.query(Carrito).filter(Carrito.id_carrito == id_carrito).first()


def get_carrito_by_usuario(db: Session, id_usuario: int) -> Optional[Carrito]:
    return db.query(Carrito).filter(Carrito.id_usuario == id_usuario).first()


def _carrito_view():
    return (
        select(*Carrito.__table__.c, *usuario_columns())
        .join(Usuario, Usuario.id_usuario == Carrito.id_usuario)
    )


def get_carrito_view(db: Session, id_carrito: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _carrito_view().where(Carrito.id_carrito == id_carrito))


def get_carrito_view_by_usuario(db: Session, id_usuario: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _carrito_view().where(Carrito.id_usuario == id_usuario))


def get_carritos_view(db: Session) -> List[Dict[str, Any]]:
    return fetch_all(db, _carrito_view().order_by(Carrito.fecha_creacion.desc(), Carrito.id_carrito.desc()))


# --- CRUD для позиций корзины ---

def get_carrito_detalle(db: Session, id_detalle: int) -> Optional[CarritoDetalle]:
    return db.query(CarritoDetalle).filter(CarritoDetalle.id_detalle == id_detalle).first()


def _carrito_detalle_view():
    return (
        select(
            *CarritoDetalle.__table__.c,
            Producto.titulo.label("nombre_producto"),
            Producto.precio.label("precio_unitario_actual_producto"),
        )
        .join(Producto, Producto.id_producto == CarritoDetalle.id_producto)
    )


def get_carrito_detalle_view(db: Session, id_detalle: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _carrito_detalle_view().where(CarritoDetalle.id_detalle == id_detalle))


def get_carrito_detalles_view(db: Session, id_carrito: Optional[int] = None) -> List[Dict[str, Any]]:
    stmt = _carrito_detalle_view()
    if id_carrito is not None:
        stmt = stmt.where(CarritoDetalle.id_carrito == id_carrito)
    return fetch_all(db, stmt.order_by(CarritoDetalle.id_carrito, CarritoDetalle.id_detalle))


def add_or_merge_carrito_detalle(db: Session, id_carrito: int, id_producto: int, cantidad: int) -> int:
    """
    Добавляет товар в корзину одним атомарным оператором.
    При конфликте пары (корзина, товар) количество суммируется, а не заменяется.
    Возвращает id_detalle затронутой строки.
    """
    insert = dialect_insert(db)
    stmt = insert(CarritoDetalle).values(id_carrito=id_carrito, id_producto=id_producto, cantidad=cantidad)
    stmt = stmt.on_conflict_do_update(
        index_elements=["id_carrito", "id_producto"],
        set_={"cantidad": CarritoDetalle.__table__.c.cantidad + stmt.excluded.cantidad},
    ).returning(CarritoDetalle.id_detalle)

    id_detalle = db.execute(stmt).scalar_one()
    db.commit()
    logger.info(f"Cart {id_carrito}: product {id_producto} merged (+{cantidad}), detail id {id_detalle}")
    return id_detalle
