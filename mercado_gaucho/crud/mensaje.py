# mercado_gaucho/crud/mensaje.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, aliased

from mercado_gaucho.crud.base import fetch_all, fetch_one, usuario_columns, utcnow
from mercado_gaucho.models.catalogo import Producto
from mercado_gaucho.models.mensaje import Mensaje
from mercado_gaucho.models.usuario import Usuario

logger = logging.getLogger(__name__)


def get_mensaje(db: Session, id_mensaje: int) -> Optional[Mensaje]:
    return db.query(Mensaje).filter(Mensaje.id_mensaje == id_mensaje).first()


def _mensaje_view():
    emisor = aliased(Usuario, name="emisor")
    receptor = aliased(Usuario, name="receptor")
    return (
        select(
            *Mensaje.__table__.c,
            *usuario_columns(emisor, "emisor"),
            *usuario_columns(receptor, "receptor"),
            Producto.titulo.label("nombre_producto"),
        )
        .outerjoin(emisor, emisor.id_usuario == Mensaje.id_emisor)
        .outerjoin(receptor, receptor.id_usuario == Mensaje.id_receptor)
        .outerjoin(Producto, Producto.id_producto == Mensaje.id_producto)
    )


def get_mensaje_view(db: Session, id_mensaje: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _mensaje_view().where(Mensaje.id_mensaje == id_mensaje))


def get_mensajes_view(
    db: Session,
    id_emisor: Optional[int] = None,
    id_receptor: Optional[int] = None,
    id_producto: Optional[int] = None,
    respondido: Optional[bool] = None,
) -> List[Dict[str, Any]]:
    stmt = _mensaje_view()
    if id_emisor is not None:
        stmt = stmt.where(Mensaje.id_emisor == id_emisor)
    if id_receptor is not None:
        stmt = stmt.where(Mensaje.id_receptor == id_receptor)
    if id_producto is not None:
        stmt = stmt.where(Mensaje.id_producto == id_producto)
    if respondido is not None:
        stmt = stmt.where(Mensaje.respuesta.is_not(None) if respondido else Mensaje.respuesta.is_(None))
    return fetch_all(db, stmt.order_by(Mensaje.fecha_envio.desc(), Mensaje.id_mensaje.desc()))


def responder_mensaje(db: Session, id_mensaje: int, respuesta: str) -> bool:
    """
    Записывает ответ только если его ещё нет (одним UPDATE ... WHERE respuesta IS NULL).
    Возвращает False, если сообщения нет или оно уже отвечено.
    """
    updated = (
        db.query(Mensaje)
        .filter(Mensaje.id_mensaje == id_mensaje, Mensaje.respuesta.is_(None))
        .update({"respuesta": respuesta, "fecha_respuesta": utcnow()}, synchronize_session=False)
    )
    db.commit()
    if updated:
        logger.info(f"Message {id_mensaje} answered.")
    return updated > 0
