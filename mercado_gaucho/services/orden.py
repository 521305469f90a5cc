# mercado_gaucho/services/orden.py

import logging
from typing import Any, Dict

from fastapi import HTTPException, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.core.config import settings
from mercado_gaucho.core.errors import translate_db_errors
from mercado_gaucho.crud import orden as crud_orden
from mercado_gaucho.crud.base import update_fields
from mercado_gaucho.db.session import transaction
from mercado_gaucho.models.enums import ESTADO_ORDEN
from mercado_gaucho.models.orden import Orden, DetalleOrden
from mercado_gaucho.schemas.orden import DetalleOrdenItem, OrdenCreate, OrdenUpdate

logger = logging.getLogger(__name__)

# --- Допустимые переходы статуса заказа ---
TRANSICIONES_ORDEN = {
    "pendiente": frozenset({"pagado", "cancelado"}),
    "pagado": frozenset({"enviado", "cancelado"}),
    "enviado": frozenset({"entregado"}),
    "entregado": frozenset(),
    "cancelado": frozenset(),
}


def verificar_transicion(actual: str, nuevo: str) -> None:
    """
    409 при недопустимом переходе.
    Повторная запись текущего статуса разрешена; неизвестные значения отклонит хранилище.
    """
    if not settings.ENFORCE_ORDER_TRANSITIONS or nuevo == actual:
        return
    if nuevo not in ESTADO_ORDEN or actual not in TRANSICIONES_ORDEN:
        return
    if nuevo not in TRANSICIONES_ORDEN[actual]:
        logger.warning(f"Rejected order status transition {actual} -> {nuevo}.")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=locales.ERROR_ORDER_TRANSITION.format(actual=actual, nuevo=nuevo),
        )


def _describir_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    campo = ".".join(str(part) for part in error.get("loc", ()))
    return f"{campo}: {error['msg']}" if campo else error["msg"]


def crear_orden(db: Session, datos: OrdenCreate) -> Dict[str, Any]:
    """
    Создаёт заказ и все его позиции атомарно.
    Позиции проверяются по порядку; первая некорректная откатывает всю транзакцию.
    """
    valores = {"id_usuario": datos.id_usuario, "total": datos.total}
    if datos.estado is not None:
        valores["estado"] = datos.estado

    with translate_db_errors(
        db,
        referential=locales.ERROR_ORDER_REFS,
        enum_value=locales.ERROR_INVALID_ORDER_STATE,
    ):
        with transaction(db):
            orden = Orden(**valores)
            db.add(orden)
            db.flush()

            for posicion, item in enumerate(datos.detalles, start=1):
                try:
                    detalle = DetalleOrdenItem.model_validate(item)
                except ValidationError as exc:
                    raise HTTPException(
                        status_code=status.HTTP_400_BAD_REQUEST,
                        detail=locales.ERROR_INVALID_ORDER_ITEM.format(posicion=posicion, motivo=_describir_error(exc)),
                    ) from exc
                db.add(DetalleOrden(id_orden=orden.id_orden, **detalle.model_dump()))
                db.flush()

            id_orden = orden.id_orden

    logger.info(f"Order {id_orden} created for user {datos.id_usuario} with {len(datos.detalles)} item(s).")
    return crud_orden.get_orden_view(db, id_orden)


def actualizar_orden(db: Session, id_orden: int, datos: OrdenUpdate) -> Dict[str, Any]:
    campos = datos.model_dump(exclude_unset=True)
    if not campos:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=locales.ERROR_NOTHING_TO_UPDATE)

    orden = crud_orden.get_orden(db, id_orden)
    if orden is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=locales.ERROR_ORDER_NOT_FOUND)

    if campos.get("estado") is not None:
        verificar_transicion(orden.estado, campos["estado"])

    with translate_db_errors(db, enum_value=locales.ERROR_INVALID_ORDER_STATE):
        update_fields(db, orden, campos, crud_orden.ORDEN_CAMPOS_ACTUALIZABLES)

    logger.info(f"Order {id_orden} updated: {sorted(campos)}")
    return crud_orden.get_orden_view(db, id_orden)
