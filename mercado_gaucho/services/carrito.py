# mercado_gaucho/services/carrito.py

import logging
from typing import Any, Dict, Tuple

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.core.errors import DbErrorKind, classify_db_error, translate_db_errors
from mercado_gaucho.crud import carrito as crud_carrito
from mercado_gaucho.db.session import transaction
from mercado_gaucho.models.carrito import Carrito

logger = logging.getLogger(__name__)


def asegurar_carrito(db: Session, id_usuario: int) -> Tuple[Dict[str, Any], bool]:
    """
    Get-or-create корзины пользователя в одной транзакции.
    Возвращает (корзина с данными пользователя, создана_ли_сейчас).
    """
    creado = False
    try:
        with transaction(db):
            carrito = crud_carrito.get_carrito_by_usuario(db, id_usuario)
            if carrito is None:
                carrito = Carrito(id_usuario=id_usuario)
                db.add(carrito)
                db.flush()
                creado = True
    except IntegrityError as exc:
        info = classify_db_error(exc)
        if info.kind is DbErrorKind.REFERENTIAL:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=locales.ERROR_USER_NOT_EXISTS) from exc
        if info.kind is not DbErrorKind.UNIQUE:
            raise
        # Параллельный запрос успел создать корзину первым
        logger.info(f"Cart for user {id_usuario} was created concurrently, reusing it.")
        creado = False

    vista = crud_carrito.get_carrito_view_by_usuario(db, id_usuario)
    if creado:
        logger.info(f"Cart {vista['id_carrito']} created for user {id_usuario}.")
    return vista, creado


def agregar_producto(db: Session, id_carrito: int, id_producto: int, cantidad: int) -> Dict[str, Any]:
    """Добавляет товар в корзину; повторное добавление суммирует количество."""
    with translate_db_errors(db, referential=locales.ERROR_CART_OR_PRODUCT_NOT_EXISTS):
        id_detalle = crud_carrito.add_or_merge_carrito_detalle(db, id_carrito, id_producto, cantidad)
    return crud_carrito.get_carrito_detalle_view(db, id_detalle)
