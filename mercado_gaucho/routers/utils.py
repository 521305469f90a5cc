# mercado_gaucho/routers/utils.py
"""Общие шаги обработчиков ресурсов: поиск или 404, частичное обновление, удаление."""
from datetime import date
from typing import Any, Dict, Iterable, Optional, Type, TypeVar

from fastapi import HTTPException, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.core.errors import translate_db_errors
from mercado_gaucho.crud import base as crud_base
from mercado_gaucho.db.session import Base

T = TypeVar("T")


def get_or_404(value: Optional[T], detail: str) -> T:
    if value is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return value


def campos_a_actualizar(payload: BaseModel) -> Dict[str, Any]:
    """Только реально переданные поля; пустое тело - ошибка клиента."""
    campos = payload.model_dump(exclude_unset=True)
    if not campos:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=locales.ERROR_NOTHING_TO_UPDATE)
    return campos


def crear(db: Session, model: Type[Base], valores: Dict[str, Any], **errores):
    with translate_db_errors(db, **errores):
        return crud_base.create(db, model, valores)


def actualizar(
    db: Session,
    obj: Optional[Base],
    campos: Dict[str, Any],
    allowed: Iterable[str],
    not_found: str,
    **errores,
):
    get_or_404(obj, not_found)
    with translate_db_errors(db, **errores):
        return crud_base.update_fields(db, obj, campos, allowed)


def eliminar(db: Session, model: Type[Base], not_found: str, referenciado: Optional[str] = None, **filters) -> None:
    """Удаление по ключу: 0 строк -> 404, строка ещё используется -> 409."""
    with translate_db_errors(
        db,
        referential=referenciado or locales.ERROR_DELETE_REFERENCED,
        referential_status=status.HTTP_409_CONFLICT,
    ):
        deleted = crud_base.delete_where(db, model, **filters)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)


def validar_rango_fechas(desde: Optional[date], hasta: Optional[date]) -> None:
    if desde is not None and hasta is not None and hasta < desde:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=locales.ERROR_DATE_RANGE)
