# mercado_gaucho/crud/base.py
"""
Общие операции записи и помощники для запросов-представлений.

Запись (create/update/delete) работает с ORM-объектами и возвращает их,
чтение "для показа" собирается отдельными SELECT с JOIN и отдаёт словари.
"""
import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Type

from sqlalchemy import inspect
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from mercado_gaucho.db.session import Base
from mercado_gaucho.models.usuario import Usuario

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# --- Чтение ---

def fetch_one(db: Session, stmt: Select) -> Optional[Dict[str, Any]]:
    row = db.execute(stmt).mappings().first()
    return dict(row) if row else None


def fetch_all(db: Session, stmt: Select) -> List[Dict[str, Any]]:
    return [dict(row) for row in db.execute(stmt).mappings().all()]


def date_range_filter(stmt: Select, column, desde: Optional[date], hasta: Optional[date]) -> Select:
    """Фильтр по дате включительно с обеих сторон: [desde 00:00, hasta+1 00:00)."""
    if desde is not None:
        stmt = stmt.where(column >= datetime.combine(desde, time.min))
    if hasta is not None:
        stmt = stmt.where(column < datetime.combine(hasta + timedelta(days=1), time.min))
    return stmt


def usuario_columns(usuario=Usuario, suffix: str = "usuario"):
    """Колонки для обогащения строк данными пользователя: nombre_<suffix>, apellido_<suffix>, email_<suffix>."""
    return (
        usuario.nombre.label(f"nombre_{suffix}"),
        usuario.apellido.label(f"apellido_{suffix}"),
        usuario.email.label(f"email_{suffix}"),
    )


# --- Запись ---

def dialect_insert(db: Session):
    """INSERT с поддержкой ON CONFLICT для текущего диалекта."""
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert
    if dialect == "sqlite":
        return sqlite.insert
    raise NotImplementedError(f"Upsert is not supported for dialect '{dialect}'")


def create(db: Session, model: Type[Base], values: Dict[str, Any]):
    obj = model(**values)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    logger.info(f"Created {model.__tablename__} row: {inspect(obj).identity}")
    return obj


def update_fields(db: Session, obj: Base, fields: Dict[str, Any], allowed: Iterable[str]):
    """
    Частичное обновление: меняются только переданные поля.
    Поля вне белого списка - ошибка программиста, а не пользователя.
    """
    unknown = set(fields) - set(allowed)
    if unknown:
        raise ValueError(f"Fields not updatable for {obj.__tablename__}: {sorted(unknown)}")
    for field, value in fields.items():
        setattr(obj, field, value)
    db.commit()
    db.refresh(obj)
    return obj


def delete_where(db: Session, model: Type[Base], **filters) -> int:
    """Удаляет строки по равенству колонок, возвращает число удалённых."""
    deleted = db.query(model).filter_by(**filters).delete(synchronize_session=False)
    db.commit()
    if deleted:
        logger.info(f"Deleted {deleted} row(s) from {model.__tablename__} where {filters}")
    return deleted
