# mercado_gaucho/core/errors.py

import enum
import logging
import re
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Mapping, Optional, Union

from fastapi import HTTPException, status
from sqlalchemy.exc import StatementError
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales

logger = logging.getLogger(__name__)


class DbErrorKind(str, enum.Enum):
    REFERENTIAL = "referential"
    UNIQUE = "unique"
    ENUM = "enum"
    CHECK = "check"
    NOT_NULL = "not_null"
    UNKNOWN = "unknown"


@dataclass
class DbErrorInfo:
    kind: DbErrorKind
    # Имя ограничения (PostgreSQL) или список "таблица.колонка" (SQLite)
    constraint: Optional[str] = None


# --- Классификация ошибок хранилища ---

_SQLITE_UNIQUE_RE = re.compile(r"UNIQUE constraint failed: (.+)$")

_STATUS_BY_KIND = {
    DbErrorKind.REFERENTIAL: status.HTTP_400_BAD_REQUEST,
    DbErrorKind.UNIQUE: status.HTTP_409_CONFLICT,
    DbErrorKind.ENUM: status.HTTP_400_BAD_REQUEST,
    DbErrorKind.CHECK: status.HTTP_400_BAD_REQUEST,
    DbErrorKind.NOT_NULL: status.HTTP_400_BAD_REQUEST,
}

_DEFAULT_DETAIL = {
    DbErrorKind.REFERENTIAL: locales.ERROR_REFERENCED_ENTITY_NOT_FOUND,
    DbErrorKind.UNIQUE: locales.ERROR_DUPLICATE_VALUE,
    DbErrorKind.ENUM: locales.ERROR_INVALID_ENUM_VALUE,
    DbErrorKind.CHECK: locales.ERROR_CHECK_VIOLATION,
    DbErrorKind.NOT_NULL: locales.ERROR_REQUIRED_VALUE_MISSING,
}


def classify_db_error(exc: BaseException) -> DbErrorInfo:
    """
    Определяет вид ошибки хранилища.
    PostgreSQL различаем по SQLSTATE, SQLite по тексту сообщения,
    а недопустимое значение Enum ловит сам SQLAlchemy (LookupError при биндинге).
    """
    orig = getattr(exc, "orig", None)
    if isinstance(orig, LookupError):
        return DbErrorInfo(DbErrorKind.ENUM)

    message = str(orig if orig is not None else exc)
    pgcode = getattr(orig, "pgcode", None)

    if pgcode:
        diag = getattr(orig, "diag", None)
        constraint = getattr(diag, "constraint_name", None)
        if pgcode == "23503":
            return DbErrorInfo(DbErrorKind.REFERENTIAL, constraint)
        if pgcode == "23505":
            return DbErrorInfo(DbErrorKind.UNIQUE, constraint)
        if pgcode == "23514":
            return DbErrorInfo(DbErrorKind.CHECK, constraint)
        if pgcode == "23502":
            return DbErrorInfo(DbErrorKind.NOT_NULL, getattr(diag, "column_name", None))
        if pgcode == "22P02" and "invalid input value for enum" in message:
            return DbErrorInfo(DbErrorKind.ENUM)
        return DbErrorInfo(DbErrorKind.UNKNOWN)

    if "FOREIGN KEY constraint failed" in message:
        return DbErrorInfo(DbErrorKind.REFERENTIAL)
    match = _SQLITE_UNIQUE_RE.search(message)
    if match:
        return DbErrorInfo(DbErrorKind.UNIQUE, match.group(1).strip())
    if "CHECK constraint failed" in message:
        return DbErrorInfo(DbErrorKind.CHECK)
    if "NOT NULL constraint failed" in message:
        return DbErrorInfo(DbErrorKind.NOT_NULL, message.rsplit(":", 1)[-1].strip())
    if "invalid input value for enum" in message:
        return DbErrorInfo(DbErrorKind.ENUM)
    return DbErrorInfo(DbErrorKind.UNKNOWN)


def _pick_unique_detail(constraint: Optional[str], unique: Union[str, Mapping[str, str], None]) -> Optional[str]:
    if unique is None or isinstance(unique, str):
        return unique
    # Словарь "колонка -> сообщение": ищем колонку в имени ограничения
    for column, detail in unique.items():
        if constraint and column in constraint:
            return detail
    return None


@contextmanager
def translate_db_errors(
    db: Session,
    *,
    referential: Optional[str] = None,
    referential_status: int = status.HTTP_400_BAD_REQUEST,
    unique: Union[str, Mapping[str, str], None] = None,
    enum_value: Optional[str] = None,
    check: Optional[str] = None,
) -> Iterator[None]:
    """
    Откатывает сессию и переводит ошибки ограничений в HTTPException.
    Неклассифицированные ошибки пробрасываются дальше (глобальный обработчик отдаст 500).
    """
    try:
        yield
    except StatementError as exc:
        db.rollback()
        info = classify_db_error(exc)
        if info.kind is DbErrorKind.UNKNOWN:
            logger.error(f"Unclassified database error: {exc}", exc_info=True)
            raise

        overrides = {
            DbErrorKind.REFERENTIAL: referential,
            DbErrorKind.UNIQUE: _pick_unique_detail(info.constraint, unique),
            DbErrorKind.ENUM: enum_value,
            DbErrorKind.CHECK: check,
            DbErrorKind.NOT_NULL: None,
        }
        detail = overrides[info.kind] or _DEFAULT_DETAIL[info.kind]
        status_code = referential_status if info.kind is DbErrorKind.REFERENTIAL else _STATUS_BY_KIND[info.kind]

        logger.warning(f"Write rejected by the store ({info.kind.value}, constraint={info.constraint}): {detail}")
        raise HTTPException(status_code=status_code, detail=detail) from exc
