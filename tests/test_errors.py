# tests/test_errors.py

from types import SimpleNamespace

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError, OperationalError, StatementError

from mercado_gaucho.core.errors import DbErrorKind, classify_db_error, translate_db_errors


class FakePgError(Exception):
    """Имитация ошибки psycopg2 с SQLSTATE и diag."""

    def __init__(self, pgcode, message="", constraint_name=None, column_name=None):
        super().__init__(message)
        self.pgcode = pgcode
        self.diag = SimpleNamespace(constraint_name=constraint_name, column_name=column_name)


def _integrity(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, orig)


@pytest.mark.parametrize(
    "pgcode, kind",
    [
        ("23503", DbErrorKind.REFERENTIAL),
        ("23505", DbErrorKind.UNIQUE),
        ("23514", DbErrorKind.CHECK),
        ("40001", DbErrorKind.UNKNOWN),
    ],
)
def test_classify_postgres_codes(pgcode, kind):
    info = classify_db_error(_integrity(FakePgError(pgcode, constraint_name="usuarios_email_key")))

    assert info.kind is kind
    if kind is not DbErrorKind.UNKNOWN:
        assert info.constraint == "usuarios_email_key"


def test_classify_postgres_not_null_reports_column():
    info = classify_db_error(_integrity(FakePgError("23502", column_name="titulo")))
    assert info.kind is DbErrorKind.NOT_NULL
    assert info.constraint == "titulo"


def test_classify_postgres_invalid_enum():
    orig = FakePgError("22P02", 'invalid input value for enum estado_orden_enum: "perdido"')
    assert classify_db_error(StatementError("x", "UPDATE ...", {}, orig)).kind is DbErrorKind.ENUM


@pytest.mark.parametrize(
    "message, kind, constraint",
    [
        ("FOREIGN KEY constraint failed", DbErrorKind.REFERENTIAL, None),
        ("UNIQUE constraint failed: usuarios.email", DbErrorKind.UNIQUE, "usuarios.email"),
        ("CHECK constraint failed: ck_productos_precio", DbErrorKind.CHECK, None),
        ("NOT NULL constraint failed: productos.titulo", DbErrorKind.NOT_NULL, "productos.titulo"),
    ],
)
def test_classify_sqlite_messages(message, kind, constraint):
    info = classify_db_error(_integrity(Exception(message)))
    assert info.kind is kind
    assert info.constraint == constraint


def test_classify_enum_lookup_error():
    exc = StatementError("bind failed", "INSERT ...", {}, LookupError("'perdido' is not among the defined enum values"))
    assert classify_db_error(exc).kind is DbErrorKind.ENUM


def test_classify_unknown():
    exc = OperationalError("SELECT 1", {}, Exception("database is locked"))
    assert classify_db_error(exc).kind is DbErrorKind.UNKNOWN


# --- translate_db_errors ---

def test_translate_unique_with_column_messages(mocker):
    db = mocker.Mock()
    mensajes = {"id_usuario": "usuario repetido", "nombre_tienda": "nombre repetido"}

    with pytest.raises(HTTPException) as exc_info:
        with translate_db_errors(db, unique=mensajes):
            raise _integrity(Exception("UNIQUE constraint failed: tiendas_oficiales.nombre_tienda"))

    assert exc_info.value.status_code == 409
    assert exc_info.value.detail == "nombre repetido"
    db.rollback.assert_called_once()


def test_translate_referential_on_delete_is_conflict(mocker):
    db = mocker.Mock()

    with pytest.raises(HTTPException) as exc_info:
        with translate_db_errors(db, referential="en uso", referential_status=409):
            raise _integrity(Exception("FOREIGN KEY constraint failed"))

    assert exc_info.value.status_code == 409
    assert exc_info.value.detail == "en uso"


def test_translate_uses_default_message(mocker):
    with pytest.raises(HTTPException) as exc_info:
        with translate_db_errors(mocker.Mock()):
            raise _integrity(Exception("CHECK constraint failed: ck_ordenes_total"))

    assert exc_info.value.status_code == 400
    assert exc_info.value.detail


def test_translate_reraises_unknown(mocker):
    db = mocker.Mock()
    error = OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    with pytest.raises(OperationalError):
        with translate_db_errors(db):
            raise error

    db.rollback.assert_called_once()


def test_translate_ignores_other_exceptions(mocker):
    db = mocker.Mock()

    with pytest.raises(ValueError):
        with translate_db_errors(db):
            raise ValueError("boom")

    db.rollback.assert_not_called()
