# mercado_gaucho/db/session.py

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from mercado_gaucho.core.config import settings

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite по умолчанию не проверяет внешние ключи, включаем на каждом соединении."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)
enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Явная транзакция поверх сессии.
    COMMIT при успешном выходе, ROLLBACK и проброс исключения при любой ошибке
    (включая HTTPException из валидации внутри блока).
    """
    try:
        yield db
        db.commit()
    except Exception:
        logger.debug("Transaction rolled back.")
        db.rollback()
        raise
