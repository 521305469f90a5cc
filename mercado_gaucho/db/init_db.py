# mercado_gaucho/db/init_db.py
# Создание схемы по моделям: python -m mercado_gaucho.db.init_db

import logging
from typing import Optional

from sqlalchemy.engine import Engine

from mercado_gaucho import models  # noqa: F401  регистрирует все таблицы в Base.metadata
from mercado_gaucho.core.logging_config import setup_logging
from mercado_gaucho.db.session import Base, engine

logger = logging.getLogger(__name__)


def init_db(bind: Optional[Engine] = None) -> None:
    """Создаёт недостающие таблицы и типы. Существующие не изменяются."""
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info(f"Schema ready on {bind.url.render_as_string(hide_password=True)}: {len(Base.metadata.tables)} tables.")


if __name__ == "__main__":
    setup_logging()
    init_db()
