# mercado_gaucho/core/logging_config.py

from logging.config import dictConfig

from mercado_gaucho.core.config import settings

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _console_logger(level: str) -> dict:
    return {"handlers": ["console"], "level": level, "propagate": False}


LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {"format": _FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
        # Строка доступа uvicorn уже содержит клиента, метод, путь и статус
        "access": {"format": "%(asctime)s - access - %(message)s", "datefmt": "%Y-%m-%d %H:%M:%S"},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        },
        "access": {
            "class": "logging.StreamHandler",
            "formatter": "access",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "uvicorn": _console_logger("INFO"),
        "uvicorn.access": {"handlers": ["access"], "level": "INFO", "propagate": False},
        "fastapi": _console_logger("INFO"),
        # SQL-запросы пишем только при проблемах
        "sqlalchemy.engine": _console_logger("WARNING"),
        "mercado_gaucho": _console_logger(settings.LOG_LEVEL),
    },
    "root": {"level": "WARNING", "handlers": ["console"]},
}


def setup_logging():
    """Применяет конфигурацию логирования."""
    dictConfig(LOGGING_CONFIG)
