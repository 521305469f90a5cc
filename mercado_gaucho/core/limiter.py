# mercado_gaucho/core/limiter.py

import logging
from typing import Optional

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from mercado_gaucho.core.config import settings

logger = logging.getLogger(__name__)


# --- Функция-ключ для идентификации запросов ---

def key_func(request: Request) -> str:
    """
    Определяет, как идентифицировать запрос для применения лимита.
    Приоритет: ID пользователя (если контекст уже определён) -> IP-адрес.
    """
    context = getattr(request.state, "context", None)
    id_usuario: Optional[int] = getattr(context, "id_usuario", None)

    if id_usuario is not None:
        return f"usuario:{id_usuario}"

    return get_remote_address(request)


# --- Создание лимитера ---
# Хранилище счётчиков задаётся URI: memory:// для одного процесса, redis://... для нескольких воркеров
limiter = Limiter(key_func=key_func, storage_uri=settings.RATE_LIMIT_STORAGE_URI, strategy="moving-window")
