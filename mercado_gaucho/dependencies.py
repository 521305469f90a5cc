# mercado_gaucho/dependencies.py

import enum
import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.core.config import settings
from mercado_gaucho.core.security import is_valid_token_format, mask_token
from mercado_gaucho.crud import auditoria as crud_auditoria
from mercado_gaucho.db.session import SessionLocal

# --- Инициализация логгера ---
logger = logging.getLogger(__name__)

# --- Схема аутентификации ---
# Токен необязателен: решение принимает политика маршрута, а не схема
optional_bearer_scheme = HTTPBearer(auto_error=False)


# --- Управление сессией БД ---
def get_db_session_instance() -> Session:
    """Создает и возвращает экземпляр сессии БД."""
    return SessionLocal()


def get_db() -> Iterator[Session]:
    """
    Основная зависимость FastAPI для получения сессии БД.
    Сессия закрывается на любом пути выхода: успех, ошибка валидации, исключение.
    """
    db = get_db_session_instance()
    try:
        yield db
    finally:
        db.close()


# --- Контекст запроса ---

ROL_ADMINISTRADOR = "administrador"


@dataclass(frozen=True)
class RequestContext:
    """Кто делает запрос: пользователь с ролью или аноним."""
    id_usuario: Optional[int] = None
    rol: Optional[str] = None

    @property
    def autenticado(self) -> bool:
        return self.id_usuario is not None

    @property
    def es_admin(self) -> bool:
        return self.rol == ROL_ADMINISTRADOR


ANONIMO = RequestContext()


def get_request_context(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_bearer_scheme),
    db: Session = Depends(get_db),
) -> RequestContext:
    """
    Определяет контекст по заголовку Authorization: Bearer <token>.
    Отсутствующий, некорректный или истёкший токен даёт анонимный контекст.
    """
    context = ANONIMO
    if credentials and is_valid_token_format(credentials.credentials):
        fila = crud_auditoria.get_token_valido(db, credentials.credentials)
        if fila:
            context = RequestContext(id_usuario=fila["id_usuario"], rol=fila["rol"])
            logger.debug(f"Request authenticated as user {context.id_usuario} ({context.rol}).")
        else:
            logger.info(f"Bearer token {mask_token(credentials.credentials)} is invalid or expired.")
    elif credentials:
        logger.info("Bearer token with invalid format ignored.")

    # Нужен лимитеру для ключа по пользователю
    request.state.context = context
    return context


# --- Политики доступа ---

class Politica(str, enum.Enum):
    PUBLICA = "publica"
    AUTENTICADO = "autenticado"
    ADMIN = "admin"


def requiere(politica: Politica):
    """
    Фабрика зависимостей: проверяет политику маршрута до выполнения обработчика.
    Пока ENFORCE_ACCESS_POLICIES выключен, только определяет контекст.
    """
    def verificar_politica(context: RequestContext = Depends(get_request_context)) -> RequestContext:
        if not settings.ENFORCE_ACCESS_POLICIES or politica is Politica.PUBLICA:
            return context

        if not context.autenticado:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=locales.ERROR_AUTH_REQUIRED,
                headers={"WWW-Authenticate": "Bearer"},
            )

        if politica is Politica.ADMIN and not context.es_admin:
            logger.warning(f"Permission denied for user {context.id_usuario} (rol={context.rol}) on admin route.")
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=locales.ERROR_FORBIDDEN)

        return context

    return verificar_politica
