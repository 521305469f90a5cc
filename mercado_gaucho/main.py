# mercado_gaucho/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

# Конфигурация и ядро
from mercado_gaucho.core import locales
from mercado_gaucho.core.config import settings as config
from mercado_gaucho.core.limiter import limiter
from mercado_gaucho.core.logging_config import setup_logging
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.routers import ROUTES

# --- Инициализация ---
logger = logging.getLogger(__name__)


# --- Обработчики ошибок ---

def _describir_errores(exc: RequestValidationError) -> str:
    partes = []
    for error in exc.errors():
        # Первый элемент loc - источник (body/query/path), он клиенту не нужен
        campo = ".".join(str(part) for part in error.get("loc", ())[1:])
        partes.append(f"{campo}: {error['msg']}" if campo else error["msg"])
    return "; ".join(partes) or locales.ERROR_INVALID_INPUT


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Ошибки валидации входных данных отдаём как 400 с читаемым описанием."""
    detail = _describir_errores(exc)
    logger.info(f"Validation error on {request.method} {request.url.path}: {detail}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


async def not_found_exception_handler(request: Request, exc: StarletteHTTPException):
    """Неизвестный маршрут получает собственное сообщение, остальные HTTP-ошибки - как есть."""
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": locales.ERROR_ROUTE_NOT_FOUND})
    return await http_exception_handler(request, exc)


async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Глобальный обработчик для всех необработанных исключений.
    Текст исключения отдаётся клиенту только вне production.
    """
    logger.critical(f"Unhandled exception for request: {request.method} {request.url}", exc_info=exc)

    content = {"detail": locales.ERROR_INTERNAL}
    if not config.IS_PRODUCTION:
        content["error"] = str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


# --- Lifespan Manager (запуск и остановка приложения) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info(f"Application lifespan startup (environment={config.ENVIRONMENT}, port={config.API_PORT})...")
    if config.ENFORCE_ACCESS_POLICIES:
        logger.info("Access policies are enforced.")
    yield
    logger.info("Application shutting down.")


# --- Создание FastAPI приложения ---
app = FastAPI(
    title="Mercado Gaucho API",
    description="Backend REST del marketplace Mercado Gaucho",
    version="1.0.0",
    lifespan=lifespan,
)

app.state.limiter = limiter

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Регистрация обработчиков исключений ---
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, not_found_exception_handler)
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


# --- Служебные эндпоинты ---

@app.get("/", tags=["Estado"])
def read_root():
    return {"message": "API de Mercado Gaucho funcionando", "version": app.version}


@app.get("/estado-db", tags=["Estado"])
def estado_db(db: Session = Depends(get_db)):
    """Проверка соединения с БД: SELECT 1."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error(f"Database health check failed: {exc}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "error", "detail": locales.ERROR_DB_UNAVAILABLE},
        )
    return {"status": "ok", "detail": locales.SUCCESS_DB_OK}


# --- Подключение роутеров ---
api_router = APIRouter(prefix="/api")

for prefix, router, tag in ROUTES:
    api_router.include_router(router, prefix=prefix, tags=[tag])

app.include_router(api_router)
