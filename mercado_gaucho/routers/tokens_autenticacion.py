# mercado_gaucho/routers/tokens_autenticacion.py

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.core.config import settings
from mercado_gaucho.core.limiter import limiter
from mercado_gaucho.core.security import generate_token, is_valid_token_format, mask_token
from mercado_gaucho.crud import auditoria as crud_auditoria
from mercado_gaucho.crud import base as crud_base
from mercado_gaucho.dependencies import Politica, get_db, requiere
from mercado_gaucho.models.auditoria import TokenAutenticacion
from mercado_gaucho.routers.utils import actualizar, campos_a_actualizar, crear, eliminar, get_or_404
from mercado_gaucho.schemas.auditoria import Token, TokenCreate, TokenUpdate, TokenValidado
from mercado_gaucho.schemas.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Token], dependencies=[Depends(requiere(Politica.ADMIN))])
def list_tokens(
    id_usuario: Optional[int] = Query(None),
    expirado: Optional[bool] = Query(None),
    db: Session = Depends(get_db),
):
    return crud_auditoria.get_tokens_view(db, id_usuario=id_usuario, expirado=expirado)


@router.get("/validar/{token}", response_model=TokenValidado)
@limiter.limit(settings.TOKEN_VALIDATION_RATE_LIMIT)
def validar_token(request: Request, token: str, db: Session = Depends(get_db)):
    """
    Проверка токена: 400 при неверном формате, 401 если токена нет или он истёк.
    Ограничена по частоте, чтобы перебор токенов был непрактичен.
    """
    if not is_valid_token_format(token):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=locales.ERROR_INVALID_TOKEN_FORMAT)

    fila = crud_auditoria.get_token_valido(db, token)
    if fila is None:
        logger.info(f"Token validation failed for {mask_token(token)}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=locales.ERROR_INVALID_OR_EXPIRED_TOKEN,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return fila


@router.get("/{id_token}", response_model=Token, dependencies=[Depends(requiere(Politica.ADMIN))])
def get_token(id_token: int, db: Session = Depends(get_db)):
    return get_or_404(crud_auditoria.get_token_view(db, id_token), locales.ERROR_TOKEN_NOT_FOUND)


@router.post("", response_model=Token, status_code=status.HTTP_201_CREATED)
def create_token(datos: TokenCreate, request: Request, db: Session = Depends(get_db)):
    """Без явного значения токен генерируется на сервере; ip_origen по умолчанию - адрес клиента."""
    valores = datos.model_dump(exclude_none=True)
    valores.setdefault("token", generate_token())
    if "ip_origen" not in valores and request.client:
        valores["ip_origen"] = request.client.host

    registro = crear(
        db, TokenAutenticacion, valores,
        referential=locales.ERROR_USER_NOT_EXISTS,
        unique=locales.ERROR_TOKEN_EXISTS,
    )
    logger.info(f"Token {mask_token(registro.token)} issued for user {registro.id_usuario}.")
    return crud_auditoria.get_token_view(db, registro.id_token)


@router.put("/{id_token}", response_model=Token)
def update_token(id_token: int, datos: TokenUpdate, db: Session = Depends(get_db)):
    campos = campos_a_actualizar(datos)
    actualizar(
        db,
        crud_auditoria.get_token(db, id_token),
        campos,
        crud_auditoria.TOKEN_CAMPOS_ACTUALIZABLES,
        locales.ERROR_TOKEN_NOT_FOUND,
    )
    return crud_auditoria.get_token_view(db, id_token)


@router.delete("/valor/{token}", status_code=status.HTTP_204_NO_CONTENT)
def delete_token_valor(token: str, db: Session = Depends(get_db)):
    """Выход из системы: удаление по значению токена."""
    eliminar(db, TokenAutenticacion, locales.ERROR_TOKEN_NOT_FOUND, token=token)


@router.delete("/usuario/{id_usuario}/all", response_model=MessageResponse)
def delete_tokens_usuario(id_usuario: int, db: Session = Depends(get_db)):
    """Отзыв всех токенов пользователя. Ноль удалённых - тоже успех."""
    count = crud_base.delete_where(db, TokenAutenticacion, id_usuario=id_usuario)
    return {"message": locales.SUCCESS_TOKENS_DELETED.format(count=count, id_usuario=id_usuario)}


@router.delete("/{id_token}", status_code=status.HTTP_204_NO_CONTENT)
def delete_token(id_token: int, db: Session = Depends(get_db)):
    eliminar(db, TokenAutenticacion, locales.ERROR_TOKEN_NOT_FOUND, id_token=id_token)
