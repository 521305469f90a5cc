# mercado_gaucho/services/usuario.py

import logging

from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.core.errors import translate_db_errors
from mercado_gaucho.core.security import hash_password
from mercado_gaucho.crud import base as crud_base
from mercado_gaucho.models.usuario import Usuario
from mercado_gaucho.schemas.usuario import UsuarioCreate

logger = logging.getLogger(__name__)


def registrar_usuario(db: Session, datos: UsuarioCreate) -> Usuario:
    """Регистрирует пользователя; пароль сохраняется только в виде bcrypt-хеша."""
    valores = datos.model_dump(exclude_none=True, exclude={"contrasena"})
    valores["contrasena_hash"] = hash_password(datos.contrasena)

    with translate_db_errors(
        db,
        unique=locales.ERROR_EMAIL_EXISTS,
        enum_value=locales.ERROR_INVALID_USER_TYPE,
    ):
        return crud_base.create(db, Usuario, valores)
