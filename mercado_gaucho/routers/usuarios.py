# mercado_gaucho/routers/usuarios.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import usuario as crud_usuario
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.usuario import Usuario as UsuarioModel
from mercado_gaucho.routers.utils import actualizar, campos_a_actualizar, eliminar, get_or_404
from mercado_gaucho.schemas.usuario import Usuario, UsuarioCreate, UsuarioUpdate
from mercado_gaucho.services import usuario as usuario_service

router = APIRouter()


@router.get("", response_model=List[Usuario])
def list_usuarios(db: Session = Depends(get_db)):
    return crud_usuario.get_usuarios(db)


@router.get("/{id_usuario}", response_model=Usuario)
def get_usuario(id_usuario: int, db: Session = Depends(get_db)):
    return get_or_404(crud_usuario.get_usuario(db, id_usuario), locales.ERROR_USER_NOT_FOUND)


@router.post("", response_model=Usuario, status_code=status.HTTP_201_CREATED)
def create_usuario(datos: UsuarioCreate, db: Session = Depends(get_db)):
    """Регистрация пользователя. Пароль в ответ не попадает."""
    return usuario_service.registrar_usuario(db, datos)


@router.put("/{id_usuario}", response_model=Usuario)
def update_usuario(id_usuario: int, datos: UsuarioUpdate, db: Session = Depends(get_db)):
    campos = campos_a_actualizar(datos)
    return actualizar(
        db,
        crud_usuario.get_usuario(db, id_usuario),
        campos,
        crud_usuario.USUARIO_CAMPOS_ACTUALIZABLES,
        locales.ERROR_USER_NOT_FOUND,
        enum_value=locales.ERROR_INVALID_USER_TYPE,
    )


@router.delete("/{id_usuario}", status_code=status.HTTP_204_NO_CONTENT)
def delete_usuario(id_usuario: int, db: Session = Depends(get_db)):
    eliminar(
        db, UsuarioModel, locales.ERROR_USER_NOT_FOUND,
        referenciado=locales.ERROR_USER_HAS_DEPENDENCIES, id_usuario=id_usuario,
    )
