# mercado_gaucho/routers/cuentas_personales.py
# Профиль физического лица: ключ - id_usuario, один профиль на пользователя

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import usuario as crud_usuario
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.usuario import CuentaPersonal as CuentaPersonalModel
from mercado_gaucho.routers.utils import actualizar, campos_a_actualizar, crear, eliminar, get_or_404
from mercado_gaucho.schemas.usuario import CuentaPersonal, CuentaPersonalCreate, CuentaPersonalUpdate

router = APIRouter()


@router.get("", response_model=List[CuentaPersonal])
def list_cuentas_personales(db: Session = Depends(get_db)):
    return crud_usuario.get_cuentas_personales_view(db)


@router.get("/{id_usuario}", response_model=CuentaPersonal)
def get_cuenta_personal(id_usuario: int, db: Session = Depends(get_db)):
    return get_or_404(crud_usuario.get_cuenta_personal_view(db, id_usuario), locales.ERROR_PERSONAL_PROFILE_NOT_FOUND)


@router.post("", response_model=CuentaPersonal, status_code=status.HTTP_201_CREATED)
def create_cuenta_personal(datos: CuentaPersonalCreate, db: Session = Depends(get_db)):
    crear(
        db, CuentaPersonalModel, datos.model_dump(exclude_none=True),
        referential=locales.ERROR_USER_NOT_EXISTS,
        unique=locales.ERROR_PERSONAL_PROFILE_EXISTS,
        enum_value=locales.ERROR_INVALID_GENDER,
    )
    return crud_usuario.get_cuenta_personal_view(db, datos.id_usuario)


@router.put("/{id_usuario}", response_model=CuentaPersonal)
def update_cuenta_personal(id_usuario: int, datos: CuentaPersonalUpdate, db: Session = Depends(get_db)):
    campos = campos_a_actualizar(datos)
    actualizar(
        db,
        crud_usuario.get_cuenta_personal(db, id_usuario),
        campos,
        crud_usuario.CUENTA_PERSONAL_CAMPOS_ACTUALIZABLES,
        locales.ERROR_PERSONAL_PROFILE_NOT_FOUND,
        enum_value=locales.ERROR_INVALID_GENDER,
    )
    return crud_usuario.get_cuenta_personal_view(db, id_usuario)


@router.delete("/{id_usuario}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cuenta_personal(id_usuario: int, db: Session = Depends(get_db)):
    eliminar(db, CuentaPersonalModel, locales.ERROR_PERSONAL_PROFILE_NOT_FOUND, id_usuario=id_usuario)
