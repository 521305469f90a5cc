# mercado_gaucho/routers/cuentas_empresa.py
# Профиль компании: ключ - id_usuario

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import usuario as crud_usuario
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.usuario import CuentaEmpresa as CuentaEmpresaModel
from mercado_gaucho.routers.utils import actualizar, campos_a_actualizar, crear, eliminar, get_or_404
from mercado_gaucho.schemas.usuario import CuentaEmpresa, CuentaEmpresaCreate, CuentaEmpresaUpdate

router = APIRouter()


@router.get("", response_model=List[CuentaEmpresa])
def list_cuentas_empresa(db: Session = Depends(get_db)):
    return crud_usuario.get_cuentas_empresa_view(db)


@router.get("/{id_usuario}", response_model=CuentaEmpresa)
def get_cuenta_empresa(id_usuario: int, db: Session = Depends(get_db)):
    return get_or_404(crud_usuario.get_cuenta_empresa_view(db, id_usuario), locales.ERROR_BUSINESS_PROFILE_NOT_FOUND)


@router.post("", response_model=CuentaEmpresa, status_code=status.HTTP_201_CREATED)
def create_cuenta_empresa(datos: CuentaEmpresaCreate, db: Session = Depends(get_db)):
    crear(
        db, CuentaEmpresaModel, datos.model_dump(exclude_none=True),
        referential=locales.ERROR_USER_NOT_EXISTS,
        unique=locales.ERROR_BUSINESS_PROFILE_EXISTS,
    )
    return crud_usuario.get_cuenta_empresa_view(db, datos.id_usuario)


@router.put("/{id_usuario}", response_model=CuentaEmpresa)
def update_cuenta_empresa(id_usuario: int, datos: CuentaEmpresaUpdate, db: Session = Depends(get_db)):
    campos = campos_a_actualizar(datos)
    actualizar(
        db,
        crud_usuario.get_cuenta_empresa(db, id_usuario),
        campos,
        crud_usuario.CUENTA_EMPRESA_CAMPOS_ACTUALIZABLES,
        locales.ERROR_BUSINESS_PROFILE_NOT_FOUND,
    )
    return crud_usuario.get_cuenta_empresa_view(db, id_usuario)


@router.delete("/{id_usuario}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cuenta_empresa(id_usuario: int, db: Session = Depends(get_db)):
    eliminar(db, CuentaEmpresaModel, locales.ERROR_BUSINESS_PROFILE_NOT_FOUND, id_usuario=id_usuario)
