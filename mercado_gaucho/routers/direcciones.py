# mercado_gaucho/routers/direcciones.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import usuario as crud_usuario
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.usuario import Direccion as DireccionModel
from mercado_gaucho.routers.utils import actualizar, campos_a_actualizar, crear, eliminar, get_or_404
from mercado_gaucho.schemas.usuario import Direccion, DireccionCreate, DireccionUpdate

router = APIRouter()


@router.get("", response_model=List[Direccion])
def list_direcciones(id_usuario: Optional[int] = Query(None), db: Session = Depends(get_db)):
    return crud_usuario.get_direcciones_view(db, id_usuario=id_usuario)


@router.get("/{id_direccion}", response_model=Direccion)
def get_direccion(id_direccion: int, db: Session = Depends(get_db)):
    return get_or_404(crud_usuario.get_direccion_view(db, id_direccion), locales.ERROR_ADDRESS_NOT_FOUND)


@router.post("", response_model=Direccion, status_code=status.HTTP_201_CREATED)
def create_direccion(datos: DireccionCreate, db: Session = Depends(get_db)):
    direccion = crear(db, DireccionModel, datos.model_dump(exclude_none=True), referential=locales.ERROR_USER_NOT_EXISTS)
    return crud_usuario.get_direccion_view(db, direccion.id_direccion)


@router.put("/{id_direccion}", response_model=Direccion)
def update_direccion(id_direccion: int, datos: DireccionUpdate, db: Session = Depends(get_db)):
    campos = campos_a_actualizar(datos)
    actualizar(
        db,
        crud_usuario.get_direccion(db, id_direccion),
        campos,
        crud_usuario.DIRECCION_CAMPOS_ACTUALIZABLES,
        locales.ERROR_ADDRESS_NOT_FOUND,
    )
    return crud_usuario.get_direccion_view(db, id_direccion)


@router.delete("/{id_direccion}", status_code=status.HTTP_204_NO_CONTENT)
def delete_direccion(id_direccion: int, db: Session = Depends(get_db)):
    eliminar(db, DireccionModel, locales.ERROR_ADDRESS_NOT_FOUND, id_direccion=id_direccion)
