# mercado_gaucho/routers/ubicaciones_usuario.py
# Местоположение, выбранное пользователем (город или координаты)

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import usuario as crud_usuario
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.usuario import UbicacionUsuario
from mercado_gaucho.routers.utils import actualizar, campos_a_actualizar, crear, eliminar, get_or_404
from mercado_gaucho.schemas.usuario import Ubicacion, UbicacionCreate, UbicacionUpdate

router = APIRouter()


@router.get("", response_model=List[Ubicacion])
def list_ubicaciones(id_usuario: Optional[int] = Query(None), db: Session = Depends(get_db)):
    return crud_usuario.get_ubicaciones_view(db, id_usuario=id_usuario)


@router.get("/{id_ubicacion}", response_model=Ubicacion)
def get_ubicacion(id_ubicacion: int, db: Session = Depends(get_db)):
    return get_or_404(crud_usuario.get_ubicacion_view(db, id_ubicacion), locales.ERROR_LOCATION_NOT_FOUND)


@router.post("", response_model=Ubicacion, status_code=status.HTTP_201_CREATED)
def create_ubicacion(datos: UbicacionCreate, db: Session = Depends(get_db)):
    ubicacion = crear(db, UbicacionUsuario, datos.model_dump(exclude_none=True), referential=locales.ERROR_USER_NOT_EXISTS)
    return crud_usuario.get_ubicacion_view(db, ubicacion.id_ubicacion)


@router.put("/{id_ubicacion}", response_model=Ubicacion)
def update_ubicacion(id_ubicacion: int, datos: UbicacionUpdate, db: Session = Depends(get_db)):
    campos = campos_a_actualizar(datos)
    actualizar(
        db,
        crud_usuario.get_ubicacion(db, id_ubicacion),
        campos,
        crud_usuario.UBICACION_CAMPOS_ACTUALIZABLES,
        locales.ERROR_LOCATION_NOT_FOUND,
    )
    return crud_usuario.get_ubicacion_view(db, id_ubicacion)


@router.delete("/{id_ubicacion}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ubicacion(id_ubicacion: int, db: Session = Depends(get_db)):
    eliminar(db, UbicacionUsuario, locales.ERROR_LOCATION_NOT_FOUND, id_ubicacion=id_ubicacion)
