# mercado_gaucho/routers/tiendas_oficiales.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import marketing as crud_marketing
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.marketing import TiendaOficial
from mercado_gaucho.routers.utils import actualizar, campos_a_actualizar, crear, eliminar, get_or_404
from mercado_gaucho.schemas.marketing import Tienda, TiendaCreate, TiendaUpdate

router = APIRouter()

# Два уникальных поля - два разных сообщения
_ERRORES_UNICOS = {
    "id_usuario": locales.ERROR_STORE_USER_EXISTS,
    "nombre_tienda": locales.ERROR_STORE_NAME_EXISTS,
}


@router.get("", response_model=List[Tienda])
def list_tiendas(
    estado: Optional[str] = Query(None),
    nombre_tienda: Optional[str] = Query(None, description="Búsqueda parcial, sin distinguir mayúsculas"),
    db: Session = Depends(get_db),
):
    return crud_marketing.get_tiendas_view(db, estado=estado, nombre_tienda=nombre_tienda)


@router.get("/usuario/{id_usuario}", response_model=Tienda)
def get_tienda_usuario(id_usuario: int, db: Session = Depends(get_db)):
    return get_or_404(crud_marketing.get_tienda_view_by_usuario(db, id_usuario), locales.ERROR_STORE_NOT_FOUND_FOR_USER)


@router.get("/{id_tienda}", response_model=Tienda)
def get_tienda(id_tienda: int, db: Session = Depends(get_db)):
    return get_or_404(crud_marketing.get_tienda_view(db, id_tienda), locales.ERROR_STORE_NOT_FOUND)


@router.post("", response_model=Tienda, status_code=status.HTTP_201_CREATED)
def create_tienda(datos: TiendaCreate, db: Session = Depends(get_db)):
    tienda = crear(
        db, TiendaOficial, datos.model_dump(exclude_none=True),
        referential=locales.ERROR_USER_NOT_EXISTS,
        unique=_ERRORES_UNICOS,
        enum_value=locales.ERROR_INVALID_STORE_STATE,
    )
    return crud_marketing.get_tienda_view(db, tienda.id_tienda)


@router.put("/{id_tienda}", response_model=Tienda)
def update_tienda(id_tienda: int, datos: TiendaUpdate, db: Session = Depends(get_db)):
    campos = campos_a_actualizar(datos)
    actualizar(
        db,
        crud_marketing.get_tienda(db, id_tienda),
        campos,
        crud_marketing.TIENDA_CAMPOS_ACTUALIZABLES,
        locales.ERROR_STORE_NOT_FOUND,
        unique=_ERRORES_UNICOS,
        enum_value=locales.ERROR_INVALID_STORE_STATE,
    )
    return crud_marketing.get_tienda_view(db, id_tienda)


@router.delete("/{id_tienda}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tienda(id_tienda: int, db: Session = Depends(get_db)):
    eliminar(db, TiendaOficial, locales.ERROR_STORE_NOT_FOUND, id_tienda=id_tienda)
