# mercado_gaucho/routers/envios.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import orden as crud_orden
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.orden import Envio as EnvioModel
from mercado_gaucho.routers.utils import actualizar, campos_a_actualizar, crear, eliminar, get_or_404
from mercado_gaucho.schemas.orden import Envio, EnvioCreate, EnvioUpdate

router = APIRouter()


@router.get("", response_model=List[Envio])
def list_envios(estado_envio: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return crud_orden.get_envios_view(db, estado_envio=estado_envio)


@router.get("/orden/{id_orden}", response_model=Envio)
def get_envio_orden(id_orden: int, db: Session = Depends(get_db)):
    return get_or_404(crud_orden.get_envio_view_by_orden(db, id_orden), locales.ERROR_SHIPMENT_NOT_FOUND_FOR_ORDER)


@router.get("/{id_envio}", response_model=Envio)
def get_envio(id_envio: int, db: Session = Depends(get_db)):
    return get_or_404(crud_orden.get_envio_view(db, id_envio), locales.ERROR_SHIPMENT_NOT_FOUND)


@router.post("", response_model=Envio, status_code=status.HTTP_201_CREATED)
def create_envio(datos: EnvioCreate, db: Session = Depends(get_db)):
    """Одна отправка на заказ: повторная - 409."""
    envio = crear(
        db, EnvioModel, datos.model_dump(exclude_none=True),
        referential=locales.ERROR_ORDER_NOT_EXISTS,
        unique=locales.ERROR_SHIPMENT_EXISTS,
        enum_value=locales.ERROR_INVALID_SHIPMENT_STATE,
    )
    return crud_orden.get_envio_view(db, envio.id_envio)


@router.put("/{id_envio}", response_model=Envio)
def update_envio(id_envio: int, datos: EnvioUpdate, db: Session = Depends(get_db)):
    campos = campos_a_actualizar(datos)
    actualizar(
        db,
        crud_orden.get_envio(db, id_envio),
        campos,
        crud_orden.ENVIO_CAMPOS_ACTUALIZABLES,
        locales.ERROR_SHIPMENT_NOT_FOUND,
        enum_value=locales.ERROR_INVALID_SHIPMENT_STATE,
    )
    return crud_orden.get_envio_view(db, id_envio)


@router.delete("/{id_envio}", status_code=status.HTTP_204_NO_CONTENT)
def delete_envio(id_envio: int, db: Session = Depends(get_db)):
    eliminar(db, EnvioModel, locales.ERROR_SHIPMENT_NOT_FOUND, id_envio=id_envio)
