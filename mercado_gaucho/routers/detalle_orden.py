# mercado_gaucho/routers/detalle_orden.py
# Позиции заказа вне потока создания: административная правка

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import orden as crud_orden
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.orden import DetalleOrden as DetalleOrdenModel
from mercado_gaucho.routers.utils import actualizar, campos_a_actualizar, crear, eliminar, get_or_404
from mercado_gaucho.schemas.orden import DetalleOrden, DetalleOrdenCreate, DetalleOrdenUpdate

router = APIRouter()


@router.get("", response_model=List[DetalleOrden])
def list_detalles_orden(id_orden: Optional[int] = Query(None), db: Session = Depends(get_db)):
    return crud_orden.get_detalles_orden_view(db, id_orden=id_orden)


@router.get("/{id_detalle}", response_model=DetalleOrden)
def get_detalle_orden(id_detalle: int, db: Session = Depends(get_db)):
    return get_or_404(crud_orden.get_detalle_orden_view(db, id_detalle), locales.ERROR_ORDER_ITEM_NOT_FOUND)


@router.post("", response_model=DetalleOrden, status_code=status.HTTP_201_CREATED)
def create_detalle_orden(datos: DetalleOrdenCreate, db: Session = Depends(get_db)):
    detalle = crear(db, DetalleOrdenModel, datos.model_dump(), referential=locales.ERROR_ORDER_OR_PRODUCT_NOT_EXISTS)
    return crud_orden.get_detalle_orden_view(db, detalle.id_detalle)


@router.put("/{id_detalle}", response_model=DetalleOrden)
def update_detalle_orden(id_detalle: int, datos: DetalleOrdenUpdate, db: Session = Depends(get_db)):
    campos = campos_a_actualizar(datos)
    actualizar(
        db,
        crud_orden.get_detalle_orden(db, id_detalle),
        campos,
        crud_orden.DETALLE_ORDEN_CAMPOS_ACTUALIZABLES,
        locales.ERROR_ORDER_ITEM_NOT_FOUND,
    )
    return crud_orden.get_detalle_orden_view(db, id_detalle)


@router.delete("/{id_detalle}", status_code=status.HTTP_204_NO_CONTENT)
def delete_detalle_orden(id_detalle: int, db: Session = Depends(get_db)):
    eliminar(db, DetalleOrdenModel, locales.ERROR_ORDER_ITEM_NOT_FOUND, id_detalle=id_detalle)
