# mercado_gaucho/routers/carrito_detalle.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import carrito as crud_carrito
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.carrito import CarritoDetalle as CarritoDetalleModel
from mercado_gaucho.routers.utils import actualizar, campos_a_actualizar, eliminar, get_or_404
from mercado_gaucho.schemas.carrito import CarritoDetalle, CarritoDetalleCreate, CarritoDetalleUpdate
from mercado_gaucho.services import carrito as carrito_service

router = APIRouter()


@router.get("", response_model=List[CarritoDetalle])
def list_carrito_detalles(id_carrito: Optional[int] = Query(None), db: Session = Depends(get_db)):
    return crud_carrito.get_carrito_detalles_view(db, id_carrito=id_carrito)


@router.get("/{id_detalle}", response_model=CarritoDetalle)
def get_carrito_detalle(id_detalle: int, db: Session = Depends(get_db)):
    return get_or_404(crud_carrito.get_carrito_detalle_view(db, id_detalle), locales.ERROR_CART_ITEM_NOT_FOUND)


@router.post("", response_model=CarritoDetalle)
def add_carrito_detalle(datos: CarritoDetalleCreate, db: Session = Depends(get_db)):
    """Добавление товара; если он уже в корзине, количество суммируется."""
    return carrito_service.agregar_producto(db, datos.id_carrito, datos.id_producto, datos.cantidad)


@router.put("/{id_detalle}", response_model=CarritoDetalle)
def update_carrito_detalle(id_detalle: int, datos: CarritoDetalleUpdate, db: Session = Depends(get_db)):
    """Устанавливает количество (не суммирует)."""
    campos = campos_a_actualizar(datos)
    actualizar(
        db,
        crud_carrito.get_carrito_detalle(db, id_detalle),
        campos,
        crud_carrito.CARRITO_DETALLE_CAMPOS_ACTUALIZABLES,
        locales.ERROR_CART_ITEM_NOT_FOUND,
    )
    return crud_carrito.get_carrito_detalle_view(db, id_detalle)


@router.delete("/{id_detalle}", status_code=status.HTTP_204_NO_CONTENT)
def delete_carrito_detalle(id_detalle: int, db: Session = Depends(get_db)):
    eliminar(db, CarritoDetalleModel, locales.ERROR_CART_ITEM_NOT_FOUND, id_detalle=id_detalle)
