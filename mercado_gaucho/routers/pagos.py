# mercado_gaucho/routers/pagos.py

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import orden as crud_orden
from mercado_gaucho.dependencies import Politica, get_db, requiere
from mercado_gaucho.models.orden import Pago as PagoModel
from mercado_gaucho.routers.utils import (
    actualizar, campos_a_actualizar, crear, eliminar, get_or_404, validar_rango_fechas
)
from mercado_gaucho.schemas.orden import Pago, PagoCreate, PagoUpdate

router = APIRouter()


@router.get("", response_model=List[Pago], dependencies=[Depends(requiere(Politica.ADMIN))])
def list_pagos(
    id_orden: Optional[int] = Query(None),
    estado_pago: Optional[str] = Query(None),
    fecha_desde: Optional[date] = Query(None),
    fecha_hasta: Optional[date] = Query(None),
    db: Session = Depends(get_db),
):
    validar_rango_fechas(fecha_desde, fecha_hasta)
    return crud_orden.get_pagos_view(
        db, id_orden=id_orden, estado_pago=estado_pago, fecha_desde=fecha_desde, fecha_hasta=fecha_hasta
    )


@router.get("/{id_pago}", response_model=Pago)
def get_pago(id_pago: int, db: Session = Depends(get_db)):
    return get_or_404(crud_orden.get_pago_view(db, id_pago), locales.ERROR_PAYMENT_NOT_FOUND)


@router.post("", response_model=Pago, status_code=status.HTTP_201_CREATED)
def create_pago(datos: PagoCreate, db: Session = Depends(get_db)):
    # estado_pago и fecha_pago без значения берут значения по умолчанию из модели
    pago = crear(
        db, PagoModel, datos.model_dump(exclude_none=True),
        referential=locales.ERROR_ORDER_NOT_EXISTS,
        enum_value=locales.ERROR_INVALID_PAYMENT_STATE,
    )
    return crud_orden.get_pago_view(db, pago.id_pago)


@router.put("/{id_pago}", response_model=Pago)
def update_pago(id_pago: int, datos: PagoUpdate, db: Session = Depends(get_db)):
    campos = campos_a_actualizar(datos)
    actualizar(
        db,
        crud_orden.get_pago(db, id_pago),
        campos,
        crud_orden.PAGO_CAMPOS_ACTUALIZABLES,
        locales.ERROR_PAYMENT_NOT_FOUND,
        enum_value=locales.ERROR_INVALID_PAYMENT_STATE,
    )
    return crud_orden.get_pago_view(db, id_pago)


@router.delete("/{id_pago}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pago(id_pago: int, db: Session = Depends(get_db)):
    eliminar(db, PagoModel, locales.ERROR_PAYMENT_NOT_FOUND, id_pago=id_pago)
