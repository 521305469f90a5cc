# mercado_gaucho/routers/ordenes.py

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import orden as crud_orden
from mercado_gaucho.dependencies import Politica, get_db, requiere
from mercado_gaucho.models.orden import Orden as OrdenModel
from mercado_gaucho.routers.utils import eliminar, get_or_404, validar_rango_fechas
from mercado_gaucho.schemas.orden import Orden, OrdenCompleta, OrdenConDetalles, OrdenCreate, OrdenUpdate
from mercado_gaucho.services import orden as orden_service

router = APIRouter()


@router.get("", response_model=List[Orden])
def list_ordenes(
    id_usuario: Optional[int] = Query(None),
    estado: Optional[str] = Query(None),
    fecha_desde: Optional[date] = Query(None),
    fecha_hasta: Optional[date] = Query(None),
    db: Session = Depends(get_db),
):
    validar_rango_fechas(fecha_desde, fecha_hasta)
    return crud_orden.get_ordenes_view(
        db, id_usuario=id_usuario, estado=estado, fecha_desde=fecha_desde, fecha_hasta=fecha_hasta
    )


@router.get("/{id_orden}", response_model=OrdenCompleta)
def get_orden(id_orden: int, db: Session = Depends(get_db)):
    """Заказ вместе с позициями, отправкой и платежами."""
    return get_or_404(crud_orden.get_orden_view(db, id_orden, completa=True), locales.ERROR_ORDER_NOT_FOUND)


@router.post(
    "",
    response_model=OrdenConDetalles,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(requiere(Politica.AUTENTICADO))],
)
def create_orden(datos: OrdenCreate, db: Session = Depends(get_db)):
    """
    Создание заказа с позициями одной транзакцией.
    Любая ошибка (некорректная позиция, несуществующий товар или пользователь) откатывает всё.
    """
    return orden_service.crear_orden(db, datos)


@router.put("/{id_orden}", response_model=OrdenConDetalles)
def update_orden(id_orden: int, datos: OrdenUpdate, db: Session = Depends(get_db)):
    return orden_service.actualizar_orden(db, id_orden, datos)


@router.delete("/{id_orden}", status_code=status.HTTP_204_NO_CONTENT)
def delete_orden(id_orden: int, db: Session = Depends(get_db)):
    eliminar(db, OrdenModel, locales.ERROR_ORDER_NOT_FOUND, id_orden=id_orden)
