# mercado_gaucho/routers/logs_actividad.py
# Журнал действий: только чтение и добавление

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import auditoria as crud_auditoria
from mercado_gaucho.dependencies import Politica, get_db, requiere
from mercado_gaucho.models.auditoria import LogActividad as LogActividadModel
from mercado_gaucho.routers.utils import crear, get_or_404, validar_rango_fechas
from mercado_gaucho.schemas.auditoria import LogActividad, LogActividadCreate

router = APIRouter()


@router.get("", response_model=List[LogActividad], dependencies=[Depends(requiere(Politica.ADMIN))])
def list_logs_actividad(
    id_usuario: Optional[int] = Query(None),
    accion: Optional[str] = Query(None, description="Búsqueda parcial por acción"),
    fecha_desde: Optional[date] = Query(None),
    fecha_hasta: Optional[date] = Query(None),
    db: Session = Depends(get_db),
):
    validar_rango_fechas(fecha_desde, fecha_hasta)
    return crud_auditoria.get_logs_actividad_view(
        db, id_usuario=id_usuario, accion=accion, fecha_desde=fecha_desde, fecha_hasta=fecha_hasta
    )


@router.get("/{id_log}", response_model=LogActividad, dependencies=[Depends(requiere(Politica.ADMIN))])
def get_log_actividad(id_log: int, db: Session = Depends(get_db)):
    return get_or_404(crud_auditoria.get_log_actividad_view(db, id_log), locales.ERROR_ACTIVITY_LOG_NOT_FOUND)


@router.post("", response_model=LogActividad, status_code=status.HTTP_201_CREATED)
def create_log_actividad(datos: LogActividadCreate, db: Session = Depends(get_db)):
    log = crear(db, LogActividadModel, datos.model_dump(exclude_none=True), referential=locales.ERROR_USER_NOT_EXISTS)
    return crud_auditoria.get_log_actividad_view(db, log.id_log)


# --- Логи неизменяемы ---

@router.put("/{id_log}", include_in_schema=False)
def update_log_actividad(id_log: str):
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail=locales.ERROR_METHOD_NOT_ALLOWED_LOG.format(method="PUT"),
        headers={"Allow": "GET"},
    )


@router.delete("/{id_log}", include_in_schema=False)
def delete_log_actividad(id_log: str):
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail=locales.ERROR_METHOD_NOT_ALLOWED_LOG.format(method="DELETE"),
        headers={"Allow": "GET"},
    )
