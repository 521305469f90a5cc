# mercado_gaucho/routers/inicios_sesion.py
# Журнал входов: только чтение и добавление

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import auditoria as crud_auditoria
from mercado_gaucho.dependencies import Politica, get_db, requiere
from mercado_gaucho.models.auditoria import InicioSesion as InicioSesionModel
from mercado_gaucho.routers.utils import crear, get_or_404, validar_rango_fechas
from mercado_gaucho.schemas.auditoria import InicioSesion, InicioSesionCreate

router = APIRouter()


@router.get("", response_model=List[InicioSesion], dependencies=[Depends(requiere(Politica.ADMIN))])
def list_inicios_sesion(
    id_usuario: Optional[int] = Query(None),
    exito: Optional[bool] = Query(None),
    fecha_desde: Optional[date] = Query(None),
    fecha_hasta: Optional[date] = Query(None),
    db: Session = Depends(get_db),
):
    validar_rango_fechas(fecha_desde, fecha_hasta)
    return crud_auditoria.get_inicios_sesion_view(
        db, id_usuario=id_usuario, exito=exito, fecha_desde=fecha_desde, fecha_hasta=fecha_hasta
    )


@router.get("/{id_sesion}", response_model=InicioSesion, dependencies=[Depends(requiere(Politica.ADMIN))])
def get_inicio_sesion(id_sesion: int, db: Session = Depends(get_db)):
    return get_or_404(crud_auditoria.get_inicio_sesion_view(db, id_sesion), locales.ERROR_LOGIN_RECORD_NOT_FOUND)


@router.post("", response_model=InicioSesion, status_code=status.HTTP_201_CREATED)
def create_inicio_sesion(datos: InicioSesionCreate, request: Request, db: Session = Depends(get_db)):
    valores = datos.model_dump(exclude_none=True)
    if "ip_origen" not in valores and request.client:
        valores["ip_origen"] = request.client.host
    registro = crear(db, InicioSesionModel, valores, referential=locales.ERROR_USER_NOT_EXISTS)
    return crud_auditoria.get_inicio_sesion_view(db, registro.id_sesion)


# --- Изменение и удаление запрещены, хранилище не затрагивается ---

@router.put("/{id_sesion}", include_in_schema=False)
def update_inicio_sesion(id_sesion: str):
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail=locales.ERROR_METHOD_NOT_ALLOWED_LOGIN.format(method="PUT"),
        headers={"Allow": "GET"},
    )


@router.delete("/{id_sesion}", include_in_schema=False)
def delete_inicio_sesion(id_sesion: str):
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail=locales.ERROR_METHOD_NOT_ALLOWED_LOGIN.format(method="DELETE"),
        headers={"Allow": "GET"},
    )
