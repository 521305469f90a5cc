# mercado_gaucho/routers/mensajes.py

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import mensaje as crud_mensaje
from mercado_gaucho.dependencies import Politica, get_db, requiere
from mercado_gaucho.models.mensaje import Mensaje as MensajeModel
from mercado_gaucho.routers.utils import crear, eliminar, get_or_404
from mercado_gaucho.schemas.mensaje import Mensaje, MensajeCreate, MensajeRespuesta

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Mensaje])
def list_mensajes(
    id_emisor: Optional[int] = Query(None),
    id_receptor: Optional[int] = Query(None),
    id_producto: Optional[int] = Query(None),
    respondido: Optional[bool] = Query(None),
    db: Session = Depends(get_db),
):
    return crud_mensaje.get_mensajes_view(
        db, id_emisor=id_emisor, id_receptor=id_receptor, id_producto=id_producto, respondido=respondido
    )


@router.get("/{id_mensaje}", response_model=Mensaje)
def get_mensaje(id_mensaje: int, db: Session = Depends(get_db)):
    return get_or_404(crud_mensaje.get_mensaje_view(db, id_mensaje), locales.ERROR_MESSAGE_NOT_FOUND)


@router.post(
    "",
    response_model=Mensaje,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(requiere(Politica.AUTENTICADO))],
)
def create_mensaje(datos: MensajeCreate, db: Session = Depends(get_db)):
    mensaje = crear(db, MensajeModel, datos.model_dump(), referential=locales.ERROR_MESSAGE_REFS)
    return crud_mensaje.get_mensaje_view(db, mensaje.id_mensaje)


@router.put(
    "/{id_mensaje}/respuesta",
    response_model=Mensaje,
    dependencies=[Depends(requiere(Politica.AUTENTICADO))],
)
def responder_mensaje(id_mensaje: int, datos: MensajeRespuesta, db: Session = Depends(get_db)):
    """Ответ записывается один раз: повторный ответ - 409."""
    if not crud_mensaje.responder_mensaje(db, id_mensaje, datos.respuesta):
        if crud_mensaje.get_mensaje(db, id_mensaje) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=locales.ERROR_MESSAGE_NOT_FOUND)
        logger.info(f"Message {id_mensaje} already answered, reply rejected.")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=locales.ERROR_MESSAGE_ALREADY_ANSWERED)
    return crud_mensaje.get_mensaje_view(db, id_mensaje)


@router.delete("/{id_mensaje}", status_code=status.HTTP_204_NO_CONTENT)
def delete_mensaje(id_mensaje: int, db: Session = Depends(get_db)):
    eliminar(db, MensajeModel, locales.ERROR_MESSAGE_NOT_FOUND, id_mensaje=id_mensaje)
