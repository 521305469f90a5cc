# mercado_gaucho/routers/promociones.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import marketing as crud_marketing
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.marketing import Promocion as PromocionModel
from mercado_gaucho.routers.utils import (
    actualizar, campos_a_actualizar, crear, eliminar, get_or_404, validar_rango_fechas
)
from mercado_gaucho.schemas.marketing import Promocion, PromocionCreate, PromocionUpdate

router = APIRouter()


@router.get("", response_model=List[Promocion])
def list_promociones(
    activo: Optional[bool] = Query(None),
    codigo_promocion: Optional[str] = Query(None),
    vigentes_ahora: bool = Query(False, description="Solo promociones activas dentro de su período"),
    db: Session = Depends(get_db),
):
    return crud_marketing.get_promociones(
        db, activo=activo, codigo_promocion=codigo_promocion, vigentes_ahora=vigentes_ahora
    )


@router.get("/codigo/{codigo}", response_model=Promocion)
def get_promocion_codigo(codigo: str, db: Session = Depends(get_db)):
    return get_or_404(crud_marketing.get_promocion_by_codigo(db, codigo), locales.ERROR_PROMOTION_CODE_NOT_FOUND)


@router.get("/{id_promocion}", response_model=Promocion)
def get_promocion(id_promocion: int, db: Session = Depends(get_db)):
    return get_or_404(crud_marketing.get_promocion(db, id_promocion), locales.ERROR_PROMOTION_NOT_FOUND)


@router.post("", response_model=Promocion, status_code=status.HTTP_201_CREATED)
def create_promocion(datos: PromocionCreate, db: Session = Depends(get_db)):
    return crear(
        db, PromocionModel, datos.model_dump(exclude_none=True),
        unique=locales.ERROR_PROMOTION_CODE_EXISTS,
    )


@router.put("/{id_promocion}", response_model=Promocion)
def update_promocion(id_promocion: int, datos: PromocionUpdate, db: Session = Depends(get_db)):
    campos = campos_a_actualizar(datos)
    promocion = get_or_404(crud_marketing.get_promocion(db, id_promocion), locales.ERROR_PROMOTION_NOT_FOUND)
    # Период проверяем с учётом уже сохранённой границы
    validar_rango_fechas(
        campos.get("fecha_inicio", promocion.fecha_inicio),
        campos.get("fecha_fin", promocion.fecha_fin),
    )
    return actualizar(
        db, promocion, campos,
        crud_marketing.PROMOCION_CAMPOS_ACTUALIZABLES,
        locales.ERROR_PROMOTION_NOT_FOUND,
        unique=locales.ERROR_PROMOTION_CODE_EXISTS,
    )


@router.delete("/{id_promocion}", status_code=status.HTTP_204_NO_CONTENT)
def delete_promocion(id_promocion: int, db: Session = Depends(get_db)):
    eliminar(db, PromocionModel, locales.ERROR_PROMOTION_NOT_FOUND, id_promocion=id_promocion)
