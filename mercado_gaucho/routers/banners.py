# mercado_gaucho/routers/banners.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import marketing as crud_marketing
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.marketing import Banner as BannerModel
from mercado_gaucho.routers.utils import (
    actualizar, campos_a_actualizar, crear, eliminar, get_or_404, validar_rango_fechas
)
from mercado_gaucho.schemas.marketing import Banner, BannerCreate, BannerUpdate

router = APIRouter()


@router.get("", response_model=List[Banner])
def list_banners(
    ubicacion: Optional[str] = Query(None),
    activos_ahora: bool = Query(False),
    db: Session = Depends(get_db),
):
    """Сначала более приоритетные."""
    return crud_marketing.get_banners(db, ubicacion=ubicacion, activos_ahora=activos_ahora)


@router.get("/{id_banner}", response_model=Banner)
def get_banner(id_banner: int, db: Session = Depends(get_db)):
    return get_or_404(crud_marketing.get_banner(db, id_banner), locales.ERROR_BANNER_NOT_FOUND)


@router.post("", response_model=Banner, status_code=status.HTTP_201_CREATED)
def create_banner(datos: BannerCreate, db: Session = Depends(get_db)):
    return crear(db, BannerModel, datos.model_dump(exclude_none=True))


@router.put("/{id_banner}", response_model=Banner)
def update_banner(id_banner: int, datos: BannerUpdate, db: Session = Depends(get_db)):
    campos = campos_a_actualizar(datos)
    banner = get_or_404(crud_marketing.get_banner(db, id_banner), locales.ERROR_BANNER_NOT_FOUND)
    validar_rango_fechas(
        campos.get("fecha_inicio", banner.fecha_inicio),
        campos.get("fecha_fin", banner.fecha_fin),
    )
    return actualizar(
        db, banner, campos,
        crud_marketing.BANNER_CAMPOS_ACTUALIZABLES,
        locales.ERROR_BANNER_NOT_FOUND,
    )


@router.delete("/{id_banner}", status_code=status.HTTP_204_NO_CONTENT)
def delete_banner(id_banner: int, db: Session = Depends(get_db)):
    eliminar(db, BannerModel, locales.ERROR_BANNER_NOT_FOUND, id_banner=id_banner)
