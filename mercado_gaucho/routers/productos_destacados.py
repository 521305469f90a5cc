# mercado_gaucho/routers/productos_destacados.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.core.errors import translate_db_errors
from mercado_gaucho.crud import marketing as crud_marketing
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.marketing import ProductoDestacado
from mercado_gaucho.routers.utils import (
    actualizar, campos_a_actualizar, eliminar, get_or_404, validar_rango_fechas
)
from mercado_gaucho.schemas.marketing import Destacado, DestacadoCreate, DestacadoUpdate

router = APIRouter()


@router.get("", response_model=List[Destacado])
def list_destacados(
    tipo_destacado: Optional[str] = Query(None),
    activos_ahora: bool = Query(False),
    db: Session = Depends(get_db),
):
    return crud_marketing.get_destacados_view(db, tipo_destacado=tipo_destacado, activos_ahora=activos_ahora)


@router.get("/producto/{id_producto}", response_model=Destacado)
def get_destacado_producto(id_producto: int, db: Session = Depends(get_db)):
    return get_or_404(
        crud_marketing.get_destacado_view_by_producto(db, id_producto),
        locales.ERROR_FEATURED_NOT_FOUND_FOR_PRODUCT,
    )


@router.get("/{id_destacado}", response_model=Destacado)
def get_destacado(id_destacado: int, db: Session = Depends(get_db)):
    return get_or_404(crud_marketing.get_destacado_view(db, id_destacado), locales.ERROR_FEATURED_NOT_FOUND)


@router.post("", response_model=Destacado)
def upsert_destacado(datos: DestacadoCreate, db: Session = Depends(get_db)):
    """Выделяет товар; если он уже выделен, тип и период перезаписываются."""
    with translate_db_errors(
        db,
        referential=locales.ERROR_PRODUCT_NOT_EXISTS,
        enum_value=locales.ERROR_INVALID_FEATURED_TYPE,
    ):
        id_destacado = crud_marketing.upsert_destacado(db, datos.model_dump())
    return crud_marketing.get_destacado_view(db, id_destacado)


@router.put("/{id_destacado}", response_model=Destacado)
def update_destacado(id_destacado: int, datos: DestacadoUpdate, db: Session = Depends(get_db)):
    campos = campos_a_actualizar(datos)
    destacado = get_or_404(crud_marketing.get_destacado(db, id_destacado), locales.ERROR_FEATURED_NOT_FOUND)
    validar_rango_fechas(
        campos.get("fecha_inicio", destacado.fecha_inicio),
        campos.get("fecha_fin", destacado.fecha_fin),
    )
    actualizar(
        db, destacado, campos,
        crud_marketing.DESTACADO_CAMPOS_ACTUALIZABLES,
        locales.ERROR_FEATURED_NOT_FOUND,
        enum_value=locales.ERROR_INVALID_FEATURED_TYPE,
    )
    return crud_marketing.get_destacado_view(db, id_destacado)


@router.delete("/producto/{id_producto}", status_code=status.HTTP_204_NO_CONTENT)
def delete_destacado_producto(id_producto: int, db: Session = Depends(get_db)):
    eliminar(db, ProductoDestacado, locales.ERROR_FEATURED_NOT_FOUND_FOR_PRODUCT, id_producto=id_producto)


@router.delete("/{id_destacado}", status_code=status.HTTP_204_NO_CONTENT)
def delete_destacado(id_destacado: int, db: Session = Depends(get_db)):
    eliminar(db, ProductoDestacado, locales.ERROR_FEATURED_NOT_FOUND, id_destacado=id_destacado)
