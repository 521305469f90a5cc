# mercado_gaucho/routers/productos_promocionados.py
# Связь товар <-> акция: ключ - пара (id_producto, id_promocion)

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import marketing as crud_marketing
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.marketing import ProductoPromocionado as ProductoPromocionadoModel
from mercado_gaucho.routers.utils import crear, eliminar
from mercado_gaucho.schemas.marketing import ProductoPromocionado, ProductoPromocionadoKey

router = APIRouter()


@router.get("", response_model=List[ProductoPromocionado])
def list_productos_promocionados(
    id_producto: Optional[int] = Query(None),
    id_promocion: Optional[int] = Query(None),
    db: Session = Depends(get_db),
):
    return crud_marketing.get_productos_promocionados_view(db, id_producto=id_producto, id_promocion=id_promocion)


@router.get("/producto/{id_producto}", response_model=List[ProductoPromocionado])
def list_promociones_de_producto(id_producto: int, db: Session = Depends(get_db)):
    return crud_marketing.get_productos_promocionados_view(db, id_producto=id_producto)


@router.get("/promocion/{id_promocion}", response_model=List[ProductoPromocionado])
def list_productos_de_promocion(id_promocion: int, db: Session = Depends(get_db)):
    return crud_marketing.get_productos_promocionados_view(db, id_promocion=id_promocion)


@router.post("", response_model=ProductoPromocionado, status_code=status.HTTP_201_CREATED)
def create_producto_promocionado(datos: ProductoPromocionadoKey, db: Session = Depends(get_db)):
    crear(
        db, ProductoPromocionadoModel, datos.model_dump(),
        referential=locales.ERROR_PRODUCT_OR_PROMOTION_NOT_EXISTS,
        unique=locales.ERROR_PROMOTED_EXISTS,
    )
    return crud_marketing.get_producto_promocionado_view(db, datos.id_producto, datos.id_promocion)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_producto_promocionado(datos: ProductoPromocionadoKey = Body(...), db: Session = Depends(get_db)):
    eliminar(
        db, ProductoPromocionadoModel, locales.ERROR_PROMOTED_NOT_FOUND,
        id_producto=datos.id_producto, id_promocion=datos.id_promocion,
    )
