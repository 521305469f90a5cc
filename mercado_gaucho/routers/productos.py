# mercado_gaucho/routers/productos.py

from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import catalogo as crud_catalogo
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.catalogo import Producto as ProductoModel
from mercado_gaucho.routers.utils import actualizar, campos_a_actualizar, crear, eliminar, get_or_404
from mercado_gaucho.schemas.catalogo import Producto, ProductoCreate, ProductoUpdate

router = APIRouter()


@router.get("", response_model=List[Producto])
def list_productos(
    id_usuario: Optional[int] = Query(None, description="Filtrar por vendedor"),
    id_categoria: Optional[int] = Query(None),
    estado: Optional[str] = Query(None),
    precio_min: Optional[Decimal] = Query(None, ge=0),
    precio_max: Optional[Decimal] = Query(None, ge=0),
    db: Session = Depends(get_db),
):
    """Каталог с фильтрами, сначала новые публикации."""
    return crud_catalogo.get_productos_view(
        db,
        id_usuario=id_usuario,
        id_categoria=id_categoria,
        estado=estado,
        precio_min=precio_min,
        precio_max=precio_max,
    )


@router.get("/{id_producto}", response_model=Producto)
def get_producto(id_producto: int, db: Session = Depends(get_db)):
    return get_or_404(crud_catalogo.get_producto_view(db, id_producto), locales.ERROR_PRODUCT_NOT_FOUND)


@router.post("", response_model=Producto, status_code=status.HTTP_201_CREATED)
def create_producto(datos: ProductoCreate, db: Session = Depends(get_db)):
    producto = crear(
        db, ProductoModel, datos.model_dump(exclude_none=True),
        referential=locales.ERROR_PRODUCT_REFS,
        enum_value=locales.ERROR_INVALID_PRODUCT_STATE,
    )
    return crud_catalogo.get_producto_view(db, producto.id_producto)


@router.put("/{id_producto}", response_model=Producto)
def update_producto(id_producto: int, datos: ProductoUpdate, db: Session = Depends(get_db)):
    campos = campos_a_actualizar(datos)
    actualizar(
        db,
        crud_catalogo.get_producto(db, id_producto),
        campos,
        crud_catalogo.PRODUCTO_CAMPOS_ACTUALIZABLES,
        locales.ERROR_PRODUCT_NOT_FOUND,
        referential=locales.ERROR_PRODUCT_REFS,
        enum_value=locales.ERROR_INVALID_PRODUCT_STATE,
    )
    return crud_catalogo.get_producto_view(db, id_producto)


@router.delete("/{id_producto}", status_code=status.HTTP_204_NO_CONTENT)
def delete_producto(id_producto: int, db: Session = Depends(get_db)):
    eliminar(
        db, ProductoModel, locales.ERROR_PRODUCT_NOT_FOUND,
        referenciado=locales.ERROR_PRODUCT_IN_USE, id_producto=id_producto,
    )
