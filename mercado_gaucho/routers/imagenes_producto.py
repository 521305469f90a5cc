# mercado_gaucho/routers/imagenes_producto.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import catalogo as crud_catalogo
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.catalogo import ImagenProducto
from mercado_gaucho.routers.utils import actualizar, campos_a_actualizar, crear, eliminar, get_or_404
from mercado_gaucho.schemas.catalogo import Imagen, ImagenCreate, ImagenUpdate

router = APIRouter()


@router.get("", response_model=List[Imagen])
def list_imagenes(id_producto: Optional[int] = Query(None), db: Session = Depends(get_db)):
    return crud_catalogo.get_imagenes_view(db, id_producto=id_producto)


@router.get("/{id_imagen}", response_model=Imagen)
def get_imagen(id_imagen: int, db: Session = Depends(get_db)):
    return get_or_404(crud_catalogo.get_imagen_view(db, id_imagen), locales.ERROR_IMAGE_NOT_FOUND)


@router.post("", response_model=Imagen, status_code=status.HTTP_201_CREATED)
def create_imagen(datos: ImagenCreate, db: Session = Depends(get_db)):
    imagen = crear(db, ImagenProducto, datos.model_dump(exclude_none=True), referential=locales.ERROR_PRODUCT_NOT_EXISTS)
    return crud_catalogo.get_imagen_view(db, imagen.id_imagen)


@router.put("/{id_imagen}", response_model=Imagen)
def update_imagen(id_imagen: int, datos: ImagenUpdate, db: Session = Depends(get_db)):
    campos = campos_a_actualizar(datos)
    actualizar(
        db,
        crud_catalogo.get_imagen(db, id_imagen),
        campos,
        crud_catalogo.IMAGEN_CAMPOS_ACTUALIZABLES,
        locales.ERROR_IMAGE_NOT_FOUND,
    )
    return crud_catalogo.get_imagen_view(db, id_imagen)


@router.delete("/{id_imagen}", status_code=status.HTTP_204_NO_CONTENT)
def delete_imagen(id_imagen: int, db: Session = Depends(get_db)):
    eliminar(db, ImagenProducto, locales.ERROR_IMAGE_NOT_FOUND, id_imagen=id_imagen)
