# mercado_gaucho/routers/categorias.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import catalogo as crud_catalogo
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.catalogo import Categoria as CategoriaModel
from mercado_gaucho.routers.utils import actualizar, campos_a_actualizar, crear, eliminar, get_or_404
from mercado_gaucho.schemas.catalogo import Categoria, CategoriaCreate, CategoriaUpdate

router = APIRouter()


@router.get("", response_model=List[Categoria])
def list_categorias(db: Session = Depends(get_db)):
    return crud_catalogo.get_categorias(db)


@router.get("/{id_categoria}", response_model=Categoria)
def get_categoria(id_categoria: int, db: Session = Depends(get_db)):
    return get_or_404(crud_catalogo.get_categoria(db, id_categoria), locales.ERROR_CATEGORY_NOT_FOUND)


@router.post("", response_model=Categoria, status_code=status.HTTP_201_CREATED)
def create_categoria(datos: CategoriaCreate, db: Session = Depends(get_db)):
    return crear(db, CategoriaModel, datos.model_dump(), unique=locales.ERROR_CATEGORY_EXISTS)


@router.put("/{id_categoria}", response_model=Categoria)
def update_categoria(id_categoria: int, datos: CategoriaUpdate, db: Session = Depends(get_db)):
    campos = campos_a_actualizar(datos)
    return actualizar(
        db,
        crud_catalogo.get_categoria(db, id_categoria),
        campos,
        crud_catalogo.CATEGORIA_CAMPOS_ACTUALIZABLES,
        locales.ERROR_CATEGORY_NOT_FOUND,
        unique=locales.ERROR_CATEGORY_EXISTS,
    )


@router.delete("/{id_categoria}", status_code=status.HTTP_204_NO_CONTENT)
def delete_categoria(id_categoria: int, db: Session = Depends(get_db)):
    eliminar(
        db, CategoriaModel, locales.ERROR_CATEGORY_NOT_FOUND,
        referenciado=locales.ERROR_CATEGORY_IN_USE, id_categoria=id_categoria,
    )
