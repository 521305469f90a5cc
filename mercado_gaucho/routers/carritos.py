# mercado_gaucho/routers/carritos.py

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from mercado_gaucho.core import locales
from mercado_gaucho.crud import carrito as crud_carrito
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.models.carrito import Carrito as CarritoModel
from mercado_gaucho.routers.utils import eliminar, get_or_404
from mercado_gaucho.schemas.carrito import Carrito, CarritoCreate
from mercado_gaucho.services import carrito as carrito_service

router = APIRouter()


@router.get("", response_model=List[Carrito])
def list_carritos(db: Session = Depends(get_db)):
    return crud_carrito.get_carritos_view(db)


@router.get("/usuario/{id_usuario}", response_model=Carrito)
def get_carrito_usuario(id_usuario: int, db: Session = Depends(get_db)):
    return get_or_404(crud_carrito.get_carrito_view_by_usuario(db, id_usuario), locales.ERROR_CART_NOT_FOUND_FOR_USER)


@router.get("/{id_carrito}", response_model=Carrito)
def get_carrito(id_carrito: int, db: Session = Depends(get_db)):
    return get_or_404(crud_carrito.get_carrito_view(db, id_carrito), locales.ERROR_CART_NOT_FOUND)


@router.post("", response_model=Carrito, status_code=status.HTTP_201_CREATED)
def ensure_carrito(datos: CarritoCreate, response: Response, db: Session = Depends(get_db)):
    """
    Возвращает корзину пользователя, создавая её при первом обращении.
    201 - корзина создана сейчас, 200 - уже существовала. Тело одинаковое.
    """
    carrito, creado = carrito_service.asegurar_carrito(db, datos.id_usuario)
    if not creado:
        response.status_code = status.HTTP_200_OK
    return carrito


@router.delete("/usuario/{id_usuario}", status_code=status.HTTP_204_NO_CONTENT)
def delete_carrito_usuario(id_usuario: int, db: Session = Depends(get_db)):
    eliminar(db, CarritoModel, locales.ERROR_CART_NOT_FOUND_FOR_USER, id_usuario=id_usuario)


@router.delete("/{id_carrito}", status_code=status.HTTP_204_NO_CONTENT)
def delete_carrito(id_carrito: int, db: Session = Depends(get_db)):
    eliminar(db, CarritoModel, locales.ERROR_CART_NOT_FOUND, id_carrito=id_carrito)
