# mercado_gaucho/crud/catalogo.py
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from mercado_gaucho.crud.base import fetch_all, fetch_one
from mercado_gaucho.models.catalogo import Categoria, Producto, ImagenProducto
from mercado_gaucho.models.usuario import Usuario

CATEGORIA_CAMPOS_ACTUALIZABLES = frozenset({"nombre_categoria", "descripcion"})
PRODUCTO_CAMPOS_ACTUALIZABLES = frozenset(
    {"id_categoria", "titulo", "descripcion", "precio", "stock", "estado"}
)
IMAGEN_CAMPOS_ACTUALIZABLES = frozenset({"url_imagen", "orden"})


# --- Категории ---

def get_categoria(db: Session, id_categoria: int) -> Optional[Categoria]:
    return db.query(Categoria).filter(Categoria.id_categoria == id_categoria).first()


def get_categorias(db: Session) -> List[Categoria]:
    return db.query(Categoria).order_by(Categoria.nombre_categoria).all()


# --- Товары ---

def get_producto(db: Session, id_producto: int) -> Optional[Producto]:
    return db.query(Producto).filter(Producto.id_producto == id_producto).first()


def _producto_view():
    return (
        select(
            *Producto.__table__.c,
            Usuario.nombre.label("vendedor_nombre"),
            Usuario.apellido.label("vendedor_apellido"),
            Usuario.email.label("vendedor_email"),
            Categoria.nombre_categoria,
        )
        .join(Usuario, Usuario.id_usuario == Producto.id_usuario)
        .join(Categoria, Categoria.id_categoria == Producto.id_categoria)
    )


def get_producto_view(db: Session, id_producto: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _producto_view().where(Producto.id_producto == id_producto))


def get_productos_view(
    db: Session,
    id_usuario: Optional[int] = None,
    id_categoria: Optional[int] = None,
    estado: Optional[str] = None,
    precio_min: Optional[Decimal] = None,
    precio_max: Optional[Decimal] = None,
) -> List[Dict[str, Any]]:
    """Список товаров с фильтрами, новые публикации первыми."""
    stmt = _producto_view()
    if id_usuario is not None:
        stmt = stmt.where(Producto.id_usuario == id_usuario)
    if id_categoria is not None:
        stmt = stmt.where(Producto.id_categoria == id_categoria)
    if estado:
        stmt = stmt.where(Producto.estado == estado)
    if precio_min is not None:
        stmt = stmt.where(Producto.precio >= precio_min)
    if precio_max is not None:
        stmt = stmt.where(Producto.precio <= precio_max)
    return fetch_all(db, stmt.order_by(Producto.fecha_publicacion.desc(), Producto.id_producto.desc()))


# --- Изображения товаров ---

def get_imagen(db: Session, id_imagen: int) -> Optional[ImagenProducto]:
    return db.query(ImagenProducto).filter(ImagenProducto.id_imagen == id_imagen).first()


def _imagen_view():
    return (
        select(*ImagenProducto.__table__.c, Producto.titulo.label("nombre_producto"))
        .join(Producto, Producto.id_producto == ImagenProducto.id_producto)
    )


def get_imagen_view(db: Session, id_imagen: int) -> Optional[Dict[str, Any]]:
    return fetch_one(db, _imagen_view().where(ImagenProducto.id_imagen == id_imagen))


def get_imagenes_view(db: Session, id_producto: Optional[int] = None) -> List[Dict[str, Any]]:
    stmt = _imagen_view()
    if id_producto is not None:
        stmt = stmt.where(ImagenProducto.id_producto == id_producto)
    # NULL в "orden" уходит в конец списка
    return fetch_all(
        db,
        stmt.order_by(ImagenProducto.id_producto, ImagenProducto.orden.is_(None), ImagenProducto.orden, ImagenProducto.id_imagen),
    )
