# mercado_gaucho/models/catalogo.py
from sqlalchemy import Column, Integer, String, Text, DateTime, Numeric, ForeignKey, CheckConstraint, func

from mercado_gaucho.db.session import Base
from mercado_gaucho.models.enums import ESTADO_PRODUCTO, db_enum


class Categoria(Base):
    __tablename__ = "categorias"

    id_categoria = Column(Integer, primary_key=True, index=True)
    nombre_categoria = Column(String(100), unique=True, nullable=False)
    descripcion = Column(Text, nullable=True)


class Producto(Base):
    __tablename__ = "productos"

    id_producto = Column(Integer, primary_key=True, index=True)
    # Продавец. Удаление пользователя с товарами запрещено (RESTRICT)
    id_usuario = Column(Integer, ForeignKey("usuarios.id_usuario"), nullable=False, index=True)
    id_categoria = Column(Integer, ForeignKey("categorias.id_categoria"), nullable=False, index=True)
    titulo = Column(String(255), nullable=False)
    descripcion = Column(Text, nullable=True)
    precio = Column(Numeric(12, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    estado = Column(db_enum(ESTADO_PRODUCTO, "estado_producto_enum"), nullable=False)
    fecha_publicacion = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        CheckConstraint("precio >= 0", name="ck_productos_precio"),
        CheckConstraint("stock >= 0", name="ck_productos_stock"),
    )


class ImagenProducto(Base):
    __tablename__ = "imagenes_producto"

    id_imagen = Column(Integer, primary_key=True, index=True)
    id_producto = Column(Integer, ForeignKey("productos.id_producto", ondelete="CASCADE"), nullable=False, index=True)
    url_imagen = Column(String(500), nullable=False)
    orden = Column(Integer, nullable=True)
