# mercado_gaucho/models/carrito.py
from sqlalchemy import Column, Integer, DateTime, ForeignKey, CheckConstraint, func
from sqlalchemy.schema import UniqueConstraint

from mercado_gaucho.db.session import Base


class Carrito(Base):
    __tablename__ = "carritos"

    id_carrito = Column(Integer, primary_key=True, index=True)
    # Не больше одной корзины на пользователя, гарантирует хранилище
    id_usuario = Column(Integer, ForeignKey("usuarios.id_usuario", ondelete="CASCADE"), unique=True, nullable=False)
    fecha_creacion = Column(DateTime(timezone=True), server_default=func.now())


class CarritoDetalle(Base):
    __tablename__ = "carrito_detalle"

    id_detalle = Column(Integer, primary_key=True, index=True)
    id_carrito = Column(Integer, ForeignKey("carritos.id_carrito", ondelete="CASCADE"), nullable=False)
    id_producto = Column(Integer, ForeignKey("productos.id_producto", ondelete="CASCADE"), nullable=False)
    cantidad = Column(Integer, nullable=False, default=1)

    # Пара (корзина, товар) уникальна: повторное добавление суммирует количество
    __table_args__ = (
        UniqueConstraint('id_carrito', 'id_producto', name='uq_carrito_detalle_carrito_producto'),
        CheckConstraint('cantidad > 0', name='ck_carrito_detalle_cantidad'),
    )
