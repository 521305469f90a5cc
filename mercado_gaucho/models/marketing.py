# mercado_gaucho/models/marketing.py
from sqlalchemy import (
    Boolean, Column, Integer, String, Text, Date, DateTime, ForeignKey, CheckConstraint, func, true
)

from mercado_gaucho.db.session import Base
from mercado_gaucho.models.enums import ESTADO_TIENDA, TIPO_DESTACADO, db_enum


class Promocion(Base):
    __tablename__ = "promociones"

    id_promocion = Column(Integer, primary_key=True, index=True)
    titulo = Column(String(255), nullable=False)
    descripcion = Column(Text, nullable=True)
    descuento_porcentaje = Column(Integer, nullable=True)
    fecha_inicio = Column(Date, nullable=True)
    fecha_fin = Column(Date, nullable=True)
    condiciones = Column(Text, nullable=True)
    codigo_promocion = Column(String(50), unique=True, nullable=True)
    activo = Column(Boolean, nullable=False, default=True, server_default=true())

    __table_args__ = (
        CheckConstraint(
            "descuento_porcentaje IS NULL OR (descuento_porcentaje >= 0 AND descuento_porcentaje <= 100)",
            name="ck_promociones_descuento",
        ),
    )


class ProductoPromocionado(Base):
    """Связь многие-ко-многим товар <-> акция."""
    __tablename__ = "productos_promocionados"

    id_producto = Column(Integer, ForeignKey("productos.id_producto", ondelete="CASCADE"), primary_key=True)
    id_promocion = Column(Integer, ForeignKey("promociones.id_promocion", ondelete="CASCADE"), primary_key=True)


class ProductoDestacado(Base):
    __tablename__ = "productos_destacados"

    id_destacado = Column(Integer, primary_key=True, index=True)
    # Товар может быть выделен только один раз
    id_producto = Column(Integer, ForeignKey("productos.id_producto", ondelete="CASCADE"), unique=True, nullable=False)
    tipo_destacado = Column(db_enum(TIPO_DESTACADO, "tipo_destacado_enum"), nullable=True)
    fecha_inicio = Column(Date, nullable=True)
    fecha_fin = Column(Date, nullable=True)


class Banner(Base):
    __tablename__ = "banners"

    id_banner = Column(Integer, primary_key=True, index=True)
    titulo = Column(String(255), nullable=False)
    descripcion = Column(Text, nullable=True)
    imagen_url = Column(String(500), nullable=False)
    enlace_url = Column(String(500), nullable=True)
    fecha_inicio = Column(Date, nullable=True)
    fecha_fin = Column(Date, nullable=True)
    prioridad = Column(Integer, nullable=False, default=0)
    ubicacion = Column(String(100), nullable=True)


class TiendaOficial(Base):
    __tablename__ = "tiendas_oficiales"

    id_tienda = Column(Integer, primary_key=True, index=True)
    id_usuario = Column(Integer, ForeignKey("usuarios.id_usuario", ondelete="CASCADE"), unique=True, nullable=False)
    nombre_tienda = Column(String(150), unique=True, nullable=False)
    logo_url = Column(String(500), nullable=True)
    descripcion = Column(Text, nullable=True)
    estado = Column(db_enum(ESTADO_TIENDA, "estado_tienda_enum"), nullable=False, default="en_revision")
    fecha_creacion = Column(DateTime(timezone=True), server_default=func.now())
