# mercado_gaucho/models/mensaje.py
from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, CheckConstraint, func

from mercado_gaucho.db.session import Base


class Mensaje(Base):
    __tablename__ = "mensajes"

    id_mensaje = Column(Integer, primary_key=True, index=True)
    id_emisor = Column(Integer, ForeignKey("usuarios.id_usuario", ondelete="CASCADE"), nullable=False, index=True)
    id_receptor = Column(Integer, ForeignKey("usuarios.id_usuario", ondelete="CASCADE"), nullable=False, index=True)
    # Вопрос по товару или личное сообщение (NULL)
    id_producto = Column(Integer, ForeignKey("productos.id_producto", ondelete="SET NULL"), nullable=True)
    mensaje = Column(Text, nullable=False)
    fecha_envio = Column(DateTime(timezone=True), server_default=func.now())
    respuesta = Column(Text, nullable=True)
    fecha_respuesta = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (CheckConstraint("id_emisor <> id_receptor", name="ck_mensajes_emisor_receptor"),)
