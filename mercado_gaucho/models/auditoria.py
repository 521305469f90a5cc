# mercado_gaucho/models/auditoria.py
from sqlalchemy import Boolean, Column, Integer, String, Text, DateTime, ForeignKey, func

from mercado_gaucho.db.session import Base


class InicioSesion(Base):
    """Журнал попыток входа. Только добавление записей."""
    __tablename__ = "inicios_sesion"

    id_sesion = Column(Integer, primary_key=True, index=True)
    # NULL для неудачной попытки с неизвестным пользователем
    id_usuario = Column(Integer, ForeignKey("usuarios.id_usuario", ondelete="SET NULL"), nullable=True, index=True)
    fecha_inicio = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    ip_origen = Column(String(45), nullable=True)
    dispositivo = Column(String(255), nullable=True)
    navegador = Column(String(255), nullable=True)
    exito = Column(Boolean, nullable=False)


class LogActividad(Base):
    """Журнал действий пользователей. Только добавление записей."""
    __tablename__ = "logs_actividad"

    id_log = Column(Integer, primary_key=True, index=True)
    id_usuario = Column(Integer, ForeignKey("usuarios.id_usuario", ondelete="SET NULL"), nullable=True, index=True)
    accion = Column(String(255), nullable=False)
    fecha = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    descripcion = Column(Text, nullable=True)


class TokenAutenticacion(Base):
    __tablename__ = "tokens_autenticacion"

    id_token = Column(Integer, primary_key=True, index=True)
    id_usuario = Column(Integer, ForeignKey("usuarios.id_usuario", ondelete="CASCADE"), nullable=False, index=True)
    token = Column(String(64), unique=True, nullable=False)
    creado_en = Column(DateTime(timezone=True), server_default=func.now())
    expiracion = Column(DateTime(timezone=True), nullable=False)
    ip_origen = Column(String(45), nullable=True)
