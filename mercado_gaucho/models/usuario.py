# mercado_gaucho/models/usuario.py
from sqlalchemy import Column, Integer, String, DateTime, Date, Numeric, ForeignKey, func

from mercado_gaucho.db.session import Base
from mercado_gaucho.models.enums import TIPO_USUARIO, TIPO_CUENTA, GENERO, db_enum


class Usuario(Base):
    __tablename__ = "usuarios"

    id_usuario = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(100), nullable=False)
    apellido = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    telefono = Column(String(30), nullable=True)
    # Только bcrypt-хеш, исходный пароль нигде не сохраняется
    contrasena_hash = Column(String(255), nullable=False)
    tipo_usuario = Column(db_enum(TIPO_USUARIO, "tipo_usuario_enum"), nullable=False, default="comprador")
    tipo_cuenta = Column(db_enum(TIPO_CUENTA, "tipo_cuenta_enum"), nullable=False, default="personal")
    fecha_creacion = Column(DateTime(timezone=True), server_default=func.now())


class CuentaPersonal(Base):
    __tablename__ = "cuentas_personales"

    id_usuario = Column(Integer, ForeignKey("usuarios.id_usuario", ondelete="CASCADE"), primary_key=True)
    dni = Column(String(20), nullable=True)
    fecha_nacimiento = Column(Date, nullable=True)
    genero = Column(db_enum(GENERO, "genero_enum"), nullable=True)


class CuentaEmpresa(Base):
    __tablename__ = "cuentas_empresa"

    id_usuario = Column(Integer, ForeignKey("usuarios.id_usuario", ondelete="CASCADE"), primary_key=True)
    ruc = Column(String(20), nullable=False)
    razon_social = Column(String(255), nullable=False)
    nombre_contacto = Column(String(200), nullable=True)
    telefono_contacto = Column(String(30), nullable=True)
    direccion_fiscal = Column(String(255), nullable=True)


class Direccion(Base):
    __tablename__ = "direcciones"

    id_direccion = Column(Integer, primary_key=True, index=True)
    id_usuario = Column(Integer, ForeignKey("usuarios.id_usuario", ondelete="CASCADE"), nullable=False, index=True)
    direccion = Column(String(255), nullable=False)
    ciudad = Column(String(100), nullable=False)
    departamento = Column(String(100), nullable=True)
    codigo_postal = Column(String(20), nullable=True)
    pais = Column(String(100), nullable=False)


class UbicacionUsuario(Base):
    __tablename__ = "ubicaciones_usuario"

    id_ubicacion = Column(Integer, primary_key=True, index=True)
    id_usuario = Column(Integer, ForeignKey("usuarios.id_usuario", ondelete="CASCADE"), nullable=False, index=True)
    ciudad = Column(String(100), nullable=True)
    departamento = Column(String(100), nullable=True)
    pais = Column(String(100), nullable=True)
    latitud = Column(Numeric(9, 6), nullable=True)
    longitud = Column(Numeric(9, 6), nullable=True)
    fecha_seleccion = Column(DateTime(timezone=True), server_default=func.now())
