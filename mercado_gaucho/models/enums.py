# mercado_gaucho/models/enums.py
"""
Закрытые наборы значений, которые проверяет хранилище.
В PostgreSQL это отдельные типы ENUM, в SQLite SQLAlchemy проверяет значение при биндинге.
"""
from sqlalchemy import Enum

TIPO_USUARIO = ("comprador", "vendedor", "administrador")
TIPO_CUENTA = ("personal", "empresa")
GENERO = ("masculino", "femenino", "otro")
ESTADO_PRODUCTO = ("nuevo", "usado")
ESTADO_ORDEN = ("pendiente", "pagado", "enviado", "entregado", "cancelado")
ESTADO_PAGO = ("pendiente", "completado", "fallido", "reembolsado")
ESTADO_ENVIO = ("preparando", "enviado", "en_transito", "entregado", "devuelto")
ESTADO_TIENDA = ("en_revision", "activa", "suspendida")
TIPO_DESTACADO = ("portada", "categoria", "busqueda")


def db_enum(values, name: str) -> Enum:
    return Enum(*values, name=name, validate_strings=True)
