# mercado_gaucho/schemas/common.py
from datetime import date, datetime, timezone
from typing import Optional

from pydantic import BaseModel


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Наивное время считаем UTC, aware-время приводим к UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def check_date_range(inicio: Optional[date], fin: Optional[date]) -> None:
    if inicio is not None and fin is not None and fin < inicio:
        raise ValueError("fecha_fin no puede ser anterior a fecha_inicio.")


# Поля обогащения данными пользователя (JOIN с usuarios)
class UsuarioInfo(BaseModel):
    nombre_usuario: Optional[str] = None
    apellido_usuario: Optional[str] = None
    email_usuario: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
