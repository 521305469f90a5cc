# mercado_gaucho/schemas/mensaje.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class MensajeCreate(BaseModel):
    id_emisor: int
    id_receptor: int
    id_producto: Optional[int] = None
    mensaje: str = Field(min_length=1)

    @model_validator(mode='after')
    def emisor_distinto_de_receptor(self):
        if self.id_emisor == self.id_receptor:
            raise ValueError("El emisor y el receptor no pueden ser el mismo usuario.")
        return self


class MensajeRespuesta(BaseModel):
    respuesta: str = Field(min_length=1)


class Mensaje(BaseModel):
    id_mensaje: int
    id_emisor: int
    id_receptor: int
    id_producto: Optional[int] = None
    mensaje: str
    fecha_envio: Optional[datetime] = None
    respuesta: Optional[str] = None
    fecha_respuesta: Optional[datetime] = None
    # Обогащение: отправитель, получатель, товар
    nombre_emisor: Optional[str] = None
    apellido_emisor: Optional[str] = None
    email_emisor: Optional[str] = None
    nombre_receptor: Optional[str] = None
    apellido_receptor: Optional[str] = None
    email_receptor: Optional[str] = None
    nombre_producto: Optional[str] = None
