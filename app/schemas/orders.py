"""
Schemas para pedidos.
"""
from pydantic import BaseModel, BeforeValidator, Field
from typing import Annotated, Optional
from datetime import datetime


def parse_iso_datetime(value):
    """
    Fecha y hora ISO-8601, ej. 2025-02-14T10:30:00.

    - Rechaza números (epoch) y fechas sin hora
    - Si trae zona horaria se convierte a hora local sin zona
    """
    if isinstance(value, str):
        if "T" not in value:
            raise ValueError("Se espera fecha y hora ISO-8601 (AAAA-MM-DDTHH:MM:SS)")
        value = datetime.fromisoformat(value)
    if not isinstance(value, datetime):
        raise ValueError("Se espera fecha y hora ISO-8601 (AAAA-MM-DDTHH:MM:SS)")
    if value.tzinfo is not None:
        value = value.astimezone().replace(tzinfo=None)
    return value


IsoDateTime = Annotated[datetime, BeforeValidator(parse_iso_datetime)]


class OrderBase(BaseModel):
    """Schema base para pedidos"""
    client_name: str = Field(..., min_length=1, max_length=255, description="Nombre del cliente (copia, no FK)")
    phone: Optional[str] = Field(None, max_length=30)
    address: Optional[str] = Field(None, max_length=255)
    locality: Optional[str] = Field(None, max_length=120)
    items_json: Optional[str] = Field(None, description="Items serializados, se guardan tal cual")
    total: float = Field(..., ge=0, le=99_999_999.99, description="Total informado por el checkout (no se recalcula)")
    location: Optional[str] = Field(None, max_length=255, description="Coordenadas o referencia")


class OrderCreate(OrderBase):
    """Schema para crear o reemplazar pedido. Si falta created se usa la fecha actual."""
    created: Optional[IsoDateTime] = None


class OrderResponse(OrderBase):
    """Respuesta de pedido"""
    id: int
    created: datetime
    
    class Config:
        from_attributes = True
