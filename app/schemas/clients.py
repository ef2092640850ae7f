"""
Schemas para clientes.
"""
from pydantic import BaseModel, Field
from typing import Optional


class ClientBase(BaseModel):
    """Schema base para clientes"""
    name: str = Field(..., min_length=1, max_length=255, description="Nombre del cliente")
    phone: Optional[str] = Field(None, max_length=30, description="Teléfono de contacto")
    address: Optional[str] = Field(None, max_length=255, description="Dirección de entrega")
    locality: Optional[str] = Field(None, max_length=120, description="Zona: Pocitos, Carrasco, Solymar/La Tahona")


class ClientCreate(ClientBase):
    """Schema para crear o reemplazar cliente"""
    pass


class ClientResponse(ClientBase):
    """Schema de respuesta para cliente"""
    id: int
    
    class Config:
        from_attributes = True
