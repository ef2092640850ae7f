"""
Schemas para productos.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ProductBase(BaseModel):
    """Schema base para productos"""
    name: str = Field(..., min_length=1, max_length=255, description="Nombre del producto")
    price: float = Field(..., ge=0, le=99_999_999.99, description="Precio en pesos (no puede ser negativo)")
    comment: Optional[str] = Field(None, description="Comentario libre")
    category: Optional[str] = Field(None, max_length=100, description="Categoría (Huevos, Quesos, Miel...)")
    unit: Optional[str] = Field(None, max_length=50, description="Unidad de venta (docena, 400g, 1kg...)")
    active: bool = Field(True, description="Visible en los listados de clientes")


class ProductCreate(ProductBase):
    """
    Schema para crear o reemplazar un producto.
    id, created y updated los asigna el servidor.
    """
    pass


class ProductResponse(ProductBase):
    """Schema de respuesta para producto"""
    id: int
    created: datetime
    updated: datetime
    
    class Config:
        from_attributes = True
