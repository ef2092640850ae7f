from sqlalchemy import Column, Integer, String, Numeric, DateTime, Text
from core.database import Base


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    # Datos del cliente copiados al momento del pedido (sin FK a clients)
    client_name = Column(String(255), nullable=False, index=True)
    phone = Column(String(30))
    address = Column(String(255))
    locality = Column(String(120), index=True)
    
    # Items serializados tal como los envía el checkout: [{producto, cantidad, precio}]
    items_json = Column(Text)
    total = Column(Numeric(10, 2), nullable=False)
    location = Column(String(255))  # Coordenadas o referencia de la dirección
    
    created = Column(DateTime, nullable=False, index=True)
