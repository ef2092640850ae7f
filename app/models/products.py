from sqlalchemy import Column, Integer, String, Numeric, Boolean, DateTime, Text
from core.database import Base


class Product(Base):
    __tablename__ = "products"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    comment = Column(Text)
    category = Column(String(100), index=True)  # Huevos, Quesos, Lácteos, Miel...
    unit = Column(String(50))  # docena, 400g, 1kg, unidad
    active = Column(Boolean, default=True, nullable=False)
    
    # Timestamps: los asigna ProductRepository.save, no la base de datos
    created = Column(DateTime, nullable=False)
    updated = Column(DateTime, nullable=False)
