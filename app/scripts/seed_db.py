"""
Carga del catálogo inicial de productos.

Se ejecuta una vez al arrancar la API (ver main.lifespan) y solo inserta
si la tabla de productos está completamente vacía. Un catálogo parcial o
ya personalizado no se toca.
"""
import logging
from sqlalchemy.orm import Session
from core.database import SessionLocal
from core.repositories import ProductRepository
from models import Product

logger = logging.getLogger(__name__)

# Catálogo de arranque: name, price, comment, category, unit
STARTER_CATALOG = [
    {"name": "Huevos 12", "price": 220.0, "comment": "Tamaño 12", "category": "Huevos", "unit": "docena"},
    {"name": "Huevos 15", "price": 250.0, "comment": "Tamaño 15", "category": "Huevos", "unit": "docena"},
    {"name": "Huevos 24", "price": 360.0, "comment": "Tamaño 24", "category": "Huevos", "unit": "docena"},
    {"name": "Huevos 30", "price": 390.0, "comment": "Tamaño 30", "category": "Huevos", "unit": "docena"},

    {"name": "Yogur griego 550mL", "price": 310.0, "comment": "1 unidad 550mL", "category": "Lácteos", "unit": "unidad"},
    {"name": "Queso Llanero 400g", "price": 180.0, "comment": "Llanero", "category": "Quesos", "unit": "400g"},
    {"name": "Queso Parmesano 400g", "price": 310.0, "comment": "Parmesano", "category": "Quesos", "unit": "400g"},
    {"name": "Queso Ricotta 400g", "price": 75.0, "comment": "Ricotta", "category": "Quesos", "unit": "400g"},
    {"name": "Queso Dambo 400g", "price": 230.0, "comment": "Dambo", "category": "Quesos", "unit": "400g"},
    {"name": "Queso Colonia 400g", "price": 250.0, "comment": "Colonia", "category": "Quesos", "unit": "400g"},
    {"name": "Queso Parrillero 400g", "price": 280.0, "comment": "Parrillero", "category": "Quesos", "unit": "400g"},

    {"name": "Miel", "price": 330.0, "comment": "1kg", "category": "Miel", "unit": "1kg"},
]


def seed_products(db: Session, catalog=None) -> int:
    """
    Poblar la tabla de productos si está vacía.

    Returns:
        Cantidad de productos insertados (0 si la tabla ya tenía filas)
    """
    repo = ProductRepository(db)

    existing = repo.count()
    if existing > 0:
        logger.info(f"🌱 Catálogo ya cargado ({existing} productos), no se insertan productos")
        return 0

    catalog = STARTER_CATALOG if catalog is None else catalog
    for entry in catalog:
        repo.save(Product(active=True, **entry))

    logger.info(f"✅ Catálogo inicial cargado: {len(catalog)} productos")
    return len(catalog)


def seed_data():
    db = SessionLocal()
    try:
        seed_products(db)
    finally:
        db.close()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_data()
