"""
Script para inicializar la base de datos.
Crea todas las tablas definidas en models/
"""
import logging
from core.database import engine, Base
from models import Product, Client, Order

logger = logging.getLogger(__name__)

def init_db(bind=None):
    """Crear todas las tablas en la base de datos"""
    logger.info("🔨 Creando tablas en la base de datos...")
    Base.metadata.create_all(bind=bind or engine)
    logger.info("✅ Tablas listas: products, clients, orders")

def drop_db(bind=None):
    """Eliminar todas las tablas de la base de datos"""
    logger.warning("⚠️  Eliminando todas las tablas...")
    Base.metadata.drop_all(bind=bind or engine)
    logger.info("✅ Tablas eliminadas!")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
