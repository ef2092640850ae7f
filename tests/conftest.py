"""
Fixtures compartidos: base SQLite en memoria y cliente HTTP.
Ejecutar con: pytest -v
"""
import os
import sys

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Base de datos de prueba antes de importar la app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_ON_STARTUP"] = "true"

# Agregar app al path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'app'))

from main import app
from core.database import get_db
from scripts.init_db import init_db, drop_db

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def test_db():
    """Fixture para base de datos de prueba (tablas nuevas en cada test)"""
    init_db(bind=test_engine)
    db = TestingSessionLocal()
    yield db
    db.close()
    drop_db(bind=test_engine)


@pytest.fixture
def client(test_db):
    """Fixture para cliente HTTP con la sesión de prueba"""
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
