import os
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # API Config
    API_TITLE: str = "Casuarinas API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "API de productos, clientes y pedidos de Casuarinas"
    ENV: str = os.getenv("ENV", "production")
    
    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "postgresql://user:pass@db:5432/casuarinas")
    
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    
    # Carga del catálogo inicial al arrancar (solo si la tabla está vacía)
    SEED_ON_STARTUP: bool = True
    
    # CORS (orígenes separados por coma)
    CORS_ALLOW_ORIGINS: str = os.getenv("CORS_ALLOW_ORIGINS", "*")
    
    class Config:
        env_file = ".env"

settings = Settings()
