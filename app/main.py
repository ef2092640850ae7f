from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from contextlib import asynccontextmanager
import logging
from core.config import settings
from core.database import SessionLocal

# Rutas de endpoints importadas
from routes.products import router as products_router
from routes.clients import router as clients_router
from routes.orders import router as orders_router

# Inicialización de base de datos
from scripts.init_db import init_db
from scripts.seed_db import seed_products

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

docs_url = "/docs" if settings.ENV == "development" else None
redoc_url = "/redoc" if settings.ENV == "development" else None
openapi_url = "/openapi.json" if settings.ENV == "development" else None


def bootstrap():
    """
    Crear tablas y cargar el catálogo inicial.
    Se ejecuta una sola vez, antes de aceptar peticiones.
    """
    init_db()
    if not settings.SEED_ON_STARTUP:
        logger.info("Carga del catálogo inicial desactivada (SEED_ON_STARTUP=false)")
        return
    db = SessionLocal()
    try:
        seed_products(db)
    finally:
        db.close()

# ==================== LIFESPAN EVENTS ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Gestiona el startup de la aplicación.
    """
    bootstrap()
    yield

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    docs_url=docs_url,
    redoc_url=redoc_url,
    openapi_url=openapi_url,
    redirect_slashes=False,  # Evita redirects 307
    lifespan=lifespan
)

# CORS config
allow_origins = [origin.strip() for origin in settings.CORS_ALLOW_ORIGINS.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ==================== EXCEPTION HANDLERS ====================

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Maneja errores de validación de Pydantic y los convierte al formato estándar.
    Cubre cuerpos mal formados y parámetros de consulta inválidos (fechas, números).
    """
    errors = exc.errors()

    error_messages = []
    validation_errors = []

    for error in errors:
        field = " -> ".join(str(loc) for loc in error["loc"][1:])  # Omitir 'body' / 'query'
        msg = error["msg"]
        error_type = error["type"]

        # Mensajes personalizados según el tipo de error
        if error_type == "missing":
            error_messages.append(f"El campo '{field}' es requerido")
        elif error_type == "string_too_short":
            min_length = error.get("ctx", {}).get("min_length", "")
            error_messages.append(f"El campo '{field}' debe tener al menos {min_length} caracteres")
        elif error_type == "string_too_long":
            max_length = error.get("ctx", {}).get("max_length", "")
            error_messages.append(f"El campo '{field}' debe tener máximo {max_length} caracteres")
        elif error_type.startswith("greater_than"):
            limit = error.get("ctx", {}).get("ge", error.get("ctx", {}).get("gt", ""))
            error_messages.append(f"El campo '{field}' debe ser mayor o igual que {limit}")
        elif error_type.startswith("less_than"):
            limit = error.get("ctx", {}).get("le", error.get("ctx", {}).get("lt", ""))
            error_messages.append(f"El campo '{field}' debe ser menor o igual que {limit}")
        elif error_type == "value_error":
            error_messages.append(f"El campo '{field}' tiene un valor inválido")
        elif error_type.startswith("datetime"):
            error_messages.append(f"El campo '{field}' debe ser una fecha ISO-8601 válida")
        else:
            error_messages.append(f"El campo '{field}': {msg}")

        validation_errors.append({
            "field": field,
            "message": error_messages[-1],
            "type": error_type,
            "input": error.get("input")
        })

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "status_code": 400,
            "message": "Error de validación: " + "; ".join(error_messages),
            "error": "VALIDATION_ERROR",
            "details": validation_errors
        }
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """
    Cualquier fallo de la base de datos termina la petición con 500.
    No hay reintentos.
    """
    logger.error(f"Error de base de datos en {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "status_code": 500,
            "message": "Error al acceder a la base de datos",
            "error": "DATABASE_ERROR"
        }
    )

# Registrar routers
app.include_router(products_router)
app.include_router(clients_router)
app.include_router(orders_router)

@app.get("/")
async def root():
    return {
        "message": "Welcome to the Casuarinas API",
        "version": settings.API_VERSION,
        "docs": "/docs"
    }

@app.get("/health")
async def health_check():
    return {"status": "healthy"}
