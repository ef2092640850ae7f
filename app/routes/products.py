from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from core.database import get_db
from core.query_resolution import resolve_product_listing
from core.repositories import ProductRepository
from models.products import Product
from schemas.products import ProductCreate, ProductResponse

router = APIRouter(
    prefix="/api/products",
    tags=["products"]
)


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    return ProductRepository(db)


# ==================== LISTADOS ====================

@router.get("", response_model=List[ProductResponse])
async def list_products(
    name: Optional[str] = Query(None, description="Buscar por nombre (contiene, sin distinguir mayúsculas)"),
    category: Optional[str] = Query(None, description="Filtrar por categoría exacta"),
    repo: ProductRepository = Depends(get_product_repository)
):
    """
    Listar productos activos.

    - **name**: Buscar en nombre del producto
    - **category**: Filtrar por categoría

    Los productos inactivos nunca aparecen aquí (ver /admin).
    """
    return resolve_product_listing(name, category).run(repo)


@router.get("/search", response_model=List[ProductResponse])
async def search_products(
    name: str = Query(..., description="Texto a buscar en el nombre"),
    repo: ProductRepository = Depends(get_product_repository)
):
    """Buscar productos activos por nombre"""
    return repo.find_by_name_containing_ignore_case_and_active_true(name)


@router.get("/category", response_model=List[ProductResponse])
async def products_by_category(
    category: str = Query(..., description="Categoría exacta"),
    repo: ProductRepository = Depends(get_product_repository)
):
    """Productos activos de una categoría"""
    return repo.find_by_category_and_active_true(category)


@router.get("/active", response_model=List[ProductResponse])
async def active_products(repo: ProductRepository = Depends(get_product_repository)):
    return repo.find_by_active_true()


@router.get("/admin", response_model=List[ProductResponse])
async def list_products_admin(repo: ProductRepository = Depends(get_product_repository)):
    """
    Listar todos los productos, incluidos los inactivos.
    """
    return repo.find_all()


# ==================== CRUD ====================

@router.get("/{product_id}", response_model=Optional[ProductResponse])
async def get_product(
    product_id: int,
    repo: ProductRepository = Depends(get_product_repository)
):
    """
    Obtener un producto por su ID.
    Si no existe retorna null (no 404).
    """
    return repo.find_by_id(product_id)


@router.post("", response_model=ProductResponse)
async def create_product(
    product_data: ProductCreate,
    repo: ProductRepository = Depends(get_product_repository)
):
    """
    Crear un nuevo producto.
    created y updated se asignan al guardar.
    """
    return repo.save(Product(**product_data.model_dump()))


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    product_data: ProductCreate,
    repo: ProductRepository = Depends(get_product_repository)
):
    """
    Reemplazar un producto existente.

    El id siempre es el de la ruta. created se conserva y updated se
    refresca aunque no cambie ningún campo.
    """
    product = Product(**product_data.model_dump())
    product.id = product_id
    return repo.save(product)


@router.delete("/{product_id}")
async def delete_product(
    product_id: int,
    repo: ProductRepository = Depends(get_product_repository)
):
    """
    Eliminar un producto físicamente.
    Para ocultarlo de los clientes es preferible actualizar active=false.
    """
    repo.delete_by_id(product_id)
