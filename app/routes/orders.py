"""
Endpoints para pedidos.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import datetime

from core.database import get_db
from core.query_resolution import resolve_order_listing
from core.repositories import OrderRepository
from models.order import Order
from schemas.orders import IsoDateTime, OrderCreate, OrderResponse

router = APIRouter(
    prefix="/api/orders",
    tags=["orders"]
)


def get_order_repository(db: Session = Depends(get_db)) -> OrderRepository:
    return OrderRepository(db)


# ==================== LISTADOS ====================

@router.get("", response_model=List[OrderResponse])
async def list_orders(
    client_name: Optional[str] = Query(None, alias="clientName", description="Buscar por nombre de cliente"),
    locality: Optional[str] = Query(None, description="Filtrar por localidad exacta"),
    repo: OrderRepository = Depends(get_order_repository)
):
    """
    Listar pedidos.

    - **clientName**: Nombre del cliente (contiene, sin distinguir mayúsculas)
    - **locality**: Localidad exacta
    """
    return resolve_order_listing(client_name, locality).run(repo)


@router.get("/date-range", response_model=List[OrderResponse])
async def orders_by_date_range(
    start: IsoDateTime = Query(..., description="Fecha inicial ISO-8601, ej. 2025-01-01T00:00:00"),
    end: IsoDateTime = Query(..., description="Fecha final ISO-8601 (incluida)"),
    repo: OrderRepository = Depends(get_order_repository)
):
    """
    Pedidos creados entre start y end, ambos incluidos.
    Fechas mal formadas se rechazan con 400.
    """
    return repo.find_by_created_between(start, end)


@router.get("/total", response_model=List[OrderResponse])
async def orders_by_min_total(
    min_total: float = Query(..., alias="minTotal", description="Total mínimo"),
    repo: OrderRepository = Depends(get_order_repository)
):
    """Pedidos con total mayor o igual a minTotal"""
    return repo.find_by_total_greater_than_equal(min_total)


# ==================== CRUD ====================

@router.get("/{order_id}", response_model=Optional[OrderResponse])
async def get_order(
    order_id: int,
    repo: OrderRepository = Depends(get_order_repository)
):
    """Obtener un pedido por ID (null si no existe)"""
    return repo.find_by_id(order_id)


@router.post("", response_model=OrderResponse)
async def create_order(
    order_data: OrderCreate,
    repo: OrderRepository = Depends(get_order_repository)
):
    """
    Registrar un pedido desde el checkout.

    - Si no se envía created se usa la fecha actual
    - El total no se valida contra items_json
    """
    order = Order(**order_data.model_dump())
    if order.created is None:
        order.created = datetime.now()
    return repo.save(order)


@router.put("/{order_id}", response_model=OrderResponse)
async def update_order(
    order_id: int,
    order_data: OrderCreate,
    repo: OrderRepository = Depends(get_order_repository)
):
    """
    Reemplazar un pedido. El id siempre es el de la ruta.
    Si no se envía created se conserva el del pedido guardado.
    """
    order = Order(**order_data.model_dump())
    order.id = order_id
    if order.created is None:
        existing = repo.find_by_id(order_id)
        order.created = existing.created if existing is not None else datetime.now()
    return repo.save(order)


@router.delete("/{order_id}")
async def delete_order(
    order_id: int,
    repo: OrderRepository = Depends(get_order_repository)
):
    repo.delete_by_id(order_id)
