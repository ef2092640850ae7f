"""
Endpoints para clientes.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from core.database import get_db
from core.query_resolution import resolve_client_listing
from core.repositories import ClientRepository
from models.clients import Client
from schemas.clients import ClientCreate, ClientResponse

router = APIRouter(
    prefix="/api/clients",
    tags=["clients"]
)


def get_client_repository(db: Session = Depends(get_db)) -> ClientRepository:
    return ClientRepository(db)


@router.get("", response_model=List[ClientResponse])
async def list_clients(
    locality: Optional[str] = Query(None, description="Filtrar por localidad exacta"),
    repo: ClientRepository = Depends(get_client_repository)
):
    return resolve_client_listing(locality).run(repo)


@router.get("/{client_id}", response_model=Optional[ClientResponse])
async def get_client(
    client_id: int,
    repo: ClientRepository = Depends(get_client_repository)
):
    """Obtener un cliente por ID (null si no existe)"""
    return repo.find_by_id(client_id)


@router.post("", response_model=ClientResponse)
async def create_client(
    client_data: ClientCreate,
    repo: ClientRepository = Depends(get_client_repository)
):
    return repo.save(Client(**client_data.model_dump()))


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: int,
    client_data: ClientCreate,
    repo: ClientRepository = Depends(get_client_repository)
):
    """Reemplazar un cliente. El id siempre es el de la ruta."""
    client = Client(**client_data.model_dump())
    client.id = client_id
    return repo.save(client)


@router.delete("/{client_id}")
async def delete_client(
    client_id: int,
    repo: ClientRepository = Depends(get_client_repository)
):
    repo.delete_by_id(client_id)
