"""
Repositorios de acceso a datos para productos, clientes y pedidos.

Cada repositorio envuelve una sesión de SQLAlchemy y expone:
- CRUD genérico (find_all, find_by_id, count, save, delete_by_id)
- Consultas con nombre, cada una con su filtro explícito

Todas las listas se devuelven ordenadas por id (orden de inserción).
"""
from datetime import datetime
from typing import Generic, List, Optional, Type, TypeVar
import logging

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.products import Product
from models.clients import Client
from models.order import Order

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


def contains_ignore_case(column, value: str):
    """
    Filtro de subcadena sin distinguir mayúsculas.

    Los comodines de LIKE (% y _) se buscan literalmente.
    Una cadena vacía coincide con todas las filas.
    """
    return func.lower(column).contains(value.lower(), autoescape=True)


class Repository(Generic[ModelT]):
    """CRUD común a todas las entidades"""

    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(self.model).order_by(self.model.id)

    def find_all(self) -> List[ModelT]:
        return self._query().all()

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        """Retorna None si no existe (no es un error)"""
        return self.db.get(self.model, entity_id)

    def count(self) -> int:
        return self.db.query(self.model).count()

    def save(self, entity: ModelT) -> ModelT:
        """
        Inserta si la entidad no tiene id; si lo tiene, sobrescribe la fila
        con ese id. Un id que no existe se descarta y la base asigna uno
        nuevo (nunca se inserta un id elegido por el cliente).
        """
        if entity.id is not None and self.find_by_id(entity.id) is None:
            logger.debug(f"{self.model.__name__} {entity.id} no existe, se inserta con id nuevo")
            entity.id = None
        try:
            if entity.id is None:
                self.db.add(entity)
            else:
                entity = self.db.merge(entity)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(entity)
        return entity

    def delete_by_id(self, entity_id: int) -> None:
        """Elimina la fila si existe; si no existe no hace nada"""
        entity = self.find_by_id(entity_id)
        if entity is None:
            logger.debug(f"{self.model.__name__} {entity_id} no existe, nada que eliminar")
            return
        try:
            self.db.delete(entity)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise


class ProductRepository(Repository[Product]):
    model = Product

    def touch(self, product: Product) -> Product:
        """
        Actualizar timestamps antes de guardar.

        - Producto nuevo: created = updated = ahora
        - Producto existente: conserva created original, updated = ahora
        """
        now = datetime.now()
        existing = self.find_by_id(product.id) if product.id is not None else None
        product.created = existing.created if existing is not None else now
        product.updated = now
        return product

    def save(self, product: Product) -> Product:
        return super().save(self.touch(product))

    def find_by_name_containing_ignore_case(self, name: str) -> List[Product]:
        return self._query().filter(contains_ignore_case(Product.name, name)).all()

    def find_by_category(self, category: str) -> List[Product]:
        return self._query().filter(Product.category == category).all()

    def find_by_active_true(self) -> List[Product]:
        return self._query().filter(Product.active == True).all()

    def find_by_name_containing_ignore_case_and_active_true(self, name: str) -> List[Product]:
        return self._query().filter(
            contains_ignore_case(Product.name, name),
            Product.active == True
        ).all()

    def find_by_category_and_active_true(self, category: str) -> List[Product]:
        return self._query().filter(
            Product.category == category,
            Product.active == True
        ).all()

    def find_by_name_containing_ignore_case_and_category_and_active_true(
        self,
        name: str,
        category: str
    ) -> List[Product]:
        return self._query().filter(
            contains_ignore_case(Product.name, name),
            Product.category == category,
            Product.active == True
        ).all()


class ClientRepository(Repository[Client]):
    model = Client

    def find_by_locality(self, locality: str) -> List[Client]:
        return self._query().filter(Client.locality == locality).all()


class OrderRepository(Repository[Order]):
    model = Order

    def find_by_created_between(self, start: datetime, end: datetime) -> List[Order]:
        """Pedidos creados en [start, end], ambos extremos incluidos"""
        return self._query().filter(Order.created.between(start, end)).all()

    def find_by_total_greater_than_equal(self, total: float) -> List[Order]:
        return self._query().filter(Order.total >= total).all()

    def find_by_client_name_containing_ignore_case(self, client_name: str) -> List[Order]:
        return self._query().filter(contains_ignore_case(Order.client_name, client_name)).all()

    def find_by_locality(self, locality: str) -> List[Order]:
        return self._query().filter(Order.locality == locality).all()

    def find_by_client_name_containing_ignore_case_and_locality(
        self,
        client_name: str,
        locality: str
    ) -> List[Order]:
        return self._query().filter(
            contains_ignore_case(Order.client_name, client_name),
            Order.locality == locality
        ).all()
