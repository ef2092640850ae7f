from .products import ProductCreate, ProductResponse
from .clients import ClientCreate, ClientResponse
from .orders import OrderCreate, OrderResponse

__all__ = [
    "ProductCreate",
    "ProductResponse",
    "ClientCreate",
    "ClientResponse",
    "OrderCreate",
    "OrderResponse",
]
