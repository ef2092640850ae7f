from .products import Product
from .clients import Client
from .order import Order

__all__ = [
    "Product",
    "Client",
    "Order",
]
