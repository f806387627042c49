# Database modules

from .products import PRODUCTS, ProductCatalog
from .orders import OrderStore

__all__ = [
    "PRODUCTS",
    "ProductCatalog",
    "OrderStore",
]
