# API Routes

from .products import router as products_router
from .checkout import router as checkout_router

__all__ = ["products_router", "checkout_router"]
