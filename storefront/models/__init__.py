# Storefront Models

from .product import Product, ProductListResponse
from .cart import CartLine, PricedLine, PricedCart
from .order import (
    OrderStatus,
    CustomerInfo,
    BillingAddress,
    OrderLine,
    OrderRequest,
    OrderRecord,
    OrderView,
    CreateSessionRequest,
    CreateOrderRequest,
    SessionResponse,
    CreateOrderResponse,
)

__all__ = [
    "Product",
    "ProductListResponse",
    "CartLine",
    "PricedLine",
    "PricedCart",
    "OrderStatus",
    "CustomerInfo",
    "BillingAddress",
    "OrderLine",
    "OrderRequest",
    "OrderRecord",
    "OrderView",
    "CreateSessionRequest",
    "CreateOrderRequest",
    "SessionResponse",
    "CreateOrderResponse",
]
