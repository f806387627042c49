# Core modules

from .config import Settings, get_settings
from .errors import (
    CheckoutError,
    ValidationError,
    ProductNotFoundError,
    CurrencyMismatchError,
    OrderNotFoundError,
)

__all__ = [
    "Settings",
    "get_settings",
    "CheckoutError",
    "ValidationError",
    "ProductNotFoundError",
    "CurrencyMismatchError",
    "OrderNotFoundError",
]
