# Checkout services

from .pricing import price_cart, calculate_line_tax, format_price
from .payload_builder import (
    OrderDefaults,
    MerchantReferenceGenerator,
    build_order_request,
    validate_customer_info,
)
from .reconciler import reconcile, merge_order_view
from .checkout import CheckoutService

__all__ = [
    "price_cart",
    "calculate_line_tax",
    "format_price",
    "OrderDefaults",
    "MerchantReferenceGenerator",
    "build_order_request",
    "validate_customer_info",
    "reconcile",
    "merge_order_view",
    "CheckoutService",
]
