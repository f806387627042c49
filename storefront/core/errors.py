"""Checkout error taxonomy.

Every error carries the HTTP status and machine-readable code the API
responds with. Provider failures live with the provider client
(``payment_provider.client.ProviderError``).
"""


class CheckoutError(Exception):
    """Base class for checkout errors"""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(CheckoutError):
    """Bad or incomplete checkout input. Never retried."""

    status_code = 400
    code = "INVALID_REQUEST"


class ProductNotFoundError(ValidationError):
    """Cart references a product that is not in the catalog"""

    code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")


class CurrencyMismatchError(ValidationError):
    """Cart mixes products priced in different currencies"""

    code = "CURRENCY_MISMATCH"

    def __init__(self, expected: str, found: str, product_id: str):
        self.expected = expected
        self.found = found
        self.product_id = product_id
        super().__init__(
            f"Currency mismatch: product {product_id} is priced in {found}, "
            f"cart is in {expected}"
        )


class OrderNotFoundError(CheckoutError):
    """No cached order under the requested id"""

    status_code = 404
    code = "ORDER_NOT_FOUND"

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__("Order not found")
