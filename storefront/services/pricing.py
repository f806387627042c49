"""
Pricing calculator.

Turns a cart into priced lines and totals using integer minor units.
Tax is computed per line and summed, never recomputed on the aggregate,
so the order total always equals the sum of its lines.
"""

from typing import Iterable

from ..core.errors import CurrencyMismatchError, ProductNotFoundError, ValidationError
from ..database.products import ProductCatalog
from ..models.cart import CartLine, PricedCart, PricedLine

BASIS_POINTS = 10000


def calculate_line_tax(subtotal: int, tax_rate: int) -> int:
    """
    Tax for one line, rounded half up to the nearest minor unit.

    Args:
        subtotal: Line subtotal in minor units (non-negative)
        tax_rate: Tax rate in basis points

    Returns:
        round(subtotal * tax_rate / 10000), halves rounded up
    """
    return (subtotal * tax_rate + BASIS_POINTS // 2) // BASIS_POINTS


def price_cart(cart: Iterable[CartLine], catalog: ProductCatalog) -> PricedCart:
    """
    Price every cart line against the catalog.

    Args:
        cart: Cart lines in display order
        catalog: Product lookup

    Returns:
        Priced lines with subtotal, total tax and grand total

    Raises:
        ValidationError: If the cart is empty
        ProductNotFoundError: If a line references an unknown product
        CurrencyMismatchError: If products are priced in different currencies
    """
    lines: list[PricedLine] = []
    currency = None

    for item in cart:
        product = catalog.get_product(item.product_id)
        if product is None:
            raise ProductNotFoundError(item.product_id)

        if currency is None:
            currency = product.currency
        elif product.currency != currency:
            raise CurrencyMismatchError(currency, product.currency, product.id)

        subtotal = product.price * item.quantity
        tax_amount = calculate_line_tax(subtotal, product.tax_rate)
        lines.append(
            PricedLine(
                product_id=product.id,
                name=product.name,
                quantity=item.quantity,
                currency=product.currency,
                unit_price=product.price,
                tax_rate=product.tax_rate,
                subtotal=subtotal,
                tax_amount=tax_amount,
                total=subtotal + tax_amount,
                image_url=product.image_url,
            )
        )

    if not lines:
        raise ValidationError("Cart is empty")

    subtotal = sum(line.subtotal for line in lines)
    total_tax = sum(line.tax_amount for line in lines)
    return PricedCart(
        lines=lines,
        currency=currency,
        subtotal=subtotal,
        total_tax=total_tax,
        total=subtotal + total_tax,
    )


def format_price(amount: int, currency: str) -> str:
    """Format minor units for display, e.g. 3425 EUR -> '34.25 EUR'"""
    sign = "-" if amount < 0 else ""
    major, minor = divmod(abs(amount), 100)
    return f"{sign}{major}.{minor:02d} {currency}"
