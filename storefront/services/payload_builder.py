"""
Order payload builder.

Builds the provider's session / order creation body from a priced cart
and optional customer details. No network calls happen here.
"""

import re
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.config import Settings
from ..core.errors import ValidationError
from ..models.cart import PricedCart
from ..models.order import BillingAddress, CustomerInfo, OrderLine, OrderRequest

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Model attribute -> field name shown to the checkout form
REQUIRED_CUSTOMER_FIELDS = {
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
    "address": "address",
    "city": "city",
    "postal_code": "postalCode",
}


@dataclass(frozen=True)
class OrderDefaults:
    """Purchase fields taken from configuration rather than the cart"""
    purchase_country: str = "SE"
    locale: str = "en-SE"
    default_country: str = "SE"
    product_url: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "OrderDefaults":
        return cls(
            purchase_country=settings.purchase_country,
            locale=settings.locale,
            default_country=settings.default_country,
            product_url=settings.product_url,
        )


class MerchantReferenceGenerator:
    """
    Issues ``ORDER-<millis>`` references that never repeat.

    Calls landing in the same millisecond are pushed forward one
    millisecond each, so the sequence is strictly increasing.
    """

    def __init__(self, prefix: str = "ORDER", clock: Callable[[], float] = time.time):
        self.prefix = prefix
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next(self) -> str:
        with self._lock:
            stamp = max(int(self._clock() * 1000), self._last + 1)
            self._last = stamp
        return f"{self.prefix}-{stamp}"


def validate_customer_info(customer_info: CustomerInfo) -> None:
    """
    Check the customer details needed for a billing address.

    Raises:
        ValidationError: Listing missing required fields, or for a
            malformed email address
    """
    missing = [
        label
        for attr, label in REQUIRED_CUSTOMER_FIELDS.items()
        if not getattr(customer_info, attr)
    ]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    if not EMAIL_PATTERN.match(customer_info.email):
        raise ValidationError("Invalid email address")


def build_billing_address(customer_info: CustomerInfo, default_country: str) -> BillingAddress:
    """Map validated customer details into the provider's billing address"""
    validate_customer_info(customer_info)
    return BillingAddress(
        given_name=customer_info.first_name,
        family_name=customer_info.last_name,
        email=customer_info.email,
        street_address=customer_info.address,
        postal_code=customer_info.postal_code,
        city=customer_info.city,
        country=customer_info.country or default_country,
    )


def build_order_request(
    priced: PricedCart,
    customer_info: Optional[CustomerInfo] = None,
    *,
    defaults: OrderDefaults,
    references: MerchantReferenceGenerator,
) -> OrderRequest:
    """
    Build the provider order body for a priced cart.

    Args:
        priced: Output of the pricing calculator
        customer_info: Checkout form details; without them no billing
            address is sent
        defaults: Configured country, locale and product URL
        references: Source of the unique merchant reference

    Returns:
        OrderRequest ready to be sent to the provider
    """
    order_lines = [
        OrderLine(
            reference=line.product_id,
            name=line.name,
            quantity=line.quantity,
            unit_price=line.unit_price,
            tax_rate=line.tax_rate,
            total_amount=line.subtotal,
            total_tax_amount=line.tax_amount,
            product_url=defaults.product_url,
            image_url=line.image_url,
        )
        for line in priced.lines
    ]

    billing_address = None
    if customer_info is not None:
        billing_address = build_billing_address(customer_info, defaults.default_country)

    return OrderRequest(
        purchase_country=defaults.purchase_country,
        purchase_currency=priced.currency,
        locale=defaults.locale,
        order_amount=priced.total,
        order_tax_amount=priced.total_tax,
        order_lines=order_lines,
        merchant_reference1=references.next(),
        merchant_reference2="DEMO-" + "-".join(line.product_id for line in priced.lines),
        billing_address=billing_address,
    )
