"""
Payment widget interface.

The widget runs in the shopper's browser; the backend only needs the
authorization token it produces. Adapters wrap a concrete widget
(for example a browser bridge or a test double) behind this protocol.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

logger = logging.getLogger(__name__)


class WidgetError(Exception):
    """Payment method unavailable or authorization denied"""
    pass


@dataclass
class WidgetLoadResult:
    """Result of rendering a payment method"""
    show_form: bool
    error: Optional[str] = None


@dataclass
class AuthorizationResult:
    """Result of a payment authorization attempt"""
    approved: bool
    authorization_token: Optional[str] = None
    show_form: bool = True
    error: Optional[str] = None


class PaymentWidget(Protocol):
    """Capabilities of a payment-method widget"""

    async def init(self, client_token: str) -> None:
        ...

    async def load(self, container: str, category: str) -> WidgetLoadResult:
        ...

    async def authorize(
        self,
        category: str,
        billing_address: Optional[dict[str, Any]] = None,
    ) -> AuthorizationResult:
        ...


async def obtain_authorization_token(
    widget: PaymentWidget,
    client_token: str,
    container: str,
    category: str = "pay_later",
    billing_address: Optional[dict[str, Any]] = None,
) -> str:
    """
    Run the widget through init, load and authorize.

    Args:
        widget: Widget adapter
        client_token: Token from the payment session
        container: Where the widget renders, e.g. "#klarna-payments-container"
        category: Payment method category from the session
        billing_address: Provider-shaped billing address

    Returns:
        The authorization token to exchange for an order

    Raises:
        WidgetError: If the method cannot be shown or authorization is denied
    """
    await widget.init(client_token)

    loaded = await widget.load(container, category)
    if not loaded.show_form:
        logger.warning(f"Payment method {category} not available: {loaded.error}")
        raise WidgetError(f"Payment method not available: {category}")

    result = await widget.authorize(category, billing_address)
    if not result.approved or not result.authorization_token:
        logger.warning(f"Authorization for {category} denied: {result.error}")
        raise WidgetError(result.error or "Payment authorization was not approved")

    return result.authorization_token
