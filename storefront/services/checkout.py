"""
Checkout service.

Coordinates the checkout flow: price the cart, build the provider body,
open a payment session, exchange the widget's authorization token for an
order, and read orders back reconciled against the provider.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Union

from payment_provider.client import KlarnaClient

from ..core.config import Settings
from ..core.errors import ValidationError
from ..database.orders import OrderStore
from ..database.products import ProductCatalog
from ..models.cart import CartLine
from ..models.order import (
    CreateOrderResponse,
    CustomerInfo,
    OrderRecord,
    OrderStatus,
    OrderView,
    SessionResponse,
)
from .payload_builder import MerchantReferenceGenerator, OrderDefaults, build_order_request
from .pricing import format_price, price_cart
from .reconciler import reconcile

logger = logging.getLogger(__name__)


class CheckoutService:
    """Checkout operations exposed by the storefront API"""

    def __init__(
        self,
        catalog: ProductCatalog,
        store: OrderStore,
        client: KlarnaClient,
        settings: Settings,
        references: Optional[MerchantReferenceGenerator] = None,
    ):
        self.catalog = catalog
        self.store = store
        self.client = client
        self.defaults = OrderDefaults.from_settings(settings)
        self.references = references or MerchantReferenceGenerator()

    async def create_session(
        self,
        cart: list[CartLine],
        customer_info: Optional[CustomerInfo] = None,
    ) -> SessionResponse:
        """Open a payment session for the cart"""
        priced = price_cart(cart, self.catalog)
        order_request = build_order_request(
            priced,
            customer_info,
            defaults=self.defaults,
            references=self.references,
        )
        logger.debug(f"Session data prepared: {order_request.to_payload()}")

        session = await self.client.create_session(order_request.to_payload())

        return SessionResponse(
            session_id=session.session_id,
            client_token=session.client_token,
            payment_method_categories=session.payment_method_categories,
            order_amount=priced.total,
            order_tax_amount=priced.total_tax,
            purchase_currency=priced.currency,
        )

    async def create_order(
        self,
        authorization_token: Optional[str],
        cart: list[CartLine],
        customer_info: Optional[CustomerInfo] = None,
    ) -> CreateOrderResponse:
        """
        Turn a widget authorization into a provider order and cache it.

        Args:
            authorization_token: Token from the widget's authorize call
            cart: Cart lines; must match what the shopper authorized
            customer_info: Checkout form details

        Returns:
            Order confirmation for the storefront

        Raises:
            ValidationError: Missing token or invalid cart / customer data
            ProviderError: If the provider rejects the order
        """
        if not authorization_token:
            raise ValidationError("Authorization token is required")

        priced = price_cart(cart, self.catalog)
        order_request = build_order_request(
            priced,
            customer_info,
            defaults=self.defaults,
            references=self.references,
        )
        logger.debug(f"Order data prepared: {order_request.to_payload()}")

        provider_order = await self.client.create_order(
            authorization_token,
            order_request.to_payload(),
        )

        record = OrderRecord(
            order_id=provider_order.order_id,
            provider_reference=provider_order.provider_reference,
            status=OrderStatus.AUTHORIZED,
            order_amount=priced.total,
            order_tax_amount=priced.total_tax,
            purchase_currency=priced.currency,
            items=priced.lines,
            customer_info=customer_info,
            redirect_url=provider_order.redirect_url,
            created_at=datetime.now(timezone.utc),
        )
        self.store.put_order(record)

        logger.info(
            f"Order {record.order_id} created: "
            f"{format_price(record.order_amount, record.purchase_currency)} "
            f"({order_request.merchant_reference1})"
        )

        return CreateOrderResponse(
            order_id=record.order_id,
            provider_reference=record.provider_reference,
            redirect_url=record.redirect_url,
            status=record.status,
            order_amount=record.order_amount,
            purchase_currency=record.purchase_currency,
        )

    async def get_order(self, order_id: str) -> Union[OrderRecord, OrderView]:
        """Cached order merged with the provider's live status"""
        local = self.store.find_order(order_id)
        return await reconcile(
            local,
            lambda: self.client.get_order(order_id),
            order_id=order_id,
        )

    def list_orders(self, limit: Optional[int] = None) -> list[OrderRecord]:
        """Cached orders, newest first"""
        return self.store.list_orders(limit=limit)
