"""
Klarna API Client

Async wrapper around the Klarna Payments and Order Management REST APIs.
Every call carries HTTP Basic credentials and is bounded by a timeout.
No call is retried.
"""

import logging
from typing import Optional, Any

import httpx

from .models import PaymentSession, ProviderOrder, ProviderOrderView

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """Non-2xx response from the payment provider"""

    def __init__(self, status_code: int, details: Any, message: str = "Payment provider error"):
        self.status_code = status_code
        self.details = details
        super().__init__(f"{message}: {status_code}")


class KlarnaClient:
    """
    Client for the Klarna payment provider.

    Usage:
        client = KlarnaClient(base_url, username, password)
        session = await client.create_session(order_request.to_payload())
        order = await client.create_order(authorization_token, payload)
        live = await client.get_order(order.order_id)
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        username: Optional[str],
        password: Optional[str],
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the Klarna client.

        Args:
            base_url: API root, e.g. https://api.playground.klarna.com
            username: API username (merchant id)
            password: API password
            timeout: Seconds before a call is abandoned
            transport: Optional httpx transport, used to stub the API
        """
        self.base_url = base_url.rstrip("/")
        self._http_client = httpx.AsyncClient(
            base_url=self.base_url,
            auth=httpx.BasicAuth(username or "", password or ""),
            headers={"Content-Type": "application/json", "Accept": "application/json"},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[dict] = None,
    ) -> dict[str, Any]:
        """Make an authenticated request and decode the JSON reply"""
        response = await self._http_client.request(method, path, json=body)

        if not response.is_success:
            try:
                details = response.json()
            except ValueError:
                details = response.text
            logger.error(f"Klarna {method} {path} failed: {response.status_code} - {details}")
            raise ProviderError(response.status_code, details)

        if not response.content:
            return {}
        return response.json()

    # ==================== Payments API ====================

    async def create_session(self, order_request: dict[str, Any]) -> PaymentSession:
        """Open a payment session for the widget"""
        result = await self._request("POST", "/payments/v1/sessions", body=order_request)
        logger.info(f"Klarna session created: {result.get('session_id')}")

        return PaymentSession(
            session_id=result["session_id"],
            client_token=result["client_token"],
            payment_method_categories=result.get("payment_method_categories") or [],
        )

    async def create_order(
        self,
        authorization_token: str,
        order_request: dict[str, Any],
    ) -> ProviderOrder:
        """
        Exchange an authorization token for an order.

        Args:
            authorization_token: Token returned by the widget's authorize call
            order_request: Order body; must match what was authorized

        Returns:
            Provider order id, reference and redirect URL
        """
        result = await self._request(
            "POST",
            f"/payments/v1/authorizations/{authorization_token}/order",
            body=order_request,
        )
        logger.info(f"Klarna order created: {result.get('order_id')}")

        return ProviderOrder(
            order_id=result["order_id"],
            provider_reference=result.get("klarna_reference"),
            redirect_url=result.get("redirect_url"),
            fraud_status=result.get("fraud_status"),
        )

    # ==================== Order Management API ====================

    async def get_order(self, order_id: str) -> ProviderOrderView:
        """Fetch the live state of an order"""
        result = await self._request("GET", f"/ordermanagement/v1/orders/{order_id}")

        return ProviderOrderView(
            order_id=result.get("order_id", order_id),
            status=result["status"],
            fraud_status=result.get("fraud_status"),
            expires_at=result.get("expires_at"),
            captures=result.get("captures") or [],
            refunds=result.get("refunds") or [],
        )
