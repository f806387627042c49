"""Pytest configuration and shared fixtures."""

import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from storefront.core.config import Settings
from storefront.database.products import ProductCatalog
from storefront.models.cart import PricedLine
from storefront.models.order import OrderRecord, OrderStatus


@pytest.fixture
def catalog() -> ProductCatalog:
    """Built-in demo catalog (Boots, Banana, Demo Widget)."""
    return ProductCatalog()


@pytest.fixture
def settings() -> Settings:
    """Settings with playground credentials and no .env lookup."""
    return Settings(
        _env_file=None,
        klarna_api_url="https://api.test.klarna.com",
        klarna_username="merchant",
        klarna_password="secret",
        provider_timeout=2.0,
        debug=False,
    )


def make_record(order_id: str, created_at: datetime, **overrides) -> OrderRecord:
    fields = dict(
        order_id=order_id,
        provider_reference=f"ref-{order_id}",
        status=OrderStatus.AUTHORIZED,
        order_amount=3125,
        order_tax_amount=625,
        purchase_currency="EUR",
        items=[
            PricedLine(
                product_id="12345",
                name="Boots",
                quantity=1,
                currency="EUR",
                unit_price=2500,
                tax_rate=2500,
                subtotal=2500,
                tax_amount=625,
                total=3125,
            )
        ],
        created_at=created_at,
    )
    fields.update(overrides)
    return OrderRecord(**fields)


@pytest.fixture
def record_factory():
    """Build OrderRecords with increasing creation times."""
    base = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def _factory(order_id: str, minutes: int = 0, **overrides) -> OrderRecord:
        return make_record(order_id, base + timedelta(minutes=minutes), **overrides)

    return _factory


class FakeKlarna:
    """In-process stand-in for the Klarna REST API."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.orders: dict[str, dict] = {}
        self.session_status = 200
        self.order_status = 200
        self.fail_order_lookup = False

    def body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if request.method == "POST" and path == "/payments/v1/sessions":
            if self.session_status != 200:
                return httpx.Response(
                    self.session_status,
                    json={"error_code": "BAD_VALUE", "error_messages": ["Bad value: order_amount"]},
                )
            return httpx.Response(
                200,
                json={
                    "session_id": "sess-1",
                    "client_token": "client-token-1",
                    "payment_method_categories": [
                        {"identifier": "pay_later", "name": "Pay later."}
                    ],
                },
            )

        if request.method == "POST" and path.startswith("/payments/v1/authorizations/"):
            if self.order_status != 200:
                return httpx.Response(
                    self.order_status,
                    json={"error_code": "NOT_FOUND", "error_messages": ["Invalid authorization token"]},
                )
            order_id = f"order-{len(self.orders) + 1}"
            self.orders[order_id] = {"status": "AUTHORIZED"}
            return httpx.Response(
                200,
                json={
                    "order_id": order_id,
                    "klarna_reference": f"KREF-{order_id}",
                    "redirect_url": f"https://pay.test.klarna.com/{order_id}",
                    "fraud_status": "ACCEPTED",
                },
            )

        if request.method == "GET" and path.startswith("/ordermanagement/v1/orders/"):
            order_id = path.rsplit("/", 1)[-1]
            if self.fail_order_lookup or order_id not in self.orders:
                return httpx.Response(503, text="Service Unavailable")
            order = self.orders[order_id]
            return httpx.Response(
                200,
                json={
                    "order_id": order_id,
                    "status": order["status"],
                    "fraud_status": "ACCEPTED",
                    "expires_at": "2026-02-01T12:00:00Z",
                    "captures": order.get("captures", []),
                    "refunds": [],
                },
            )

        return httpx.Response(404, json={"error_code": "NOT_FOUND"})


@pytest.fixture
def fake_klarna() -> FakeKlarna:
    return FakeKlarna()


@pytest.fixture
def klarna_transport(fake_klarna: FakeKlarna) -> httpx.MockTransport:
    return httpx.MockTransport(fake_klarna.handler)
