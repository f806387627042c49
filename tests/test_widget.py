"""Tests for the payment widget flow."""

import pytest

from payment_provider.widget import (
    AuthorizationResult,
    WidgetError,
    WidgetLoadResult,
    obtain_authorization_token,
)


class StubWidget:
    def __init__(self, show_form=True, approved=True, token="auth-token-1", error=None):
        self.show_form = show_form
        self.approved = approved
        self.token = token
        self.error = error
        self.calls = []

    async def init(self, client_token):
        self.calls.append(("init", client_token))

    async def load(self, container, category):
        self.calls.append(("load", container, category))
        return WidgetLoadResult(show_form=self.show_form)

    async def authorize(self, category, billing_address=None):
        self.calls.append(("authorize", category, billing_address))
        return AuthorizationResult(
            approved=self.approved,
            authorization_token=self.token if self.approved else None,
            error=self.error,
        )


@pytest.mark.asyncio
async def test_returns_authorization_token():
    widget = StubWidget()
    billing = {"given_name": "John", "family_name": "Doe"}

    token = await obtain_authorization_token(
        widget, "client-token", "#klarna-payments-container", "pay_later", billing
    )

    assert token == "auth-token-1"
    assert widget.calls == [
        ("init", "client-token"),
        ("load", "#klarna-payments-container", "pay_later"),
        ("authorize", "pay_later", billing),
    ]


@pytest.mark.asyncio
async def test_unavailable_method_stops_before_authorize():
    widget = StubWidget(show_form=False)

    with pytest.raises(WidgetError, match="not available"):
        await obtain_authorization_token(widget, "client-token", "#container")

    assert [call[0] for call in widget.calls] == ["init", "load"]


@pytest.mark.asyncio
async def test_denied_authorization():
    widget = StubWidget(approved=False, error="Customer cancelled")

    with pytest.raises(WidgetError, match="Customer cancelled"):
        await obtain_authorization_token(widget, "client-token", "#container")
