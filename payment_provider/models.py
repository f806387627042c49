"""Klarna API Data Models"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class PaymentSession:
    """Response from payment session creation"""
    session_id: str
    client_token: str
    payment_method_categories: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class ProviderOrder:
    """Response from order creation against an authorization"""
    order_id: str
    provider_reference: Optional[str] = None
    redirect_url: Optional[str] = None
    fraud_status: Optional[str] = None


@dataclass
class ProviderOrderView:
    """Live order state from order management"""
    order_id: str
    status: str
    fraud_status: Optional[str] = None
    expires_at: Optional[str] = None
    captures: list[dict[str, Any]] = field(default_factory=list)
    refunds: list[dict[str, Any]] = field(default_factory=list)
