# Klarna API Client Wrapper

from .client import KlarnaClient, ProviderError
from .models import PaymentSession, ProviderOrder, ProviderOrderView
from .widget import (
    PaymentWidget,
    WidgetError,
    WidgetLoadResult,
    AuthorizationResult,
    obtain_authorization_token,
)

__all__ = [
    "KlarnaClient",
    "ProviderError",
    "PaymentSession",
    "ProviderOrder",
    "ProviderOrderView",
    "PaymentWidget",
    "WidgetError",
    "WidgetLoadResult",
    "AuthorizationResult",
    "obtain_authorization_token",
]
