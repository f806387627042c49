"""Request dependencies.

Shared objects are built once by ``create_app`` and hung on
``app.state``; handlers receive them through ``Depends``.
"""

from fastapi import Request

from .core.config import Settings
from .database.products import ProductCatalog
from .services.checkout import CheckoutService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog(request: Request) -> ProductCatalog:
    return request.app.state.catalog


def get_checkout_service(request: Request) -> CheckoutService:
    return request.app.state.checkout_service
