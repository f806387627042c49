"""
Klarna Checkout Demo Backend

Storefront API for a demonstration checkout: product listing, payment
session creation, order creation from a widget authorization, and order
lookup reconciled against Klarna.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import httpx
from fastapi import FastAPI, Request, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from payment_provider.client import KlarnaClient, ProviderError

from .core.config import Settings, get_settings
from .core.errors import CheckoutError, ValidationError
from .database.orders import OrderStore
from .database.products import ProductCatalog
from .dependencies import get_app_settings
from .routes import products_router, checkout_router
from .services.checkout import CheckoutService

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging for the service"""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    settings = app.state.settings
    logger.info("Klarna checkout demo starting up...")
    logger.info(f"Klarna API: {settings.klarna_api_url}")
    if not settings.klarna_configured:
        logger.warning("Klarna credentials not configured. Please check your .env file.")

    yield

    logger.info("Klarna checkout demo shutting down...")
    await app.state.klarna_client.close()


def register_exception_handlers(app: FastAPI) -> None:
    """Translate checkout and provider errors into JSON responses"""

    @app.exception_handler(CheckoutError)
    async def checkout_error_handler(request: Request, exc: CheckoutError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "code": exc.code},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'][1:]) or 'body'}: {error['msg']}"
            for error in exc.errors()
        )
        return JSONResponse(
            status_code=ValidationError.status_code,
            content={"error": f"Invalid request: {problems}", "code": ValidationError.code},
        )

    @app.exception_handler(ProviderError)
    async def provider_error_handler(request: Request, exc: ProviderError):
        logger.error(f"Klarna API error on {request.url.path}: {exc.details}")
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "Klarna API error",
                "details": exc.details,
                "message": "Payment provider rejected the request",
            },
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        logger.exception(f"Server error on {request.url.path}")
        debug = request.app.state.settings.debug
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": str(exc) if debug else "Something went wrong",
            },
        )


def create_app(
    settings: Optional[Settings] = None,
    provider_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the storefront application.

    Args:
        settings: Configuration; read from the environment if omitted
        provider_transport: Optional httpx transport for the Klarna client

    Returns:
        Configured FastAPI app with its catalog, order store and checkout
        service on ``app.state``
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Demonstration checkout flow backed by Klarna Payments",
        version="1.0.0",
        lifespan=lifespan,
    )

    if settings.catalog_path:
        catalog = ProductCatalog.from_file(settings.catalog_path)
    else:
        catalog = ProductCatalog()

    klarna_client = KlarnaClient(
        base_url=settings.klarna_api_url,
        username=settings.klarna_username,
        password=settings.klarna_password,
        timeout=settings.provider_timeout,
        transport=provider_transport,
    )

    app.state.settings = settings
    app.state.catalog = catalog
    app.state.klarna_client = klarna_client
    app.state.checkout_service = CheckoutService(
        catalog=catalog,
        store=OrderStore(),
        client=klarna_client,
        settings=settings,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(products_router)
    app.include_router(checkout_router)

    @app.get("/api/health")
    async def health_check(settings: Settings = Depends(get_app_settings)):
        """Health check endpoint"""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "klarna_configured": settings.klarna_configured,
        }

    return app


configure_logging(get_settings())
app = create_app()


def run() -> None:
    """Serve the app with uvicorn"""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
