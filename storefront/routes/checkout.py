"""Checkout API routes for the storefront"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query

from ..models.order import (
    CreateSessionRequest,
    CreateOrderRequest,
    SessionResponse,
    CreateOrderResponse,
    OrderRecord,
    OrderView,
)
from ..services.checkout import CheckoutService
from ..dependencies import get_checkout_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Checkout"])


@router.post("/create-session", response_model=SessionResponse)
async def create_session(
    request: CreateSessionRequest,
    service: CheckoutService = Depends(get_checkout_service),
):
    """
    Create a payment session.

    The returned client token initializes the payment widget in the
    browser.
    """
    logger.info("Creating Klarna payment session...")
    return await service.create_session(request.cart_lines(), request.customer_info)


@router.post("/create-order", response_model=CreateOrderResponse)
async def create_order(
    request: CreateOrderRequest,
    service: CheckoutService = Depends(get_checkout_service),
):
    """Create an order from a completed widget authorization"""
    logger.info("Creating Klarna order...")
    return await service.create_order(
        request.authorization_token,
        request.cart_lines(),
        request.customer_info,
    )


@router.get("/order/{order_id}", response_model=OrderView)
async def get_order(
    order_id: str,
    service: CheckoutService = Depends(get_checkout_service),
):
    """Get order details, refreshed from Klarna when reachable"""
    logger.info(f"Retrieving order details for: {order_id}")
    return await service.get_order(order_id)


@router.get("/orders", response_model=list[OrderRecord])
async def list_orders(
    limit: Optional[int] = Query(None, ge=1),
    service: CheckoutService = Depends(get_checkout_service),
):
    """List cached orders, newest first"""
    return service.list_orders(limit=limit)
