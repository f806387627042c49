"""Order models for the storefront"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional
from datetime import datetime
from enum import Enum

from .cart import CartLine, PricedLine


class OrderStatus(str, Enum):
    CREATED = "CREATED"
    AUTHORIZED = "AUTHORIZED"
    PART_CAPTURED = "PART_CAPTURED"
    CAPTURED = "CAPTURED"
    CANCELLED = "CANCELLED"
    EXPIRED = "EXPIRED"
    CLOSED = "CLOSED"
    REFUNDED = "REFUNDED"


class CustomerInfo(BaseModel):
    """Customer details as entered on the checkout form.

    Every field is optional at the model level; required-field checks
    happen when the billing address is built so the caller gets one
    message listing everything that is missing.
    """

    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = Field(default=None, alias="postalCode")
    country: Optional[str] = None


class BillingAddress(BaseModel):
    """Billing address in the provider's shape"""
    given_name: str
    family_name: str
    email: str
    street_address: str
    postal_code: str
    city: str
    country: str


class OrderLine(BaseModel):
    """Order line in the provider's shape"""
    type: str = "physical"
    reference: str
    name: str
    quantity: int
    unit_price: int
    tax_rate: int
    total_amount: int
    total_discount_amount: int = 0
    total_tax_amount: int
    product_url: Optional[str] = None
    image_url: Optional[str] = None


class OrderRequest(BaseModel):
    """Session / order creation body sent to the payment provider"""
    purchase_country: str
    purchase_currency: str
    locale: str
    order_amount: int
    order_tax_amount: int
    order_lines: list[OrderLine]
    merchant_reference1: str
    merchant_reference2: str
    billing_address: Optional[BillingAddress] = None

    def to_payload(self) -> dict[str, Any]:
        """JSON body for the provider, omitting unset optional fields"""
        return self.model_dump(mode="json", exclude_none=True)


class OrderRecord(BaseModel):
    """Locally cached result of a successful order creation"""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    order_id: str
    provider_reference: Optional[str] = None
    status: OrderStatus = OrderStatus.AUTHORIZED
    order_amount: int
    order_tax_amount: int
    purchase_currency: str
    items: list[PricedLine]
    customer_info: Optional[CustomerInfo] = None
    redirect_url: Optional[str] = None
    created_at: datetime


class OrderView(OrderRecord):
    """Cached order overlaid with the provider's live order state"""
    status: str
    fraud_status: Optional[str] = None
    expires_at: Optional[str] = None
    captures: list[dict[str, Any]] = []
    refunds: list[dict[str, Any]] = []


class CheckoutCartRequest(BaseModel):
    """Cart and customer fields shared by session and order creation.

    Either a full ``cart`` or the single-product ``productId`` /
    ``quantity`` pair is accepted.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    cart: Optional[list[CartLine]] = None
    product_id: Optional[str] = Field(default=None, alias="productId")
    quantity: int = Field(default=1, gt=0)
    customer_info: Optional[CustomerInfo] = Field(default=None, alias="customerInfo")

    def cart_lines(self) -> list[CartLine]:
        """Cart lines requested, empty if neither form was sent"""
        if self.cart:
            return list(self.cart)
        if self.product_id:
            return [CartLine(product_id=self.product_id, quantity=self.quantity)]
        return []


class CreateSessionRequest(CheckoutCartRequest):
    """Request to open a payment session"""


class CreateOrderRequest(CheckoutCartRequest):
    """Request to turn an authorization into an order"""
    authorization_token: Optional[str] = None


class SessionResponse(BaseModel):
    """Payment session handed to the widget"""
    session_id: str
    client_token: str
    payment_method_categories: list[dict[str, Any]] = []
    order_amount: int
    order_tax_amount: int
    purchase_currency: str


class CreateOrderResponse(BaseModel):
    """Order confirmation returned to the storefront"""
    order_id: str
    provider_reference: Optional[str] = None
    redirect_url: Optional[str] = None
    status: OrderStatus
    order_amount: int
    purchase_currency: str
