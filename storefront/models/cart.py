"""Cart models for the storefront"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Optional


class CartLine(BaseModel):
    """Product reference and quantity picked by the shopper.

    The product reference is read from ``productId``, ``product_id`` or a
    listed product's own ``id``, so a product from ``/api/products`` with a
    ``quantity`` added is a valid cart line. Numeric ids are read as strings.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    product_id: str = Field(
        validation_alias=AliasChoices("productId", "product_id", "id"),
        serialization_alias="productId",
    )
    quantity: int = Field(default=1, gt=0)


class PricedLine(BaseModel):
    """Cart line expanded with derived money amounts"""

    model_config = ConfigDict(frozen=True)

    product_id: str
    name: str
    quantity: int
    currency: str
    unit_price: int
    tax_rate: int
    subtotal: int
    tax_amount: int
    total: int
    image_url: Optional[str] = None


class PricedCart(BaseModel):
    """Priced cart with aggregate totals"""

    model_config = ConfigDict(frozen=True)

    lines: list[PricedLine]
    currency: str
    subtotal: int
    total_tax: int
    total: int
