"""Product models for the storefront"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Product(BaseModel):
    """Product in the catalog.

    Prices are integer minor units (cents) and tax rates are basis points,
    so 2500 means 25.00 EUR at 25% VAT.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    price: int = Field(ge=0)
    currency: str = Field(min_length=3, max_length=3)
    tax_rate: int = Field(ge=0)
    image_url: Optional[str] = None


class ProductListResponse(BaseModel):
    """Product listing API response"""
    products: list[Product]
