"""Demo product catalog"""

import json
import logging
from typing import Iterable, Optional

from ..models.product import Product

logger = logging.getLogger(__name__)

# Demo product catalog
PRODUCTS: dict[str, Product] = {
    "12345": Product(
        id="12345",
        name="Boots",
        description="These boots are made for walking",
        price=2500,  # 25.00 EUR
        currency="EUR",
        tax_rate=2500,  # 25% VAT
        image_url="https://placehold.co/400x400?text=Boots",
    ),
    "12346": Product(
        id="12346",
        name="Banana",
        description="Yellow banana, rich in potassium",
        price=80,  # 0.80 EUR
        currency="EUR",
        tax_rate=2500,
        image_url="https://placehold.co/400x400?text=Banana",
    ),
    "widget": Product(
        id="widget",
        name="Demo Widget",
        description="A sample product for payment demonstration",
        price=2500,
        currency="EUR",
        tax_rate=2500,
        image_url="https://placehold.co/300x200/007acc/ffffff?text=Demo+Widget",
    ),
}


class ProductCatalog:
    """Read-only product lookup, loaded once at startup"""

    def __init__(self, products: Optional[Iterable[Product]] = None):
        if products is None:
            self.products = PRODUCTS.copy()
        else:
            self.products = {product.id: product for product in products}

    @classmethod
    def from_file(cls, path: str) -> "ProductCatalog":
        """
        Load a catalog from a JSON file.

        The file holds either a list of product objects or a mapping of
        product id to product object (the id key is filled in if absent).
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if isinstance(data, dict):
            data = [{"id": product_id, **fields} for product_id, fields in data.items()]

        catalog = cls(Product.model_validate(entry) for entry in data)
        logger.info(f"Loaded {len(catalog.products)} products from {path}")
        return catalog

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        return self.products.get(product_id)

    def get_all_products(self) -> list[Product]:
        """Get all products"""
        return list(self.products.values())
