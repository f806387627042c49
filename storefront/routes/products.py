"""Product API routes for the storefront"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from ..models.product import Product, ProductListResponse
from ..database.products import ProductCatalog
from ..dependencies import get_catalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=ProductListResponse)
async def list_products(catalog: ProductCatalog = Depends(get_catalog)):
    """List the demo products"""
    logger.debug("Fetching demo products")
    return ProductListResponse(products=catalog.get_all_products())


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    catalog: ProductCatalog = Depends(get_catalog),
):
    """Get a product by ID"""
    product = catalog.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
