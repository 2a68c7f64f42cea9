from typing import Any, Dict, Optional
from fastapi import HTTPException,status
from sqlalchemy import delete, select
from wishlist_api.merchants.repository import get_merchant_or_404
from wishlist_api.products.constants import logger
from wishlist_api.products.models import ProductCreateIn
from wishlist_api.schema.full_schema import Product


async def list_products(session, search: Optional[str] = None):
    stmt = select(Product)
    if search:
        stmt = stmt.where(Product.name.contains(search, autoescape=True))
    stmt = stmt.order_by(Product.id)

    res = await session.execute(stmt)
    return res.scalars().all()


async def get_product_or_404(session, product_id: int) -> Product:
    product = await session.get(Product, product_id)
    if not product:
        logger.warning("product.not_found", extra={"product_id": product_id})
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


async def create_product(session, payload: ProductCreateIn) -> Product:
    # no dangling merchant_id: the owner has to exist
    await get_merchant_or_404(session, payload.merchant_id)

    product = Product(**payload.model_dump())
    session.add(product)
    await session.flush()
    return product


async def patch_product(session, product_id: int, updates: Dict[str, Any]) -> Product:
    product = await get_product_or_404(session, product_id)
    for field, value in updates.items():
        setattr(product, field, value)
    await session.flush()
    return product


async def delete_product(session, product_id: int) -> None:
    res = await session.execute(delete(Product).where(Product.id == product_id))
    if res.rowcount == 0:
        logger.warning("product.delete.not_found", extra={"product_id": product_id})
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
