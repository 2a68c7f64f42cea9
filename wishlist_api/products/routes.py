from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from wishlist_api.common.models import MessageOut
from wishlist_api.common.utils import message_response
from wishlist_api.db.dependencies import get_session
from wishlist_api.products.constants import logger
from wishlist_api.products.models import ProductCreateIn, ProductOut, ProductUpdateIn
from wishlist_api.products.repository import create_product, delete_product, get_product_or_404, list_products, patch_product

products_router=APIRouter()


@products_router.get("", response_model=List[ProductOut], summary="List products, optionally filtered by name")
async def get_products(search: Optional[str] = Query(None, description="Substring of the product name"),
                       session: AsyncSession = Depends(get_session)):
    products = await list_products(session, search)
    return [ProductOut.model_validate(p) for p in products]


@products_router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED, summary="Create a product")
async def add_product(payload: ProductCreateIn, session: AsyncSession = Depends(get_session)):

    logger.info("product.create.attempt", extra={"merchant_id": payload.merchant_id})

    product = await create_product(session, payload)
    await session.commit()
    await session.refresh(product)

    logger.info("product.create.success", extra={"product_id": product.id, "merchant_id": product.merchant_id})
    return ProductOut.model_validate(product)


@products_router.get("/{product_id}", response_model=ProductOut, summary="Get a product by id")
async def get_product(product_id: int, session: AsyncSession = Depends(get_session)):
    product = await get_product_or_404(session, product_id)
    return ProductOut.model_validate(product)


@products_router.patch("/{product_id}", response_model=ProductOut, summary="Update the provided product fields")
async def update_product(product_id: int, payload: ProductUpdateIn, session: AsyncSession = Depends(get_session)):

    updates = payload.model_dump(exclude_unset=True)  # exclude optional fields from input
    product = await patch_product(session, product_id, updates)
    await session.commit()
    await session.refresh(product)

    logger.info("product.updated", extra={"product_id": product_id, "fields": sorted(updates)})
    return ProductOut.model_validate(product)


@products_router.delete("/{product_id}", response_model=MessageOut, summary="Delete a product")
async def remove_product(product_id: int, session: AsyncSession = Depends(get_session)):
    await delete_product(session, product_id)
    await session.commit()

    logger.info("product.deleted", extra={"product_id": product_id})
    return message_response("Product deleted")
