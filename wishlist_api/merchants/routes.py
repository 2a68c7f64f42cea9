from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from wishlist_api.common.models import MessageOut
from wishlist_api.common.utils import message_response
from wishlist_api.db.dependencies import get_session
from wishlist_api.merchants.constants import logger
from wishlist_api.merchants.models import MerchantCreateIn, MerchantOut, MerchantUpdateIn
from wishlist_api.merchants.repository import (create_merchant, delete_merchant, get_merchant_or_404,
                                               list_merchant_products, list_merchants, patch_merchant)
from wishlist_api.products.models import ProductOut

merchants_router=APIRouter()


@merchants_router.get("", response_model=List[MerchantOut], summary="List merchants, optionally filtered by name")
async def get_merchants(search: Optional[str] = Query(None, description="Substring of the merchant name"),
                        session: AsyncSession = Depends(get_session)):
    merchants = await list_merchants(session, search)
    return [MerchantOut.model_validate(m) for m in merchants]


@merchants_router.post("", response_model=MerchantOut, status_code=status.HTTP_201_CREATED, summary="Create a merchant")
async def add_merchant(payload: MerchantCreateIn, session: AsyncSession = Depends(get_session)):

    merchant = await create_merchant(session, payload)
    await session.commit()
    await session.refresh(merchant)

    logger.info("merchant.created", extra={"merchant_id": merchant.id, "login": merchant.login})
    return MerchantOut.model_validate(merchant)


@merchants_router.get("/{merchant_id}", response_model=MerchantOut, summary="Get a merchant by id")
async def get_merchant(merchant_id: int, session: AsyncSession = Depends(get_session)):
    merchant = await get_merchant_or_404(session, merchant_id)
    return MerchantOut.model_validate(merchant)


@merchants_router.patch("/{merchant_id}", response_model=MerchantOut, summary="Update the provided merchant fields")
async def update_merchant(merchant_id: int, payload: MerchantUpdateIn, session: AsyncSession = Depends(get_session)):

    updates = payload.model_dump(exclude_unset=True)
    merchant = await patch_merchant(session, merchant_id, updates)
    await session.commit()
    await session.refresh(merchant)

    logger.info("merchant.updated", extra={"merchant_id": merchant_id, "fields": sorted(updates)})
    return MerchantOut.model_validate(merchant)


@merchants_router.delete("/{merchant_id}", response_model=MessageOut, summary="Delete a merchant")
async def remove_merchant(merchant_id: int, session: AsyncSession = Depends(get_session)):
    await delete_merchant(session, merchant_id)
    await session.commit()

    logger.info("merchant.deleted", extra={"merchant_id": merchant_id})
    return message_response("Merchant deleted")


@merchants_router.get("/{merchant_id}/products", response_model=List[ProductOut], summary="List a merchant's products")
async def get_merchant_products(merchant_id: int, session: AsyncSession = Depends(get_session)):
    products = await list_merchant_products(session, merchant_id)
    return [ProductOut.model_validate(p) for p in products]
