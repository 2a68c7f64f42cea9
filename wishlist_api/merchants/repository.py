from typing import Any, Dict, Optional
from fastapi import HTTPException,status
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from wishlist_api.auth.utils import hash_password
from wishlist_api.merchants.constants import logger
from wishlist_api.merchants.models import MerchantCreateIn
from wishlist_api.schema.full_schema import Merchant, Product


async def list_merchants(session, search: Optional[str] = None):
    stmt = select(Merchant)
    if search:
        stmt = stmt.where(Merchant.name.contains(search, autoescape=True))
    stmt = stmt.order_by(Merchant.id)

    res = await session.execute(stmt)
    return res.scalars().all()


async def get_merchant_or_404(session, merchant_id: int) -> Merchant:
    merchant = await session.get(Merchant, merchant_id)
    if not merchant:
        logger.warning("merchant.not_found", extra={"merchant_id": merchant_id})
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Merchant not found")
    return merchant


async def merchant_id_by_login(session, login: str):
    stmt = select(Merchant.id).where(Merchant.login == login)
    res = await session.execute(stmt)
    return res.scalar_one_or_none()


def duplicate_login_error(login: str) -> HTTPException:
    logger.warning("merchant.duplicate_login", extra={"login": login})
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Merchant with that login already exists")


async def create_merchant(session, payload: MerchantCreateIn) -> Merchant:
    if await merchant_id_by_login(session, payload.login):
        raise duplicate_login_error(payload.login)

    values = payload.model_dump()
    values["password"] = hash_password(payload.password)
    merchant = Merchant(**values)
    session.add(merchant)

    try:
        await session.flush()
    except IntegrityError:
        await session.rollback()
        raise duplicate_login_error(payload.login)

    return merchant


async def patch_merchant(session, merchant_id: int, updates: Dict[str, Any]) -> Merchant:
    merchant = await get_merchant_or_404(session, merchant_id)
    for field, value in updates.items():
        setattr(merchant, field, value)
    await session.flush()
    return merchant


async def delete_merchant(session, merchant_id: int) -> None:
    # products (and wishlist items pointing at them) cascade
    res = await session.execute(delete(Merchant).where(Merchant.id == merchant_id))
    if res.rowcount == 0:
        logger.warning("merchant.delete.not_found", extra={"merchant_id": merchant_id})
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Merchant not found")


async def list_merchant_products(session, merchant_id: int):
    await get_merchant_or_404(session, merchant_id)

    stmt = select(Product).where(Product.merchant_id == merchant_id).order_by(Product.id)
    res = await session.execute(stmt)
    return res.scalars().all()
