from typing import Any, Dict
from fastapi import HTTPException,status
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
from wishlist_api.schema.full_schema import WishList, WishListItem
from wishlist_api.user.repository import get_user_or_404
from wishlist_api.wishlist.constants import logger


def wishlist_not_found(user_id: int) -> HTTPException:
    logger.warning("wishlist.not_found", extra={"user_id": user_id})
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="WishList not found")


def wishlist_exists(user_id: int) -> HTTPException:
    logger.warning("wishlist.duplicate", extra={"user_id": user_id})
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail="WishList already exists")


async def find_wishlist_by_user(session, user_id: int, with_items: bool = False):
    stmt = select(WishList).where(WishList.user_id == user_id)
    if with_items:
        # wishlist -> items -> product, shaped exactly like the response
        stmt = stmt.options(selectinload(WishList.items).selectinload(WishListItem.product))

    res = await session.execute(stmt)
    return res.scalar_one_or_none()


async def get_wishlist_or_404(session, user_id: int, with_items: bool = False) -> WishList:
    wishlist = await find_wishlist_by_user(session, user_id, with_items=with_items)
    if not wishlist:
        raise wishlist_not_found(user_id)
    return wishlist


async def create_wishlist(session, user_id: int) -> WishList:
    if await find_wishlist_by_user(session, user_id):
        raise wishlist_exists(user_id)

    await get_user_or_404(session, user_id)

    wishlist = WishList(user_id=user_id)
    session.add(wishlist)
    try:
        await session.flush()
    except IntegrityError:   # unique user_id: a concurrent create won
        await session.rollback()
        raise wishlist_exists(user_id)

    return wishlist


async def patch_wishlist(session, user_id: int, updates: Dict[str, Any]) -> WishList:
    wishlist = await get_wishlist_or_404(session, user_id)
    for field, value in updates.items():
        setattr(wishlist, field, value)
    await session.flush()
    return wishlist


async def delete_wishlist(session, user_id: int) -> None:
    # items cascade with the wishlist
    res = await session.execute(delete(WishList).where(WishList.user_id == user_id))
    if res.rowcount == 0:
        raise wishlist_not_found(user_id)
