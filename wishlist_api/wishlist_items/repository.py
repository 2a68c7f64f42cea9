from typing import Any, Dict
from fastapi import HTTPException,status
from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload
from wishlist_api.products.repository import get_product_or_404
from wishlist_api.schema.full_schema import WishList, WishListItem
from wishlist_api.wishlist.constants import logger
from wishlist_api.wishlist_items.models import WishListItemCreateIn


def item_not_found(wishlist: WishList, item_id: int) -> HTTPException:
    logger.warning("wishlist.item.not_found", extra={"wishlist_id": wishlist.id, "item_id": item_id})
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")


async def list_items(session, wishlist: WishList):
    stmt = (
        select(WishListItem)
        .options(selectinload(WishListItem.product))
        .where(WishListItem.wishlist_id == wishlist.id)
        .order_by(WishListItem.id)
    )
    res = await session.execute(stmt)
    return res.scalars().all()


async def get_owned_item_or_404(session, wishlist: WishList, item_id: int, with_product: bool = False) -> WishListItem:
    # an item of someone else's wishlist is reported exactly like a missing one
    stmt = select(WishListItem).where(WishListItem.id == item_id, WishListItem.wishlist_id == wishlist.id)
    if with_product:
        stmt = stmt.options(selectinload(WishListItem.product))

    res = await session.execute(stmt)
    item = res.scalar_one_or_none()
    if not item:
        raise item_not_found(wishlist, item_id)
    return item


async def create_item(session, wishlist: WishList, payload: WishListItemCreateIn) -> WishListItem:
    await get_product_or_404(session, payload.product_id)

    item = WishListItem(wishlist_id=wishlist.id, product_id=payload.product_id, status=payload.status)
    session.add(item)
    await session.flush()
    return item


async def patch_item(session, wishlist: WishList, item_id: int, updates: Dict[str, Any]) -> WishListItem:
    item = await get_owned_item_or_404(session, wishlist, item_id)
    for field, value in updates.items():
        setattr(item, field, value)
    await session.flush()
    return item


async def delete_item(session, wishlist: WishList, item_id: int) -> None:
    stmt = delete(WishListItem).where(WishListItem.id == item_id, WishListItem.wishlist_id == wishlist.id)
    res = await session.execute(stmt)
    if res.rowcount == 0:
        raise item_not_found(wishlist, item_id)
