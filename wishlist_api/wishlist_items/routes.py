from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from wishlist_api.common.models import MessageOut
from wishlist_api.common.utils import message_response
from wishlist_api.db.dependencies import get_session
from wishlist_api.wishlist.constants import logger
from wishlist_api.wishlist.models import WishListItemOut, WishListItemWithProductOut
from wishlist_api.wishlist.repository import get_wishlist_or_404
from wishlist_api.wishlist_items.models import WishListItemCreateIn, WishListItemUpdateIn
from wishlist_api.wishlist_items.repository import create_item, delete_item, get_owned_item_or_404, list_items, patch_item

wishlist_items_router=APIRouter()


@wishlist_items_router.get("/{user_id}/wishlist/items", response_model=List[WishListItemWithProductOut],
                           summary="List the items of a user's wishlist")
async def get_items(user_id: int, session: AsyncSession = Depends(get_session)):
    wishlist = await get_wishlist_or_404(session, user_id)
    items = await list_items(session, wishlist)
    return [WishListItemWithProductOut.model_validate(i) for i in items]


@wishlist_items_router.post("/{user_id}/wishlist/items", response_model=WishListItemOut,
                            status_code=status.HTTP_201_CREATED, summary="Add a product to a user's wishlist")
async def add_item(user_id: int, payload: WishListItemCreateIn, session: AsyncSession = Depends(get_session)):

    wishlist = await get_wishlist_or_404(session, user_id)
    item = await create_item(session, wishlist, payload)
    await session.commit()
    await session.refresh(item)

    logger.info("wishlist.item.added", extra={"user_id": user_id, "item_id": item.id, "product_id": item.product_id})
    return WishListItemOut.model_validate(item)


@wishlist_items_router.get("/{user_id}/wishlist/items/{item_id}", response_model=WishListItemWithProductOut,
                           summary="Get one item of a user's wishlist")
async def get_item(user_id: int, item_id: int, session: AsyncSession = Depends(get_session)):
    wishlist = await get_wishlist_or_404(session, user_id)
    item = await get_owned_item_or_404(session, wishlist, item_id, with_product=True)
    return WishListItemWithProductOut.model_validate(item)


@wishlist_items_router.patch("/{user_id}/wishlist/items/{item_id}", response_model=WishListItemOut,
                             summary="Update the status of a wishlist item")
async def update_item(user_id: int, item_id: int, payload: WishListItemUpdateIn,
                      session: AsyncSession = Depends(get_session)):

    wishlist = await get_wishlist_or_404(session, user_id)
    updates = payload.model_dump(exclude_unset=True)
    item = await patch_item(session, wishlist, item_id, updates)
    await session.commit()
    await session.refresh(item)

    logger.info("wishlist.item.updated", extra={"user_id": user_id, "item_id": item_id})
    return WishListItemOut.model_validate(item)


@wishlist_items_router.delete("/{user_id}/wishlist/items/{item_id}", response_model=MessageOut,
                              summary="Remove an item from a user's wishlist")
async def remove_item(user_id: int, item_id: int, session: AsyncSession = Depends(get_session)):
    wishlist = await get_wishlist_or_404(session, user_id)
    await delete_item(session, wishlist, item_id)
    await session.commit()

    logger.info("wishlist.item.removed", extra={"user_id": user_id, "item_id": item_id})
    return message_response("Item removed from wishlist")
