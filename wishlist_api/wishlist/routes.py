from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from wishlist_api.common.models import MessageOut
from wishlist_api.common.utils import message_response
from wishlist_api.db.dependencies import get_session
from wishlist_api.wishlist.constants import logger
from wishlist_api.wishlist.models import WishListDetailOut, WishListOut, WishListUpdateIn
from wishlist_api.wishlist.repository import create_wishlist, delete_wishlist, get_wishlist_or_404, patch_wishlist

wishlist_router=APIRouter()


@wishlist_router.get("/{user_id}/wishlist", response_model=WishListDetailOut,
                     summary="Get a user's wishlist with its items and their products")
async def get_wishlist(user_id: int, session: AsyncSession = Depends(get_session)):
    wishlist = await get_wishlist_or_404(session, user_id, with_items=True)
    return WishListDetailOut.model_validate(wishlist)


@wishlist_router.post("/{user_id}/wishlist", response_model=WishListOut, status_code=status.HTTP_201_CREATED,
                      summary="Create a wishlist for a user that has none")
async def add_wishlist(user_id: int, session: AsyncSession = Depends(get_session)):

    wishlist = await create_wishlist(session, user_id)
    await session.commit()
    await session.refresh(wishlist)

    logger.info("wishlist.created", extra={"user_id": user_id, "wishlist_id": wishlist.id})
    return WishListOut.model_validate(wishlist)


@wishlist_router.patch("/{user_id}/wishlist", response_model=WishListOut, summary="Update wishlist title / visibility")
async def update_wishlist(user_id: int, payload: WishListUpdateIn, session: AsyncSession = Depends(get_session)):

    updates = payload.model_dump(exclude_unset=True)
    wishlist = await patch_wishlist(session, user_id, updates)
    await session.commit()
    await session.refresh(wishlist)

    logger.info("wishlist.updated", extra={"user_id": user_id, "fields": sorted(updates)})
    return WishListOut.model_validate(wishlist)


@wishlist_router.delete("/{user_id}/wishlist", response_model=MessageOut, summary="Delete a user's wishlist")
async def remove_wishlist(user_id: int, session: AsyncSession = Depends(get_session)):
    await delete_wishlist(session, user_id)
    await session.commit()

    logger.info("wishlist.deleted", extra={"user_id": user_id})
    return message_response("WishList deleted")
