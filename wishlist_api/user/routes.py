from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from wishlist_api.common.models import MessageOut
from wishlist_api.common.utils import message_response
from wishlist_api.db.dependencies import get_session
from wishlist_api.user.constants import logger
from wishlist_api.user.models import UserCreateIn, UserOut, UserUpdateIn
from wishlist_api.user.repository import delete_user, get_user_or_404, list_users, patch_user
from wishlist_api.user.services import create_user_with_wishlist

user_router=APIRouter()


@user_router.get("", response_model=List[UserOut], summary="List all users")
async def get_users(session: AsyncSession = Depends(get_session)):
    users = await list_users(session)
    return [UserOut.model_validate(u) for u in users]


@user_router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED,
                  summary="Create a user together with an empty wishlist")
async def create_user(payload: UserCreateIn, session: AsyncSession = Depends(get_session)):

    logger.info("user.create.attempt", extra={"email": payload.email})
    user = await create_user_with_wishlist(session, payload)
    return UserOut.model_validate(user)


@user_router.get("/{user_id}", response_model=UserOut, summary="Get a user by id")
async def get_user(user_id: int, session: AsyncSession = Depends(get_session)):
    user = await get_user_or_404(session, user_id)
    return UserOut.model_validate(user)


@user_router.patch("/{user_id}", response_model=UserOut, summary="Update the provided user fields")
async def update_user(user_id: int, payload: UserUpdateIn, session: AsyncSession = Depends(get_session)):

    updates = payload.model_dump(exclude_unset=True)  # omitted fields stay untouched
    user = await patch_user(session, user_id, updates)
    await session.commit()
    await session.refresh(user)

    logger.info("user.updated", extra={"user_id": user_id, "fields": sorted(updates)})
    return UserOut.model_validate(user)


@user_router.delete("/{user_id}", response_model=MessageOut, summary="Delete a user")
async def remove_user(user_id: int, session: AsyncSession = Depends(get_session)):
    await delete_user(session, user_id)
    await session.commit()

    logger.info("user.deleted", extra={"user_id": user_id})
    return message_response("User deleted")
