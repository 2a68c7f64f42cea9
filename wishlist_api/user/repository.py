from typing import Any, Dict
from fastapi import HTTPException,status
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from wishlist_api.schema.full_schema import User
from wishlist_api.user.constants import logger


async def list_users(session):
    stmt = select(User).order_by(User.id)
    res = await session.execute(stmt)
    return res.scalars().all()


async def get_user_or_404(session, user_id: int) -> User:
    user = await session.get(User, user_id)
    if not user:
        logger.warning("user.not_found", extra={"user_id": user_id})
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


async def user_id_by_email(session, email: str):
    stmt = select(User.id).where(User.email == email)
    res = await session.execute(stmt)
    return res.scalar_one_or_none()


def duplicate_email_error(email: str) -> HTTPException:
    logger.warning("user.duplicate", extra={"email": email})
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User with that email already exists")


async def patch_user(session, user_id: int, updates: Dict[str, Any]) -> User:
    user = await get_user_or_404(session, user_id)

    new_email = updates.get("email")
    if new_email and new_email != user.email and await user_id_by_email(session, new_email):
        raise duplicate_email_error(new_email)

    for field, value in updates.items():
        setattr(user, field, value)

    try:
        await session.flush()
    except IntegrityError:   # lost a race with a concurrent insert/update of the same email
        await session.rollback()
        raise duplicate_email_error(new_email)

    return user


async def delete_user(session, user_id: int) -> None:
    # wishlist, its items and both sides of subscriptions go with the user (ON DELETE CASCADE)
    res = await session.execute(delete(User).where(User.id == user_id))
    if res.rowcount == 0:
        logger.warning("user.delete.not_found", extra={"user_id": user_id})
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
