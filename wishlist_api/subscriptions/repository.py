from fastapi import HTTPException,status
from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload
from wishlist_api.schema.full_schema import Subscription, User
from wishlist_api.subscriptions.constants import logger
from wishlist_api.user.repository import get_user_or_404


async def list_following(session, user_id: int):
    stmt = (
        select(Subscription)
        .options(selectinload(Subscription.subscribed_to).load_only(User.id, User.name, User.email))
        .where(Subscription.user_id == user_id)
        .order_by(Subscription.id)
    )
    res = await session.execute(stmt)
    return res.scalars().all()


async def list_followers(session, user_id: int):
    stmt = (
        select(Subscription)
        .options(selectinload(Subscription.subscriber).load_only(User.id, User.name, User.email))
        .where(Subscription.subscribed_to_user_id == user_id)
        .order_by(Subscription.id)
    )
    res = await session.execute(stmt)
    return res.scalars().all()


async def create_subscription(session, user_id: int, subscribed_to_user_id: int) -> Subscription:
    if user_id == subscribed_to_user_id:
        logger.warning("subscription.self", extra={"user_id": user_id})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot subscribe to oneself")

    await get_user_or_404(session, user_id)
    await get_user_or_404(session, subscribed_to_user_id)

    sub = Subscription(user_id=user_id, subscribed_to_user_id=subscribed_to_user_id)
    session.add(sub)
    await session.flush()
    return sub


async def delete_subscription(session, user_id: int, subscription_id: int) -> None:
    # only the subscriber can drop the subscription
    stmt = delete(Subscription).where(Subscription.id == subscription_id, Subscription.user_id == user_id)
    res = await session.execute(stmt)
    if res.rowcount == 0:
        logger.warning("subscription.not_found", extra={"user_id": user_id, "subscription_id": subscription_id})
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND,
                            detail="Subscription not found or not belongs to this user")
