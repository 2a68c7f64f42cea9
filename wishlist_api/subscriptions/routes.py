from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from wishlist_api.common.models import MessageOut
from wishlist_api.common.utils import message_response
from wishlist_api.db.dependencies import get_session
from wishlist_api.subscriptions.constants import logger
from wishlist_api.subscriptions.models import FollowerOut, FollowingOut, SubscriptionCreateIn, SubscriptionOut
from wishlist_api.subscriptions.repository import create_subscription, delete_subscription, list_followers, list_following

subscriptions_router=APIRouter()


@subscriptions_router.get("/{user_id}/subscriptions", response_model=List[FollowingOut],
                          summary="Users this user is subscribed to")
async def get_subscriptions(user_id: int, session: AsyncSession = Depends(get_session)):
    subs = await list_following(session, user_id)
    return [FollowingOut.model_validate(s) for s in subs]


@subscriptions_router.post("/{user_id}/subscriptions", response_model=SubscriptionOut,
                           status_code=status.HTTP_201_CREATED, summary="Subscribe this user to another user")
async def subscribe(user_id: int, payload: SubscriptionCreateIn, session: AsyncSession = Depends(get_session)):

    sub = await create_subscription(session, user_id, payload.subscribed_to_user_id)
    await session.commit()
    await session.refresh(sub)

    logger.info("subscription.created",
                extra={"subscription_id": sub.id, "user_id": user_id, "subscribed_to_user_id": sub.subscribed_to_user_id})
    return SubscriptionOut.model_validate(sub)


@subscriptions_router.get("/{user_id}/subscribers", response_model=List[FollowerOut],
                          summary="Users subscribed to this user")
async def get_subscribers(user_id: int, session: AsyncSession = Depends(get_session)):
    subs = await list_followers(session, user_id)
    return [FollowerOut.model_validate(s) for s in subs]


@subscriptions_router.delete("/{user_id}/subscriptions/{subscription_id}", response_model=MessageOut,
                             summary="Unsubscribe")
async def unsubscribe(user_id: int, subscription_id: int, session: AsyncSession = Depends(get_session)):
    await delete_subscription(session, user_id, subscription_id)
    await session.commit()

    logger.info("subscription.deleted", extra={"user_id": user_id, "subscription_id": subscription_id})
    return message_response("Unsubscribed")
