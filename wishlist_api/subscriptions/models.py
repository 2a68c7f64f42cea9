from pydantic import Field
from wishlist_api.common.models import ApiIn, TimestampsOut
from wishlist_api.user.models import UserPublicOut


class SubscriptionCreateIn(ApiIn):
    subscribed_to_user_id: int = Field(..., alias="subscribedToUserId", examples=[2])


class SubscriptionOut(TimestampsOut):
    id: int
    user_id: int = Field(alias="userId")
    subscribed_to_user_id: int = Field(alias="subscribedToUserId")


class FollowingOut(SubscriptionOut):
    """A subscription seen from the subscriber: who they follow."""
    subscribed_to: UserPublicOut = Field(alias="subscribedTo")


class FollowerOut(SubscriptionOut):
    """A subscription seen from the followed user: who follows them."""
    subscriber: UserPublicOut
