from sqlalchemy.exc import IntegrityError
from wishlist_api.auth.utils import hash_password
from wishlist_api.schema.full_schema import User, WishList
from wishlist_api.user.constants import logger
from wishlist_api.user.models import UserCreateIn
from wishlist_api.user.repository import duplicate_email_error, user_id_by_email


async def create_user_with_wishlist(session, payload: UserCreateIn) -> User:
    """Insert the user and its empty wishlist in one transaction: both rows exist or neither does."""

    if await user_id_by_email(session, payload.email):
        raise duplicate_email_error(payload.email)

    try:
        user = User(
            name=payload.name,
            email=payload.email,
            password=hash_password(payload.password),
            date_of_birth=payload.date_of_birth,
            img=payload.img,
        )
        session.add(user)
        await session.flush()

        session.add(WishList(user_id=user.id))

        await session.commit()
        await session.refresh(user)
    except IntegrityError:
        await session.rollback()
        # 409 only when the email is taken now, other integrity failures propagate
        if await user_id_by_email(session, payload.email):
            raise duplicate_email_error(payload.email)
        logger.error("user.create.failed", extra={"email": payload.email})
        raise

    logger.info("user.created", extra={"user_id": user.id, "email": user.email})
    return user
