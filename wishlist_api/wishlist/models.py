from typing import List, Optional
from pydantic import Field, field_validator
from wishlist_api.common.models import ApiUpdateIn, TimestampsOut, reject_explicit_null
from wishlist_api.products.models import ProductOut


class WishListUpdateIn(ApiUpdateIn):
    title: Optional[str] = Field(None, max_length=255, examples=["Birthday"])
    is_public: Optional[bool] = Field(None, alias="isPublic")

    @field_validator("is_public")
    @classmethod
    def is_public_not_null(cls, v):
        return reject_explicit_null(v)


class WishListOut(TimestampsOut):
    id: int
    user_id: int = Field(alias="userId")
    title: Optional[str] = None
    is_public: bool = Field(alias="isPublic")


class WishListItemOut(TimestampsOut):
    id: int
    wishlist_id: int = Field(alias="wishListId")
    product_id: int = Field(alias="productId")
    status: Optional[str] = None


class WishListItemWithProductOut(WishListItemOut):
    product: ProductOut


class WishListDetailOut(WishListOut):
    items: List[WishListItemWithProductOut] = []
