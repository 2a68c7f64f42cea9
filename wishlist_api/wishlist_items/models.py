from typing import Optional
from pydantic import Field
from wishlist_api.common.models import ApiIn, ApiUpdateIn


class WishListItemCreateIn(ApiIn):
    product_id: int = Field(..., alias="productId", examples=[1])
    status: Optional[str] = Field(None, max_length=255, examples=["wanted"])


class WishListItemUpdateIn(ApiUpdateIn):
    status: Optional[str] = Field(None, max_length=255, examples=["received"])
