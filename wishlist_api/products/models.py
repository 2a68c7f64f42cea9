from typing import Optional
from pydantic import Field, field_validator
from wishlist_api.common.models import ApiIn, ApiUpdateIn, TimestampsOut, reject_explicit_null


class ProductCreateIn(ApiIn):
    name: str = Field(..., min_length=1, max_length=255, examples=["Espresso beans 1kg"])
    description: str = Field(..., examples=["Dark roast"])
    img: str = Field(..., max_length=1024, examples=["http://example.com/beans.png"])
    price: int = Field(..., ge=0, description="Price in minor currency units", examples=[1999])
    merchant_id: int = Field(..., alias="merchantId", examples=[1])


class ProductUpdateIn(ApiUpdateIn):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    img: Optional[str] = Field(None, max_length=1024)
    price: Optional[int] = Field(None, ge=0)

    @field_validator("name", "description", "img", "price")
    @classmethod
    def required_not_null(cls, v):
        return reject_explicit_null(v)


class ProductOut(TimestampsOut):
    id: int
    name: str
    description: str
    img: str
    price: int
    merchant_id: int = Field(alias="merchantId")
