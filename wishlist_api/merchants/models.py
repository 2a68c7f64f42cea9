from typing import Optional
from pydantic import Field, field_validator
from wishlist_api.common.models import ApiIn, ApiUpdateIn, TimestampsOut, reject_explicit_null


class MerchantCreateIn(ApiIn):
    name: str = Field(..., min_length=1, max_length=255, examples=["Coffee House"])
    login: str = Field(..., min_length=1, max_length=255, examples=["coffee_house"])
    password: str = Field(..., min_length=1)
    img: Optional[str] = Field(None, max_length=1024)
    description: str = Field(..., examples=["Freshly roasted beans"])
    address: Optional[str] = Field(None, max_length=512)
    address_link: Optional[str] = Field(None, max_length=1024)


class MerchantUpdateIn(ApiUpdateIn):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    img: Optional[str] = Field(None, max_length=1024)
    description: Optional[str] = None
    address: Optional[str] = Field(None, max_length=512)
    address_link: Optional[str] = Field(None, max_length=1024)

    @field_validator("name", "description")
    @classmethod
    def required_not_null(cls, v):
        return reject_explicit_null(v)


class MerchantOut(TimestampsOut):
    id: int
    name: str
    login: str
    img: Optional[str] = None
    description: str
    address: Optional[str] = None
    address_link: Optional[str] = None
