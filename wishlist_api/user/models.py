from datetime import date
from typing import Optional
from pydantic import Field, field_validator
from wishlist_api.auth.utils import normalize_email_address
from wishlist_api.common.models import ApiIn, ApiUpdateIn, ApiOut, TimestampsOut, reject_explicit_null


class UserCreateIn(ApiIn):
    name: str = Field(..., min_length=1, max_length=255, examples=["John Doe"])
    email: str = Field(..., max_length=320, examples=["john@example.com"])
    password: str = Field(..., min_length=1, examples=["qwerty123"])
    date_of_birth: Optional[date] = Field(None, examples=["1990-01-01"])
    img: Optional[str] = Field(None, max_length=1024, examples=["http://example.com/avatar.png"])

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return normalize_email_address(v)


class UserUpdateIn(ApiUpdateIn):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=320)
    date_of_birth: Optional[date] = None
    img: Optional[str] = Field(None, max_length=1024)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v):
        return reject_explicit_null(v)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return normalize_email_address(reject_explicit_null(v))


class UserOut(TimestampsOut):
    id: int
    name: str
    email: str
    date_of_birth: Optional[date] = None
    img: Optional[str] = None


class UserPublicOut(ApiOut):
    id: int
    name: str
    email: str
