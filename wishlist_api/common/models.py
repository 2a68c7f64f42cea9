from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class ApiIn(BaseModel):
    """Request body: accepts both the wire alias (camelCase) and the python field name."""
    model_config = ConfigDict(populate_by_name=True)


class ApiUpdateIn(ApiIn):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")   # unknown fields raise 422 at pydantic level


class ApiOut(BaseModel):
    """Response body, built straight from ORM rows."""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class TimestampsOut(ApiOut):
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class MessageOut(BaseModel):
    message: str


def reject_explicit_null(value):
    # PATCH semantics: an omitted field is untouched, an explicit null on a required column is invalid
    if value is None:
        raise ValueError("field cannot be null")
    return value
