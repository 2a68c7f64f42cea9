from datetime import date, datetime
from typing import List, Optional
from sqlalchemy import Boolean, CheckConstraint, Date, DateTime, ForeignKey, Integer, Text, false
from sqlmodel import Column, SQLModel, Field, Relationship, String
from wishlist_api.common.utils import now

# Every foreign key cascades on delete, relationships are passive so the db does the work:
#   users -> wishlists -> wishlist_items
#   users -> subscriptions (both sides)
#   merchants -> products -> wishlist_items


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(sa_column=Column(String(255), nullable=False))
    email: str = Field(sa_column=Column(String(320), nullable=False, unique=True, index=True))
    date_of_birth: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))
    img: Optional[str] = Field(default=None, sa_column=Column(String(1024), nullable=True))
    password: str = Field(sa_column=Column(String(255), nullable=False))   # passlib hash, never plain text
    created_at: datetime = Field(default_factory=now,
        sa_column=Column(DateTime(timezone=True), nullable=False,default=now))
    updated_at: datetime = Field(default_factory=now,
        sa_column=Column(DateTime(timezone=True), nullable=False,default=now, onupdate=now))

    wishlist: Optional["WishList"] = Relationship(back_populates="user",
        sa_relationship_kwargs={"uselist": False, "passive_deletes": True})
    subscriptions: List["Subscription"] = Relationship(back_populates="subscriber",
        sa_relationship_kwargs={"foreign_keys": "[Subscription.user_id]", "passive_deletes": True})
    subscribers: List["Subscription"] = Relationship(back_populates="subscribed_to",
        sa_relationship_kwargs={"foreign_keys": "[Subscription.subscribed_to_user_id]", "passive_deletes": True})


class Merchant(SQLModel, table=True):
    __tablename__ = "merchants"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(sa_column=Column(String(255), nullable=False, index=True))
    login: str = Field(sa_column=Column(String(255), nullable=False, unique=True))
    password: str = Field(sa_column=Column(String(255), nullable=False))
    img: Optional[str] = Field(default=None, sa_column=Column(String(1024), nullable=True))
    description: str = Field(sa_column=Column(Text(), nullable=False))
    address: Optional[str] = Field(default=None, sa_column=Column(String(512), nullable=True))
    address_link: Optional[str] = Field(default=None, sa_column=Column(String(1024), nullable=True))
    created_at: datetime = Field(default_factory=now,
        sa_column=Column(DateTime(timezone=True), nullable=False,default=now))
    updated_at: datetime = Field(default_factory=now,
        sa_column=Column(DateTime(timezone=True), nullable=False,default=now, onupdate=now))

    products: List["Product"] = Relationship(back_populates="merchant", sa_relationship_kwargs={"passive_deletes": True})


class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(sa_column=Column(String(255), nullable=False, index=True))
    description: str = Field(sa_column=Column(Text(), nullable=False))
    img: str = Field(sa_column=Column(String(1024), nullable=False))
    price: int = Field(sa_column=Column(Integer, nullable=False), description="Price in minor currency units")
    merchant_id: int = Field(sa_column=Column(Integer, ForeignKey("merchants.id", ondelete="CASCADE"), index=True, nullable=False))
    created_at: datetime = Field(default_factory=now,
        sa_column=Column(DateTime(timezone=True), nullable=False,default=now))
    updated_at: datetime = Field(default_factory=now,
        sa_column=Column(DateTime(timezone=True), nullable=False,default=now, onupdate=now))

    merchant: Optional[Merchant] = Relationship(back_populates="products")
    wishlist_items: List["WishListItem"] = Relationship(back_populates="product", sa_relationship_kwargs={"passive_deletes": True})

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_product_price_non_negative"),
    )


# user -> wishlist (1:1), the unique user_id backs the "one wishlist per user" check
class WishList(SQLModel, table=True):
    __tablename__ = "wishlists"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(sa_column=Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, index=True, nullable=False))
    title: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    is_public: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False, server_default=false()))
    created_at: datetime = Field(default_factory=now,
        sa_column=Column(DateTime(timezone=True), nullable=False,default=now))
    updated_at: datetime = Field(default_factory=now,
        sa_column=Column(DateTime(timezone=True), nullable=False,default=now, onupdate=now))

    user: Optional[User] = Relationship(back_populates="wishlist")
    items: List["WishListItem"] = Relationship(back_populates="wishlist",
        sa_relationship_kwargs={"passive_deletes": True, "order_by": "WishListItem.id"})


# WishListItem is the join table for wishlist <--> product, status is opaque client data
class WishListItem(SQLModel, table=True):
    __tablename__ = "wishlist_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    wishlist_id: int = Field(sa_column=Column(Integer, ForeignKey("wishlists.id", ondelete="CASCADE"), index=True, nullable=False))
    product_id: int = Field(sa_column=Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), index=True, nullable=False))
    status: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    created_at: datetime = Field(default_factory=now,
        sa_column=Column(DateTime(timezone=True), nullable=False,default=now))
    updated_at: datetime = Field(default_factory=now,
        sa_column=Column(DateTime(timezone=True), nullable=False,default=now, onupdate=now))

    wishlist: Optional[WishList] = Relationship(back_populates="items")
    product: Optional[Product] = Relationship(back_populates="wishlist_items")


# directed follow: user_id follows subscribed_to_user_id
class Subscription(SQLModel, table=True):
    __tablename__ = "subscriptions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(sa_column=Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False))
    subscribed_to_user_id: int = Field(sa_column=Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False))
    created_at: datetime = Field(default_factory=now,
        sa_column=Column(DateTime(timezone=True), nullable=False,default=now))
    updated_at: datetime = Field(default_factory=now,
        sa_column=Column(DateTime(timezone=True), nullable=False,default=now, onupdate=now))

    subscriber: Optional[User] = Relationship(back_populates="subscriptions",
        sa_relationship_kwargs={"foreign_keys": "[Subscription.user_id]"})
    subscribed_to: Optional[User] = Relationship(back_populates="subscribers",
        sa_relationship_kwargs={"foreign_keys": "[Subscription.subscribed_to_user_id]"})

    __table_args__ = (
        CheckConstraint("user_id <> subscribed_to_user_id", name="ck_subscription_not_self"),
    )
