from fastapi import FastAPI
from sqladmin import Admin, ModelView
from sqlalchemy.ext.asyncio import AsyncEngine
from wtforms import PasswordField
from wtforms.validators import Optional
from wishlist_api.auth.utils import hash_password
from wishlist_api.config.admin_config import admin_config
from wishlist_api.schema.full_schema import Merchant, Product, Subscription, User, WishList, WishListItem


class PasswordHashingView(ModelView):
    """
    The password input always renders empty (the stored hash never reaches the page).
    A typed value is hashed on save; an empty field on edit keeps the stored hash.
    """

    form_overrides = {"password": PasswordField}
    form_args = {"password": {"validators": [Optional()]}}

    async def on_model_change(self, data, model, is_created, request) -> None:
        password = data.get("password")
        if password:
            data["password"] = hash_password(password)
        elif is_created:
            raise ValueError("Password is required")
        else:
            data.pop("password", None)


class UserAdmin(PasswordHashingView, model=User):
    icon = "fa-solid fa-user"
    column_list = [User.id, User.name, User.email, User.date_of_birth, User.created_at]
    column_details_exclude_list = [User.password]
    column_searchable_list = [User.name, User.email]
    column_sortable_list = [User.id, User.name, User.created_at]
    form_excluded_columns = [User.wishlist, User.subscriptions, User.subscribers, User.created_at, User.updated_at]


class MerchantAdmin(PasswordHashingView, model=Merchant):
    icon = "fa-solid fa-store"
    column_list = [Merchant.id, Merchant.name, Merchant.login, Merchant.address, Merchant.created_at]
    column_details_exclude_list = [Merchant.password]
    column_searchable_list = [Merchant.name, Merchant.login]
    form_excluded_columns = [Merchant.products, Merchant.created_at, Merchant.updated_at]


class ProductAdmin(ModelView, model=Product):
    icon = "fa-solid fa-box"
    column_list = [Product.id, Product.name, Product.price, Product.merchant_id, Product.created_at]
    column_searchable_list = [Product.name]
    column_sortable_list = [Product.id, Product.name, Product.price]
    form_excluded_columns = [Product.wishlist_items, Product.created_at, Product.updated_at]


class WishListAdmin(ModelView, model=WishList):
    icon = "fa-solid fa-list"
    column_list = [WishList.id, WishList.user_id, WishList.title, WishList.is_public]
    form_excluded_columns = [WishList.items, WishList.created_at, WishList.updated_at]


class WishListItemAdmin(ModelView, model=WishListItem):
    icon = "fa-solid fa-heart"
    column_list = [WishListItem.id, WishListItem.wishlist_id, WishListItem.product_id, WishListItem.status]
    form_excluded_columns = [WishListItem.created_at, WishListItem.updated_at]


class SubscriptionAdmin(ModelView, model=Subscription):
    icon = "fa-solid fa-user-group"
    column_list = [Subscription.id, Subscription.user_id, Subscription.subscribed_to_user_id, Subscription.created_at]
    form_excluded_columns = [Subscription.created_at, Subscription.updated_at]


ADMIN_VIEWS = (UserAdmin, MerchantAdmin, ProductAdmin, WishListAdmin, WishListItemAdmin, SubscriptionAdmin)


def setup_admin(app: FastAPI, engine: AsyncEngine) -> Admin:
    admin = Admin(app, engine=engine, base_url=admin_config.ADMIN_PATH, title=admin_config.ADMIN_TITLE)
    for view in ADMIN_VIEWS:
        admin.add_view(view)
    return admin
