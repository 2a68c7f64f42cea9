from fastapi import APIRouter
from wishlist_api.api import version_prefix
from wishlist_api.common.routes import home_router
from wishlist_api.merchants.routes import merchants_router
from wishlist_api.products.routes import products_router
from wishlist_api.subscriptions.routes import subscriptions_router
from wishlist_api.user.routes import user_router
from wishlist_api.wishlist.routes import wishlist_router
from wishlist_api.wishlist_items.routes import wishlist_items_router


public_routers = APIRouter(prefix=version_prefix)


public_routers.include_router(user_router, prefix="/users",tags=["users"])
public_routers.include_router(wishlist_router, prefix="/users",tags=["wishlist"])
public_routers.include_router(wishlist_items_router, prefix="/users",tags=["wishlist-items"])
public_routers.include_router(subscriptions_router, prefix="/users",tags=["subscriptions"])
public_routers.include_router(merchants_router, prefix="/merchants",tags=["merchants"])
public_routers.include_router(products_router, prefix="/products",tags=["products"])
public_routers.include_router(home_router,tags=["home"])
