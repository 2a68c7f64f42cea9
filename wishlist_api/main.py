from contextlib import asynccontextmanager
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from wishlist_api.admin.views import setup_admin
from wishlist_api.api import cur_version
from wishlist_api.api.routers import public_routers
from wishlist_api.common.custom_exceptions import register_all_exceptions
from wishlist_api.common.logging_setup import get_logger, setup_logging, shutdown_logging
from wishlist_api.config.admin_config import admin_config
from wishlist_api.config.settings import config_settings
from wishlist_api.db.connection import async_engine
from wishlist_api.db.utils import check_connection, sync_schema
from wishlist_api.middlewares.request_id_middleware import RequestIdMiddleware
from metrics.custom_instrumentator import build_instrumentator

logger = get_logger("wishlist_api.app")


@asynccontextmanager
async def app_lifespan(app: FastAPI):
    setup_logging()

    # a bad DATABASE_URL fails startup instead of the first request
    await check_connection(async_engine)

    if config_settings.SYNC_SCHEMA:
        await sync_schema(async_engine)
        logger.info("db.schema.synchronized")

    logger.info("app.started", extra={"env": admin_config.ENV, "admin_enabled": admin_config.ENABLE_ADMIN})
    try:
        yield
    finally:
        # at this point new requests accept has been stopped already
        await async_engine.dispose()
        logger.info("app.stopped")
        shutdown_logging()


def create_app():
    app=FastAPI(
        title="Wishlist",
        version=cur_version,
        description="Users, merchants, products, wishlists and subscriptions between users.",
        docs_url="/api-docs",
        lifespan=app_lifespan)

    app.include_router(public_routers)

    if admin_config.ENABLE_ADMIN:
        setup_admin(app, async_engine)      # mounts /admin

    if config_settings.ENABLE_METRICS:
        build_instrumentator().instrument(app).expose(app, endpoint="/metrics")

    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    register_all_exceptions(app)

    return app

app=create_app()


def run():
    uvicorn.run("wishlist_api.main:app", host=config_settings.HOST, port=config_settings.PORT)
