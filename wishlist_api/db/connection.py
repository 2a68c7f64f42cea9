from sqlalchemy.ext.asyncio import create_async_engine,async_sessionmaker,AsyncSession
from wishlist_api.config.settings import config_settings
from wishlist_api.db.utils import build_db_url, db_connect_args, enable_sqlite_foreign_keys

DATABASE_URL=build_db_url(config_settings)

async_engine=create_async_engine(DATABASE_URL,echo=config_settings.DB_ECHO,
                                 connect_args=db_connect_args(config_settings,DATABASE_URL))
enable_sqlite_foreign_keys(async_engine)

async_session=async_sessionmaker(bind=async_engine,class_=AsyncSession,expire_on_commit=False)
