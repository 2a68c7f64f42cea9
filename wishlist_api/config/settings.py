from typing import List, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    DATABASE_URL: Optional[str] = None     # full url wins over the DB_* parts below
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "wishlist"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_SSL: bool = False
    DB_ECHO: bool = False
    SYNC_SCHEMA: bool = True               # create missing tables on startup

    HOST: str = "0.0.0.0"
    PORT: int = 5001

    PASS_HASH_SCHEME: str = "pbkdf2_sha256"
    ENABLE_METRICS: bool = False

    CORS_ORIGINS: List[str] = ["*"]        # json list in env, e.g. CORS_ORIGINS=["https://shop.example"]

    class Config:
        env_file = ".env"
        extra="ignore"

config_settings = Settings()
