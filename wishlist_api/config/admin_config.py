from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENV: str = "dev"                # "dev" / "staging" / "prod"
    ENABLE_ADMIN: bool = True
    ADMIN_PATH: str = "/admin"
    ADMIN_TITLE: str = "Wishlist Admin"
    SERVICE_NAME: str = "wishlist-api"

    class Config:
        env_file = ".env"
        extra="ignore"

admin_config = Settings()
