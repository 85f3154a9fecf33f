from functools import lru_cache
from typing import Literal
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "SteamySips"
    DEBUG: bool = False
    GIT_SHA: str = "unknown"

    # Logging (LOG_LEVEL empty -> DEBUG when DEBUG else INFO)
    LOG_LEVEL: str = ""
    LOG_COLORS: bool = True

    # Mongo
    MONGO_URI: str = ""
    MONGO_DB: str = "steamy"

    # Redis (optional, listing cache only)
    REDIS_URL: str = ""

    # Shop listing
    products_per_page: int = 4
    reviews_per_page: int = 2
    keyword_distance_threshold: int = 3

    # Cache config
    shop_cache_ttl: int = 60                     # 1 minute
    categories_cache_ttl: int = 60 * 60          # 1 hour

    # pydantic-settings config will be set dynamically in the factory below
    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Cache makes it cheap to inject via FastAPI dependencies.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")
    env_file = _env_file_for(app_env)
    return Settings(
                _env_file=env_file,  # load .env.development or .env.production
                _env_file_encoding="utf-8"
    )
