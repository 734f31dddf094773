import os
from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict

current_file_dir = os.path.dirname(os.path.realpath(__file__))
env_path = os.path.join(current_file_dir, "..", "..", "..", ".env")


class _BaseSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=env_path, env_file_encoding="utf-8", extra="ignore")


class AppSettings(_BaseSettings):
    APP_NAME: str = "Newsletter Blog API"
    APP_DESCRIPTION: str | None = "Posts, comments, reactions and newsletter subscriptions."
    APP_VERSION: str | None = "0.1.0"


class CryptSettings(_BaseSettings):
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    TOKEN_ISSUER: str = "newsletter-blog"


class DatabaseSettings(_BaseSettings):
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "newsletter_blog"
    POSTGRES_ASYNC_PREFIX: str = "postgresql+asyncpg://"
    DATABASE_URL: str | None = None

    @property
    def POSTGRES_URI(self) -> str:
        return (
            f"{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"{self.POSTGRES_ASYNC_PREFIX}{self.POSTGRES_URI}"


class RedisCacheSettings(_BaseSettings):
    REDIS_CACHE_HOST: str = "localhost"
    REDIS_CACHE_PORT: int = 6379

    @property
    def REDIS_CACHE_URL(self) -> str:
        return f"redis://{self.REDIS_CACHE_HOST}:{self.REDIS_CACHE_PORT}"


class ClientSideCacheSettings(_BaseSettings):
    CLIENT_CACHE_MAX_AGE: int = 60


class CORSSettings(_BaseSettings):
    CORS_ORIGINS: str = "http://localhost:3000"

    @property
    def CORS_ORIGINS_LIST(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


class ContentSettings(_BaseSettings):
    TITLE_MAX_LENGTH: int = 200
    EXCERPT_MAX_LENGTH: int = 500
    COMMENT_MAX_LENGTH: int = 1000
    PLAIN_TEXT_MAX_LENGTH: int = 10000
    READING_WORDS_PER_MINUTE: int = 200
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100


class LoggingSettings(_BaseSettings):
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = os.path.join(current_file_dir, "..", "..", "..", "logs")


class EnvironmentOption(Enum):
    LOCAL = "local"
    STAGING = "staging"
    PRODUCTION = "production"


class EnvironmentSettings(_BaseSettings):
    ENVIRONMENT: EnvironmentOption = EnvironmentOption.LOCAL


class Settings(
    AppSettings,
    CryptSettings,
    DatabaseSettings,
    RedisCacheSettings,
    ClientSideCacheSettings,
    CORSSettings,
    ContentSettings,
    LoggingSettings,
    EnvironmentSettings,
):
    pass


settings = Settings()
