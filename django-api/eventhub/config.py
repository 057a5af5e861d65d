"""Environment configuration.

Values are read from the process environment (and an optional ``.env`` file)
once per process. Django settings are derived from them in ``settings.py``.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_ENV: str = "development"
    DEBUG: bool = False
    SECRET_KEY: str = "change-me-in-production"
    ALLOWED_HOSTS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    # Database
    DB_ENGINE: str = "django.db.backends.sqlite3"
    DB_NAME: str = "eventhub.sqlite3"
    DB_USER: str = ""
    DB_PASSWORD: str = ""
    DB_HOST: str = ""
    DB_PORT: str = ""

    # Auth tokens
    JWT_SECRET: str = "change-me-jwt-secret"
    JWT_EXPIRE_DAYS: int = 7
    JWT_COOKIE_EXPIRE_DAYS: int = 7

    # Payment gateway
    RAZORPAY_KEY_ID: str = ""
    RAZORPAY_KEY_SECRET: str = ""
    PAYMENT_CURRENCY: str = "INR"

    # CORS
    FRONTEND_URL: str = "http://localhost:3000"

    # SMTP
    SMTP_HOST: str = "localhost"
    SMTP_PORT: int = 587
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_USE_TLS: bool = True
    DEFAULT_FROM_EMAIL: str = "EventHub <noreply@eventhub.local>"

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
