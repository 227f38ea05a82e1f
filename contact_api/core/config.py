# contact_api/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    APP_NAME: str = "Contact API"
    ENV: str = "dev"

    # DB
    DATABASE_URL: str = Field(default="sqlite:///./contact.db")  # or mysql+pymysql://...
    AUTO_CREATE_TABLES: bool = True

    # Auth tokens (issued elsewhere, only verified here)
    SECRET_KEY: str = "change-me"
    JWT_ALGO: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15
    AUTH_COOKIE_NAME: str = "access_token"

    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,  # allow DATABASE_URL or database_url, etc.
        extra="ignore",
    )


settings = Settings()
