"""
Configuration management for the blog service
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

DEFAULT_JWT_SECRET = "change-this-secret-in-prod"


class Settings(BaseSettings):
    """Blog service configuration loaded from environment variables"""

    # Server Configuration
    APP_NAME: str = "Blog Service"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "./logs"

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./blog.db"
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    # Drops every table on startup. Never enable against data you want to keep.
    RESET_DB_ON_STARTUP: bool = False

    # Token Configuration
    JWT_SECRET_KEY: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 12
    AUTH_COOKIE_NAME: str = "token"

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


# Global settings instance
settings = Settings()
