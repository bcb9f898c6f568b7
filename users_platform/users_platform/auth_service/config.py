"""
Configuration management for the users auth service
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Auth service configuration loaded from environment variables"""

    # Service Configuration
    SERVICE_NAME: str = "users-auth-service"
    LOG_LEVEL: str = "INFO"

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./users.db"

    # Token Configuration
    JWT_SECRET_KEY: str = "change-this-secret-in-prod"
    JWT_REFRESH_SECRET_KEY: str = "change-this-refresh-secret-in-prod"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    # pbkdf2_sha256 does not truncate long inputs such as JWT refresh tokens
    PASSWORD_HASH_SCHEME: str = "pbkdf2_sha256"

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )


# Global settings instance
settings = Settings()
