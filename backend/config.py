# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    PROJECT_NAME: str = "Course Market API"
    API_PREFIX: str = "/api/v1"

    DATABASE_URL: str = "sqlite:///./course_market.db"

    # Each role signs its tokens with its own secret
    JWT_USER_SECRET: str = "dev-user-secret-change-me"
    JWT_ADMIN_SECRET: str = "dev-admin-secret-change-me"
    ALGORITHM: str = "HS256"
    # Tokens never expire unless this is set
    ACCESS_TOKEN_EXPIRE_MINUTES: Optional[int] = None

    # bcrypt cost factor
    BCRYPT_ROUNDS: int = 12

    FRONTEND_URL: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

settings = Settings()
