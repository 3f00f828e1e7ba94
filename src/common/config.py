import os
from typing import Annotated, List
from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

# Load environment variables from the correct .env file
os.environ.setdefault("APP_ENV", "development")
env_file = ".env" if os.getenv("APP_ENV") in ("development", "test") else ".env.production"
load_dotenv(env_file)

class Settings(BaseSettings):
    APP_ENV: str = "development"
    DEBUG: bool = False
    DATABASE_URL: str
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_MINUTES: int = 60
    ALLOWED_ORIGINS: Annotated[List[str], NoDecode] = ["*"]
    LOG_LEVEL: str = "info"

    # Service request workflow switches
    ENFORCE_NURSE_TRANSITIONS: bool = True
    VALIDATE_SERVICE_REQUEST_REFERENCES: bool = False
    ALLOW_DUPLICATE_REVIEWS: bool = True

    @field_validator("ALLOWED_ORIGINS", mode="before")
    def split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

settings = Settings()
