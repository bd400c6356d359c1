# catalog/core/config.py
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./catalog.db"
    SQL_ECHO: bool = False

    # Background FieldValues population
    FIELD_VALUES_MAX_WORKERS: int = 4
    FIELD_VALUES_MAX_DISTINCT: int = 5000

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    class Config:
        extra = "allow"  # allow additional fields from .env
        env_file = ".env"

settings = Settings()
