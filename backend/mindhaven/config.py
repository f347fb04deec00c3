import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self):
        self.APP_NAME = os.getenv("APP_NAME", "MindHaven Emotion Assistant API")
        self.DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./mindhaven.db")
        self.DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "10"))

        # Auth
        self.SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-production")
        self.ALGORITHM = os.getenv("ALGORITHM", "HS256")
        self.ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))
        self.DEFAULT_ADMIN_EMAIL = os.getenv("DEFAULT_ADMIN_EMAIL", "")
        self.DEFAULT_ADMIN_PASSWORD = os.getenv("DEFAULT_ADMIN_PASSWORD", "")

        self.CORS_ORIGINS: List[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
            if origin.strip()
        ]

        # Logging
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
        self.LOG_DIR = os.getenv("LOG_DIR", "logs")

        # Assistant behaviour
        self.CRISIS_KEYWORD_PRIORITY = _as_bool(os.getenv("CRISIS_KEYWORD_PRIORITY", "false"))
        self.CONCERNING_SENTIMENT_THRESHOLD = float(os.getenv("CONCERNING_SENTIMENT_THRESHOLD", "-0.4"))
        self.CONCERNING_USERS_LIMIT = int(os.getenv("CONCERNING_USERS_LIMIT", "5"))
        self.RECENT_CONVERSATIONS_LIMIT = int(os.getenv("RECENT_CONVERSATIONS_LIMIT", "10"))
        self.INSIGHTS_FETCH_LIMIT = int(os.getenv("INSIGHTS_FETCH_LIMIT", "100"))


@lru_cache()
def get_settings() -> Settings:
    return Settings()
