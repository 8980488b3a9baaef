import os
from pydantic_settings import BaseSettings
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    """Configuration settings for the application."""
    PROJECT_NAME: str = "Restaurant Site API"
    LOG_LEVEL: str = "INFO"

    # Storage
    DATA_DIR: str = os.getenv("DATA_DIR", "data")
    CONTENT_BACKEND: str = os.getenv("CONTENT_BACKEND", "json")  # "json" or "mongo"
    MONGO_URI: Optional[str] = os.getenv("MONGO_URI")
    DB_NAME: str = os.getenv("DB_NAME", "restaurant_site")

    # Admin session
    SECRET_KEY: str = os.getenv("SECRET_KEY", "MySecretKey@123")
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "admin_session"
    SESSION_EXPIRE_HOURS: int = 24
    COOKIE_SECURE: bool = False

    # Locales
    LANGUAGE_COOKIE_NAME: str = "language"
    DEFAULT_LOCALE: str = "es"
    FALLBACK_LOCALE: str = "en"
    SUPPORTED_LOCALES: List[str] = ["es", "en", "ca", "fr", "it", "de"]

    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Gallery uploads
    UPLOAD_DIR: str = "uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024  # 5MB
    ALLOWED_IMAGE_TYPES: List[str] = ["image/jpeg", "image/png", "image/webp", "image/gif"]
    MAX_IMAGE_WIDTH: int = 1600

    class Config:
        env_file = ".env"

    @property
    def remote_enabled(self) -> bool:
        return self.CONTENT_BACKEND.lower() == "mongo"

settings = Settings()
