"""
Application settings.
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./data/tipscan.db"

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Files
    DATA_DIR: str = "./data"

    # Authentication is not wired up yet; every request acts as this user
    DEMO_USER_ID: int = 1
    SEED_SAMPLE_TIPS: bool = True

    # OCR
    TESSERACT_CMD: str = "tesseract"
    OCR_LANGUAGE: str = "eng"
    MAX_UPLOAD_MB: int = 10
    ALLOWED_UPLOAD_TYPES: List[str] = ["image/jpeg", "image/jpg", "image/png"]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
