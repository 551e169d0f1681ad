# server/core/config.py

import os
import logging
from pathlib import Path
from dotenv import load_dotenv


load_dotenv()


class Config:
    """Runtime settings, read once from the environment."""

    # Database settings
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./data/app.db")

    # Upload settings
    IMAGES_DIR = Path(os.getenv("IMAGES_DIR", "public/images"))
    IMAGES_URL_PREFIX: str = "/images"
    MAX_IMAGE_SIZE: int = int(os.getenv("MAX_IMAGE_SIZE", 10 * 1024 * 1024))

    # Category tree settings
    CATEGORY_POPULATE_DEPTH: int = int(os.getenv("CATEGORY_POPULATE_DEPTH", 3))

    # Auth settings
    JWT_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", "change-me")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60))

    # Other settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Ensure directories exist
    IMAGES_DIR.mkdir(parents=True, exist_ok=True)
    if DATABASE_URL.startswith("sqlite:///./"):
        Path(DATABASE_URL.removeprefix("sqlite:///")).parent.mkdir(parents=True, exist_ok=True)


def setup_logging():
    """Configure logging settings"""
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
