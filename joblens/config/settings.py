from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    class Config:
        env_file = BASE_DIR / ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    """
    Configuration settings for loading and viewing job files.
    """

    # Filter choices
    ALL_OPTION: str = "all"
    DEFAULT_SORT: Literal["title-asc", "title-desc", "posted-new", "posted-old"] = "posted-new"

    # File loading
    FILE_ENCODING: str = "utf-8"
    # Files above this size are rejected before decoding
    MAX_FILE_BYTES: int = 10_000_000

    # Logging
    LOG_LEVEL: str = "INFO"

settings = Settings()
