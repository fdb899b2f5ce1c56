"""
Application Configuration Module
"""
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine BASE_DIR in a packaging-aware way (works for dev and PyInstaller 'frozen' exe)
if getattr(sys, "frozen", False):
    _BASE_DIR = Path(sys.executable).parent
else:
    _BASE_DIR = Path(__file__).resolve().parent.parent.parent


class AppConfig(BaseSettings):
    """Application configuration settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Application Info
    APP_NAME: str = "Pulse Wellness"
    APP_VERSION: str = "0.1.0"
    APP_AUTHOR: str = "Pulse Team"

    # Paths
    BASE_DIR: Path = _BASE_DIR
    DATA_DIR: Path = Field(
        default=_BASE_DIR / "data",
        description="Directory holding the habits/mood/water/settings JSON files"
    )
    LOGS_DIR: Path = _BASE_DIR / "logs"
    EXPORT_DIR: Path = _BASE_DIR / "exports"

    # Store
    STORE_FILE_ENCODING: str = "utf-8"

    # Default user settings (used when the settings bag has no value yet)
    DEFAULT_DAILY_WATER_GOAL: int = 8
    DEFAULT_REMINDER_INTERVAL_MINUTES: int = 60
    DEFAULT_REMINDERS_ENABLED: bool = False
    DEFAULT_APP_THEME: str = "dark"
    DEFAULT_NOTIFICATIONS_ENABLED: bool = True

    # Input ranges enforced by the UI layer only
    WATER_GOAL_MIN: int = 1
    WATER_GOAL_MAX: int = 20
    REMINDER_INTERVAL_MIN: int = 15
    REMINDER_INTERVAL_MAX: int = 480

    # Analytics
    WATER_STREAK_MAX_DAYS: int = Field(
        default=3650,
        description="Upper bound for the backward walk of the water streak"
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "1 month"


# Global configuration instance
config = AppConfig()


def get_config() -> AppConfig:
    """Get application configuration instance"""
    return config


def ensure_directories() -> None:
    """Create necessary directories if they don't exist"""
    directories = [
        config.DATA_DIR,
        config.LOGS_DIR,
        config.EXPORT_DIR,
    ]

    for directory in directories:
        directory.mkdir(parents=True, exist_ok=True)
