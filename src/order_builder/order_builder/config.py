"""Application configuration via pydantic-settings.

Reads ORDER_BUILDER_* environment variables and the .env file at project root.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# src/order_builder/order_builder/config.py -> project root
PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    model_config = SettingsConfigDict(
        env_prefix="ORDER_BUILDER_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Builder ---
    # Raise NoOrderInProgressError instead of ignoring calls made before reset()
    strict: bool = False

    # --- Menu ---
    menu_json_path: str = str(PROJECT_ROOT / "menus" / "restaurant" / "menu.json")

    # --- Logging ---
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance (created once)."""
    return Settings()
