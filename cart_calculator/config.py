# cart_calculator/config.py
import os
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # === General ===
    app_env: str = "local"  # local | development | production

    # === Pricing ===
    pricing_config_path: Optional[str] = Field(
        None, description="YAML pricing file; unset = built-in default catalogue/rules"
    )

    # === Logging ===
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_to_file: bool = False
    log_rotation: str = "1 day"
    log_retention: str = "30 days"

    # === Pydantic Settings config ===
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton Settings instance with simple env overrides."""
    s = Settings()

    env = os.getenv("ENVIRONMENT", s.app_env).lower()
    if env == "production":
        s.log_level = "WARNING"

    return s
