from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

from .pool import DEFAULT_POOL_PATH
from .rotation import ROTATION_SIZE


def _env_list(name: str, default: str = "") -> List[str]:
    val = os.getenv(name, default)
    return [x.strip() for x in val.split(";") if x.strip()]


@dataclass
class Settings:
    """Service settings, read from the environment when instantiated."""

    port: int = field(default_factory=lambda: int(os.getenv("PORT", "5000")))
    questions_path: str = field(
        default_factory=lambda: os.getenv("QUESTIONS_PATH", str(DEFAULT_POOL_PATH))
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = field(default_factory=lambda: os.getenv("LOG_FORMAT", "text"))
    default_user_id: str = field(default_factory=lambda: os.getenv("DEFAULT_USER_ID", "anonymous"))
    rotation_size: int = field(
        default_factory=lambda: int(os.getenv("ROTATION_SIZE", str(ROTATION_SIZE)))
    )
    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))


def get_settings() -> Settings:
    return Settings()
