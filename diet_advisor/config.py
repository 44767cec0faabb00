"""Configuration loaded from environment variables (and .env)."""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from diet_advisor.infrastructure.ai.image_generator import PLACEHOLDER_IMAGE_URL

# Load .env from project root if present (does not override real env vars)
_env_path = Path(__file__).resolve().parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    openai_api_key: Optional[str]
    content_model: str = "gpt-4o-mini"
    image_model: str = "gpt-image-1"
    image_size: str = "1536x1024"
    request_timeout_s: float = 120.0
    placeholder_image_url: str = PLACEHOLDER_IMAGE_URL
    log_level: str = "INFO"
    log_format: str = "console"
    app_version: str = "0.0.0-dev"

    @property
    def masked_api_key(self) -> Optional[str]:
        """API key safe for logs."""
        key = self.openai_api_key
        if not key:
            return None
        if len(key) > 8:
            return key[:4] + "..." + key[-4:]
        return "***"

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the environment."""
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            content_model=os.getenv("DIET_CONTENT_MODEL", cls.content_model),
            image_model=os.getenv("DIET_IMAGE_MODEL", cls.image_model),
            image_size=os.getenv("DIET_IMAGE_SIZE", cls.image_size),
            request_timeout_s=float(
                os.getenv("DIET_REQUEST_TIMEOUT_S", str(cls.request_timeout_s))
            ),
            placeholder_image_url=os.getenv(
                "DIET_PLACEHOLDER_IMAGE_URL", cls.placeholder_image_url
            ),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            log_format=os.getenv("LOG_FORMAT", cls.log_format).lower(),
            app_version=os.getenv("APP_VERSION", cls.app_version),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
