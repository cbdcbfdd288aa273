"""
Settings for Todo MCP, loaded from environment variables (+ optional .env).
"""

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv(override=False)

DEFAULT_API_URL = "http://localhost:8000"


class Settings(BaseModel):
    """Deployment settings; the backend URL is always configurable."""

    # Backend
    api_base_url: str = DEFAULT_API_URL
    request_timeout: float = Field(default=10.0, gt=0)

    # Page
    page_url: str = "/"

    # Logging
    log_level: str = "INFO"

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"API base URL must start with http:// or https://, got {v!r}")
        return v

    @field_validator("page_url")
    @classmethod
    def validate_page_url(cls, v: str) -> str:
        v = v.strip()
        return v if v.startswith("/") else f"/{v}"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level {v!r}")
        return v

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        return cls(
            api_base_url=os.getenv("TODO_API_URL", DEFAULT_API_URL),
            request_timeout=float(os.getenv("TODO_API_TIMEOUT", "10")),
            page_url=os.getenv("TODO_PAGE_URL", "/"),
            log_level=os.getenv("TODO_LOG_LEVEL", "INFO"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings instance."""
    return Settings.from_env()
