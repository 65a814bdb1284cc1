"""
Configuration settings for Product Service
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment."""

    project_name: str = os.environ.get("PROJECT_NAME", "Product Service")
    api_version: str = os.environ.get("API_VERSION", "0.3.0")
    log_level: str = os.environ.get("LOG_LEVEL", "INFO")

    # Target of the catch-all redirect for unmatched routes
    fallback_url: str = os.environ.get("FALLBACK_URL", "/docs")

    host: str = os.environ.get("HOST", "0.0.0.0")
    port: int = int(os.environ.get("PORT", 8000))


settings = Settings()
