"""
Settings for the products API.

Values are read from environment variables when ``Settings`` is
instantiated.  The API key and the listening port are fixed for this
version of the service and are deliberately not taken from the
environment.
"""

import os
from dataclasses import dataclass, field
from typing import List

API_KEY = "123456"
PORT = 3000


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "products-api"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))
    cors_origins: List[str] = field(default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "*")))
    api_key: str = API_KEY
    port: int = PORT


settings = Settings()
