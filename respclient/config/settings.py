"""
RESP-Client Configuration Settings

This module contains all configuration constants for the client.
Every value can be overridden through the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _optional_float(name: str) -> Optional[float]:
    raw = os.environ.get(name, "").strip()
    return float(raw) if raw else None


@dataclass
class Settings:
    """Client configuration settings."""

    # Connection settings
    URL: str = os.environ.get("RESP_CLIENT_URL", "redis://localhost:6379")
    DEFAULT_HOST: str = "localhost"
    DEFAULT_PORT: int = 6379

    # Transport settings
    SOCKET_TIMEOUT: Optional[float] = _optional_float("RESP_CLIENT_SOCKET_TIMEOUT")  # None blocks forever
    READ_BUFFER_SIZE: int = 65536

    # Encoding used for str arguments and text replies
    ENCODING: str = os.environ.get("RESP_CLIENT_ENCODING", "utf-8")

    # Logging settings
    DEBUG: bool = os.environ.get("RESP_CLIENT_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("RESP_CLIENT_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
