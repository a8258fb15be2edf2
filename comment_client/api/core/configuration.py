"""
Configuration
=============

Connection settings for the comment client.

The client itself never reads the environment. These values are *context*
passed explicitly when wiring a client, not global state. This module provides:

- ClientConfig: typed configuration (base URL, sender timeout)
- ClientConfig.from_env(): opt-in loader for server-side usage
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import os

DEFAULT_BASE_URL = "http://example.com"
DEFAULT_TIMEOUT = 10.0

# Optional overrides read by ClientConfig.from_env().
ENV_BASE_URL = "COMMENT_API_BASE_URL"
ENV_TIMEOUT = "COMMENT_API_TIMEOUT"

class InvalidConfigError(ValueError):
    """Raised when an environment value cannot be parsed."""

@dataclass(frozen=True)
class ClientConfig:
    """
    Connection context for the comment client.

    Attributes:
        base_url:
            Origin the comment API is served from. Request paths replace
            whatever path this URL carries.
        timeout:
            Timeout in seconds handed to the default httpx sender. The
            request pipeline has no timeout of its own; ``None`` disables it.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Load connection settings from environment variables.

        Optional:
            - COMMENT_API_BASE_URL
            - COMMENT_API_TIMEOUT (seconds, float)

        Raises:
            InvalidConfigError: if COMMENT_API_TIMEOUT is not a number.
        """
        base_url = os.getenv(ENV_BASE_URL) or DEFAULT_BASE_URL

        raw_timeout = os.getenv(ENV_TIMEOUT)
        timeout: Optional[float] = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise InvalidConfigError(
                    f"Invalid timeout: {ENV_TIMEOUT}={raw_timeout!r} is not a number."
                ) from None

        return cls(base_url=base_url, timeout=timeout)

__all__ = [
    "ClientConfig",
    "InvalidConfigError",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "ENV_BASE_URL",
    "ENV_TIMEOUT",
]
