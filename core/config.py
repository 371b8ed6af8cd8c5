# =============================================================================
# core/config.py  —  Environment Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the server's settings from the environment ONCE at startup.
#   main.py calls load_dotenv() first, so a local .env file works too.
#
# VARIABLES:
#   JINA_API_KEY          required — bearer credential for the Jina API
#   JINA_API_BASE_URL     optional — defaults to https://api.jina.ai/v1
#   JINA_TIMEOUT_SECONDS  optional — HTTP timeout, defaults to 30
#   LOG_LEVEL             optional — defaults to INFO
#
# A missing API key is FATAL: load_settings() raises ConfigurationError and
# the server never starts serving requests.
# =============================================================================

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from core.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.jina.ai/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Process-lifetime settings. Never mutated after startup."""

    api_key: str = field(repr=False)   # keep the credential out of logs
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"JINA_TIMEOUT_SECONDS must be a number, got {raw!r}"
        ) from e
    if timeout <= 0:
        raise ConfigurationError(
            f"JINA_TIMEOUT_SECONDS must be positive, got {raw!r}"
        )
    return timeout


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read from.  Defaults to os.environ; tests pass
                 a plain dict instead.

    Raises:
        ConfigurationError: JINA_API_KEY is missing, or a value is invalid.
    """
    env = os.environ if environ is None else environ

    api_key = env.get("JINA_API_KEY", "").strip()
    if not api_key:
        raise ConfigurationError("JINA_API_KEY environment variable is required")

    base_url = env.get("JINA_API_BASE_URL", "").strip() or DEFAULT_BASE_URL

    raw_timeout = env.get("JINA_TIMEOUT_SECONDS", "").strip()
    timeout = _parse_timeout(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_SECONDS

    log_level = env.get("LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL

    return Settings(
        api_key=api_key,
        base_url=base_url,
        timeout_seconds=timeout,
        log_level=log_level,
    )
