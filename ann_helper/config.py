"""Process-wide settings for ANN-Helper, read from the environment once."""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://cdn.animenewsnetwork.com/encyclopedia"
DEFAULT_TIMEOUT = 15
DEFAULT_LOG_LEVEL = "INFO"
UA = "ann-helper/0.1"


def _env_timeout() -> float:
    raw = os.getenv("ANN_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        timeout = 0
    if timeout <= 0:
        logger.warning("Ignoring invalid ANN_TIMEOUT=%r, using %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return timeout


def get_log_level() -> str:
    """
    - ANN_LOG_LEVEL: one of DEBUG, INFO, WARNING, ERROR, CRITICAL (default INFO)
    """
    level = os.getenv("ANN_LOG_LEVEL", "").strip().upper()
    if level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return level
    if level:
        logger.warning("Ignoring unknown ANN_LOG_LEVEL=%r, using %s", level, DEFAULT_LOG_LEVEL)
    return DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class AnnConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = UA

    @property
    def api_url(self) -> str:
        return self.base_url.rstrip("/") + "/api.xml"

    @classmethod
    def from_env(cls) -> "AnnConfig":
        """
        - ANN_BASE_URL: encyclopedia base URL (without /api.xml)
        - ANN_TIMEOUT: request timeout in seconds, positive; anything else falls back to the default
        - ANN_USER_AGENT: User-Agent header sent upstream
        """
        return cls(
            base_url=os.getenv("ANN_BASE_URL", "").strip() or DEFAULT_BASE_URL,
            timeout=_env_timeout(),
            user_agent=os.getenv("ANN_USER_AGENT", "").strip() or UA,
        )
