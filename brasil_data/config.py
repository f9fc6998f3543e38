"""Runtime configuration loaded from the environment."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30
DEFAULT_USER_AGENT = "brasil-data/1.0 (Python)"
TRANSPARENCY_API_KEY_ENV = "TRANSPARENCY_API_KEY"


@dataclass(frozen=True)
class Settings:
    """Settings shared by the clients and the CLI."""

    transparency_api_key: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(
            f"Ignoring invalid {name}={raw!r}, using {default}",
            extra={"env_var": name, "value": raw},
        )
        return default


def get_settings(load_env_file: bool = True) -> Settings:
    """Build settings from environment variables.

    Args:
        load_env_file: Load a ``.env`` file first (python-dotenv)

    Returns:
        A frozen Settings instance
    """
    if load_env_file:
        load_dotenv()

    return Settings(
        transparency_api_key=os.getenv(TRANSPARENCY_API_KEY_ENV) or None,
        timeout=_float_env("BRASIL_DATA_TIMEOUT", DEFAULT_TIMEOUT),
        user_agent=os.getenv("BRASIL_DATA_USER_AGENT") or DEFAULT_USER_AGENT,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
