"""API key authentication handler."""

import logging
from typing import Optional

from brasil_data.exceptions import MissingAPIKeyError

logger = logging.getLogger(__name__)


class APIKeyAuth:
    """API key sent in a request header.

    The key may be absent; in that case ``get_auth_header`` raises so the
    caller fails before anything goes over the wire.
    """

    def __init__(
        self,
        api_key: Optional[str],
        key_name: str = "X-API-Key",
        env_var: str = "API_KEY",
    ):
        """Initialize API key auth.

        Args:
            api_key: The API key value (None when not configured)
            key_name: Name of the header carrying the key
            env_var: Environment variable the key is read from, for messages
        """
        self.api_key = api_key or None
        self.key_name = key_name
        self.env_var = env_var

        logger.debug(
            "APIKeyAuth initialized",
            extra={"key_name": key_name, "configured": self.is_configured},
        )

    @property
    def is_configured(self) -> bool:
        return self.api_key is not None

    def get_auth_header(self) -> dict:
        """Get the header dict carrying the key.

        Raises:
            MissingAPIKeyError: If no key was configured
        """
        if not self.is_configured:
            raise MissingAPIKeyError(self.env_var)
        return {self.key_name: self.api_key}

    def __repr__(self) -> str:
        state = "set" if self.is_configured else "unset"
        return f"APIKeyAuth(key_name={self.key_name!r}, api_key=<{state}>)"
