"""Authentication helpers for upstream APIs.

Only Portal da Transparencia requires a credential (an API key header).
"""

from .api_key import APIKeyAuth

__all__ = ["APIKeyAuth"]
