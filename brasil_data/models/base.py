"""Shared helpers for record and envelope dataclasses."""

from dataclasses import asdict, dataclass
from typing import Any, Optional


def as_dict(value: Any) -> dict:
    """Nested objects default to an empty dict when absent or mistyped."""
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def as_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def as_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def as_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass
class Envelope:
    """Normalized response returned to callers.

    Subclasses declare their result field(s), ``total`` and pagination
    echoes as needed, and always a ``source`` tag.
    """

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary."""
        return asdict(self)
