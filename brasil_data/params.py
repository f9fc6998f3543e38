"""Parameter normalization helpers shared by the clients.

Everything here is a pure function: defaults, clamps, identifier
formatting and query-parameter cleanup.
"""

import re
from datetime import date, datetime
from typing import Any, Optional

from brasil_data.exceptions import ValidationError

CNPJ_LENGTH = 14

_NON_DIGITS = re.compile(r"\D")


def clamp_page(page: Optional[int]) -> int:
    """Page numbers start at 1."""
    if page is None or page < 1:
        return 1
    return page


def clamp_page_size(
    page_size: Optional[int],
    minimum: int,
    maximum: int,
    default: int,
) -> int:
    """Clamp a page size into ``[minimum, maximum]``.

    Args:
        page_size: Requested size, or None for the source default
        minimum: Smallest size the upstream accepts
        maximum: Largest size the upstream accepts
        default: Size used when none was requested

    Returns:
        Effective page size
    """
    if page_size is None:
        page_size = default
    if page_size < minimum:
        return minimum
    if page_size > maximum:
        return maximum
    return page_size


def only_digits(value: Optional[str]) -> str:
    """Strip every non-digit character."""
    if not value:
        return ""
    return _NON_DIGITS.sub("", str(value))


def format_cnpj(value: Optional[str]) -> str:
    """Format a CNPJ as ``XX.XXX.XXX/XXXX-XX``.

    Raises:
        ValidationError: If the input does not hold exactly 14 digits
    """
    digits = only_digits(value)
    if len(digits) != CNPJ_LENGTH:
        raise ValidationError(
            f"invalid CNPJ: must have {CNPJ_LENGTH} digits, got {len(digits)}",
            field="cnpj",
        )
    return f"{digits[0:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:14]}"


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def compact_params(params: Optional[dict]) -> dict:
    """Drop None and blank-string values from query parameters."""
    if not params:
        return {}
    return {k: v for k, v in params.items() if not is_empty(v)}


def require(value: Any, field: str) -> Any:
    """Return ``value`` or raise if it is missing."""
    if is_empty(value):
        raise ValidationError(f"{field} is required", field=field)
    return value.strip() if isinstance(value, str) else value


def today_mmddyyyy(today: Optional[date] = None) -> str:
    """Today's date as ``MM-DD-YYYY`` (BCB PTAX format)."""
    today = today or datetime.now().date()
    return today.strftime("%m-%d-%Y")


def last_month_mmyyyy(today: Optional[date] = None) -> str:
    """Previous calendar month as ``MM/YYYY``."""
    today = today or datetime.now().date()
    if today.month == 1:
        return f"12/{today.year - 1}"
    return f"{today.month - 1:02d}/{today.year}"
