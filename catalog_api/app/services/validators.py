"""
Input validation helpers shared by the services.

JSON numbers arrive as ``int`` or ``float``; ``bool`` is a subclass of
``int`` in Python and is rejected explicitly wherever a number is
expected.  Every helper raises :class:`BadRequestError` on failure.
"""

import math
import re
from typing import Any, Dict, Optional

from ..core.errors import BadRequestError


EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_INT_RE = re.compile(r"^[+-]?\d+$")
MAX_ID_DIGITS = 18


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_record_id(value: Any) -> int:
    """Convert a path or body id to ``int``.

    Accepts integers, integral floats and strings of decimal digits.
    """
    if is_number(value):
        if isinstance(value, float) and not value.is_integer():
            raise BadRequestError("Invalid ID", f"The ID must be a whole number, got {value}")
        return int(value)
    if isinstance(value, str) and _INT_RE.match(value.strip()):
        digits = value.strip().lstrip("+-")
        if len(digits) > MAX_ID_DIGITS:
            raise BadRequestError("Invalid ID", f"The ID cannot have more than {MAX_ID_DIGITS} digits")
        return int(value.strip())
    raise BadRequestError("Invalid ID", "The ID must be a valid number")


def require_body_id(body: Dict[str, Any], action: str) -> int:
    """Return the parsed ``id`` of a request body, which must be present."""
    value = body.get("id")
    if value is None or value == "":
        raise BadRequestError("ID required", f"The user ID is required to {action}", required=["id"])
    return parse_record_id(value)


def parse_query_number(raw: Optional[str]) -> Optional[float]:
    """Parse a numeric query parameter, returning ``None`` if unusable."""
    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def clean_name(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise BadRequestError("Invalid name", "The name must be a non-empty string")
    return value.strip()


def clean_email(value: Any) -> str:
    """Return the normalized (trimmed, lowercased) email address."""
    if not isinstance(value, str):
        raise BadRequestError("Invalid email", "The email must be a string")
    email = value.strip().lower()
    if not EMAIL_RE.match(email):
        raise BadRequestError("Invalid email", "The email format is not valid")
    return email


def clean_age(value: Any) -> int:
    # Ints are compared as-is; JSON integers can be too large for float().
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if is_number(value) and isinstance(value, int) and 0 <= value <= 120:
        return value
    raise BadRequestError("Invalid age", "The age must be a whole number between 0 and 120")


def clean_price(value: Any) -> float:
    if not is_number(value):
        raise BadRequestError("Invalid data types", "The price must be a number")
    try:
        price = float(value)
    except OverflowError:
        price = math.inf
    if not math.isfinite(price) or price <= 0:
        raise BadRequestError("Invalid price", "The price must be a positive number")
    return price
