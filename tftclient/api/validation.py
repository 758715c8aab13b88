"""Input validation helpers.

Every public endpoint runs its parameters through these helpers before a
request is built, so a bad argument never reaches the network layer.
"""

from typing import Any, Optional

from .errors import ValidationError


def require_string(name: str, value: Any) -> str:
    """Check that ``value`` is a non-empty string.

    Args:
        name: Parameter name used in the error message
        value: Value supplied by the caller

    Returns:
        The value unchanged

    Raises:
        ValidationError: If the value is not a string or is blank
    """
    if not isinstance(value, str):
        raise ValidationError(
            f"'{name}' must be a string, got {type(value).__name__}", name
        )
    if not value.strip():
        raise ValidationError(f"'{name}' must not be empty", name)
    return value


def require_int(name: str, value: Any, lower: Optional[int] = None,
                upper: Optional[int] = None) -> int:
    """Check that ``value`` is an integer inside ``[lower, upper]``.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Raises:
        ValidationError: If the value is not an integer or is out of range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"'{name}' must be an integer, got {type(value).__name__}", name
        )
    if lower is not None and value < lower:
        raise ValidationError(f"'{name}' must be >= {lower}, got {value}", name)
    if upper is not None and value > upper:
        raise ValidationError(f"'{name}' must be <= {upper}, got {value}", name)
    return value


def optional_int(name: str, value: Any) -> Optional[int]:
    """Like :func:`require_int` but lets ``None`` through."""
    if value is None:
        return None
    return require_int(name, value)


def require_bool(name: str, value: Any) -> bool:
    """Check that ``value`` is a real boolean."""
    if not isinstance(value, bool):
        raise ValidationError(
            f"'{name}' must be a boolean, got {type(value).__name__}", name
        )
    return value


def require_choice(name: str, value: Any, choices) -> str:
    """Check that ``value`` is a string member of ``choices`` (case-insensitive).

    Returns:
        The lower-cased value
    """
    value = require_string(name, value)
    normalized = value.strip().lower()
    if normalized not in choices:
        allowed = ", ".join(sorted(choices))
        raise ValidationError(
            f"'{name}' must be one of {{{allowed}}}, got '{value}'", name
        )
    return normalized
