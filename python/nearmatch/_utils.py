"""Internal utilities for nearmatch."""

import math
from typing import Optional, Union

from nearmatch.enums import ValueKind
from nearmatch.exceptions import ValidationError


def normalize_kind(kind: Union[str, ValueKind]) -> ValueKind:
    """Convert a kind name to a ValueKind, validating string names.

    Args:
        kind: Either a ValueKind enum value or its string name.

    Returns:
        The matching ValueKind.

    Raises:
        ValidationError: If the kind name is not recognized.
        TypeError: If kind is not a string or ValueKind.

    Example:
        >>> normalize_kind("TEXT")
        <ValueKind.TEXT: 'text'>
    """
    if isinstance(kind, ValueKind):
        return kind

    if isinstance(kind, str):
        try:
            return ValueKind(kind.lower())
        except ValueError:
            raise ValidationError(
                f"Unknown value kind: '{kind}'. "
                f"Valid options: {sorted(k.value for k in ValueKind)}"
            ) from None

    raise TypeError(f"kind must be str or ValueKind, got {type(kind).__name__}")


def check_finite(name: str, value: float) -> float:
    """Reject NaN and infinite floats for a named parameter."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    if math.isnan(value) or math.isinf(value):
        raise ValidationError(f"{name} must be finite, got {value!r}")
    return float(value)


def check_unit_interval(name: str, value: float) -> float:
    """Validate that a parameter lies in [0, 1]."""
    value = check_finite(name, value)
    if not 0.0 <= value <= 1.0:
        raise ValidationError(f"{name} must be between 0.0 and 1.0, got {value!r}")
    return value


def check_count(name: str, value: Optional[int]) -> Optional[int]:
    """Validate an optional non-negative integer count."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")
    return value


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(max(value, low), high)


__all__ = ["normalize_kind", "check_finite", "check_unit_interval", "check_count", "clamp"]
