import math
import logging
from typing import Any, Optional, Sequence

from core.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up.

    Python's round() uses banker's rounding (round(12.5) == 12); the
    platform's percentages have always rounded 12.5 to 13.
    """
    return int(math.floor(value + 0.5))


def clamp_percentage(value: int, name: str = "percentage") -> int:
    """Clamp a percentage to [0, 100], logging when a correction happens."""
    clamped = max(0, min(100, value))
    if clamped != value:
        logger.warning(f"{name} out of range: {value}, clipping to [0, 100]")
    return clamped


def require_sequence(value: Optional[Sequence[Any]], name: str) -> Sequence[Any]:
    """Reject None (or a bare string) where a list is required."""
    if value is None:
        raise InvalidInputError(f"{name} must be a list, got None")
    if isinstance(value, (str, bytes)):
        raise InvalidInputError(f"{name} must be a list, got a string")
    return value


def contains_ci(haystack: Optional[str], needle: str) -> bool:
    """Case-insensitive substring test that tolerates a missing haystack."""
    if not haystack:
        return False
    return needle.lower() in haystack.lower()
