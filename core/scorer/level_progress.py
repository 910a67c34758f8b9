#!/usr/bin/env python3
"""
Level Progress - XP progress toward the next level.

Levels are fixed-width XP bands: level L covers [(L-1)*band, L*band).
Unlike the other percentages this one truncates (floor) instead of
rounding; both conventions are kept as the product shows them.
"""

from typing import Optional, Sequence, Tuple
import math
import logging

from core.exceptions import InvalidInputError
from core.utils import clamp_percentage, require_sequence
from core.scorer.models import LevelProgress
from database.models import Achievement

logger = logging.getLogger(__name__)

DEFAULT_XP_BAND = 100


def _validate(level: int, xp: int) -> None:
    if level is None or xp is None:
        raise InvalidInputError("level and xp must not be None")
    if level < 1:
        raise InvalidInputError(f"level must be >= 1, got {level}")
    if xp < 0:
        raise InvalidInputError(f"xp must be >= 0, got {xp}")


def xp_thresholds(level: int, band: int = DEFAULT_XP_BAND) -> Tuple[int, int]:
    """Return (floor, ceiling) XP for a level."""
    if level is None or level < 1:
        raise InvalidInputError(f"level must be >= 1, got {level}")
    if band <= 0:
        raise InvalidInputError(f"xp band must be positive, got {band}")
    return (level - 1) * band, level * band


def calculate_level_progress(level: int, xp: int, band: int = DEFAULT_XP_BAND) -> int:
    """
    Percentage progress from the current level floor to the next level.

    Formula: floor((xp - floor) / (ceiling - floor) * 100), clamped to [0, 100].
    The stored level is not recomputed from XP, so XP outside the band
    (e.g. before a level-up is persisted) is clamped rather than rejected.

    Raises:
        InvalidInputError: level < 1 or xp < 0
    """
    _validate(level, xp)
    floor_xp, ceiling_xp = xp_thresholds(level, band)
    raw = math.floor((xp - floor_xp) / (ceiling_xp - floor_xp) * 100)
    return clamp_percentage(raw, "level_progress")


def build_level_progress(level: int, xp: int, band: int = DEFAULT_XP_BAND) -> LevelProgress:
    floor_xp, ceiling_xp = xp_thresholds(level, band)
    return LevelProgress(
        level=level,
        xp_points=xp,
        xp_floor=floor_xp,
        xp_ceiling=ceiling_xp,
        progress=calculate_level_progress(level, xp, band),
    )


def level_for_xp(xp: int, band: int = DEFAULT_XP_BAND) -> int:
    """Level implied by an XP total under fixed-width bands."""
    if xp is None or xp < 0:
        raise InvalidInputError(f"xp must be >= 0, got {xp}")
    return xp // band + 1


def total_achievement_xp(achievements: Optional[Sequence[Achievement]]) -> int:
    return sum(a.xp_awarded for a in require_sequence(achievements, "achievements"))
