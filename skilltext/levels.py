"""Skill level constants and level bookkeeping helpers.

Officers carry five skills. Skills 0-3 are upgraded independently from level 1
to level 5; skill 4 is the Revival Booster, which has no levels of its own and
unlocks once every other skill is maxed.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Final

MIN_LEVEL: Final[int] = 1
MAX_LEVEL: Final[int] = 5
TOTAL_SKILLS: Final[int] = 5
REVIVAL_SKILL_INDEX: Final[int] = 4

# An upgrade preview line needs one value per level to be usable.
MIN_UPGRADE_VALUES: Final[int] = MAX_LEVEL

DEFAULT_TOLERANCE: Final[Decimal] = Decimal("0.1")


def default_skill_levels() -> dict[int, int]:
    """Return a fresh skill-index -> level mapping with every skill at MIN_LEVEL."""

    return {index: MIN_LEVEL for index in range(TOTAL_SKILLS)}


def clamp_level(level: int) -> int:
    """Bound a requested level to the playable [MIN_LEVEL, MAX_LEVEL] range."""

    return max(MIN_LEVEL, min(MAX_LEVEL, level))


def is_revival_skill_available(skill_levels: Mapping[int, int]) -> bool:
    """Return whether the Revival Booster skill is unlocked.

    Args:
        skill_levels: Mapping of skill index -> current level.

    Returns:
        True when every skill before REVIVAL_SKILL_INDEX is at MAX_LEVEL.
        Missing indexes count as not maxed.
    """

    return all(skill_levels.get(index) == MAX_LEVEL for index in range(REVIVAL_SKILL_INDEX))
