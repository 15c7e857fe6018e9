"""Resolve the text an officer skill displays at a given level."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

from .interpolation import apply_upgrade_values
from .levels import REVIVAL_SKILL_INDEX
from .revival import select_revival_variant
from .upgrade_preview import parse_upgrade_data


@lru_cache(maxsize=1024)
def interpolate_skill_text(data: tuple[str, ...], level: int) -> str:
    """Return the base text of `data` rewritten for `level`.

    Args:
        data: Skill description strings as a tuple (hashable for caching).
        level: Requested skill level.

    Returns:
        The interpolated base text, or an empty string when `data` is empty.
    """

    if not data:
        return ""
    return apply_upgrade_values(data[0], parse_upgrade_data(data), level)


def resolve_skill_text(
    data: Sequence[str],
    *,
    index: int,
    level: int,
    revival_available: bool = True,
) -> list[str]:
    """Return the display strings for a skill slot.

    Args:
        data: Skill description strings.
        index: Skill slot index within the officer (0-based).
        level: Requested skill level; ignored for the revival slot.
        revival_available: Whether the revival slot is unlocked.

    Returns:
        The revival variant entries for the revival slot, otherwise a single
        interpolated string.
    """

    if index == REVIVAL_SKILL_INDEX:
        return select_revival_variant(data, unlocked=revival_available)
    return [interpolate_skill_text(tuple(data), level)]
