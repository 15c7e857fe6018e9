"""Locked/awakened variant selection for the Revival Booster skill.

The Revival Booster skill is not interpolated. Its data list carries two full
text variants, tagged with a locked or unlocked marker, and the caller decides
which one applies (see `skilltext.levels.is_revival_skill_available`).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

REVIVAL_LOCKED_MARKER: Final[str] = "REVIVAL BOOSTER LOCKED:"
REVIVAL_UNLOCKED_MARKER: Final[str] = "REVIVAL BOOSTER UNLOCKED:"

LOCKED_ICON: Final[str] = "\N{LOCK}"
AWAKENED_ICON: Final[str] = "\N{GLOWING STAR}"

LOCKED_LABEL: Final[str] = f"{LOCKED_ICON} LOCKED:"
AWAKENED_LABEL: Final[str] = f"{AWAKENED_ICON} AWAKENED:"


def select_revival_variant(data: Sequence[str], *, unlocked: bool) -> list[str]:
    """Return the revival text entries for the given lock state.

    Args:
        data: Skill description strings.
        unlocked: Whether every other skill of the officer is maxed.

    Returns:
        Entries tagged with the matching marker, with the first occurrence of
        the marker replaced by a display label. Empty when none are tagged.
    """

    marker, label = (
        (REVIVAL_UNLOCKED_MARKER, AWAKENED_LABEL) if unlocked else (REVIVAL_LOCKED_MARKER, LOCKED_LABEL)
    )
    return [entry.replace(marker, label, 1) for entry in data if marker in entry]
