"""Tests for per-slot skill text resolution and skill keyword search."""

from __future__ import annotations

import pytest

from officers.catalog import Skill
from skilltext.render import interpolate_skill_text, resolve_skill_text
from skilltext.search import skill_matches_terms

pytestmark = pytest.mark.unit

WALL_OF_STEEL = (
    "Tanks gain Blast Dmg Resist by 10% (Dmg Coefficient 550).",
    "UPGRADE PREVIEW:<br />Blast Dmg Resist Buff: 10%/12%/14%/16%/20%<br />Dmg Coefficient 550/650/800/950/1200",
)


def test_resolve_skill_text_interpolates_regular_slots() -> None:
    """Regular slots return a single interpolated string."""

    assert resolve_skill_text(WALL_OF_STEEL, index=0, level=5) == [
        "Tanks gain Blast Dmg Resist by 20% (Dmg Coefficient 1200)."
    ]
    assert resolve_skill_text(list(WALL_OF_STEEL), index=2, level=1) == [WALL_OF_STEEL[0]]


def test_resolve_skill_text_selects_revival_variant_for_revival_slot() -> None:
    """The revival slot ignores the level and filters by lock state."""

    data = ["REVIVAL BOOSTER LOCKED: Locked text.", "REVIVAL BOOSTER UNLOCKED: Awakened text."]

    assert resolve_skill_text(data, index=4, level=3, revival_available=False) == ["\N{LOCK} LOCKED: Locked text."]
    assert resolve_skill_text(data, index=4, level=3) == ["\N{GLOWING STAR} AWAKENED: Awakened text."]


def test_resolve_skill_text_handles_empty_description() -> None:
    """An empty description list renders as an empty string."""

    assert resolve_skill_text([], index=0, level=2) == [""]


def test_interpolate_skill_text_is_memoized() -> None:
    """Repeated requests for the same skill and level hit the cache."""

    interpolate_skill_text.cache_clear()
    first = interpolate_skill_text(WALL_OF_STEEL, 3)
    second = interpolate_skill_text(WALL_OF_STEEL, 3)

    assert first == second == "Tanks gain Blast Dmg Resist by 14% (Dmg Coefficient 800)."
    assert interpolate_skill_text.cache_info().hits == 1


@pytest.mark.parametrize(
    ("filter_term", "expected"),
    [
        ("", False),
        (" , ", False),
        ("firepower", True),
        ("healing, FIREPOWER", True),
        ("offense", True),
        ("healing", False),
        ("healing, recovery", False),
    ],
)
def test_skill_matches_terms(filter_term: str, expected: bool) -> None:
    """Any comma-separated term may match name, desc, tag, or data; blank filters match nothing."""

    skill = Skill(name="Steady Hands", data=("Troop Firepower +12%.",), tag="Offense", desc="Passive")
    assert skill_matches_terms(skill, filter_term) is expected
