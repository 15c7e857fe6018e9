"""Pytest fixtures shared across the skill-text and catalog tests."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

import pytest

UPGRADE_PREVIEW_ENTRY = (
    "UPGRADE PREVIEW:<br />"
    "Blast Dmg Resist Buff: 10%/12%/14%/16%/20%<br />"
    "Dmg Coefficient 550/650/800/950/1200"
)


@pytest.fixture
def officer_payload() -> list[dict[str, object]]:
    """Return a small officer catalog document shaped like the game data."""

    return [
        {
            "name": "John Reilly",
            "nickname": "Iron John",
            "army": "GroundForces",
            "grade": "8.1",
            "jn": [
                {
                    "name": "Wall of Steel",
                    "tag": "Defense",
                    "desc": "Passive",
                    "data": [
                        "Tanks gain Blast Dmg Resist by 10% (Dmg Coefficient 550).",
                        UPGRADE_PREVIEW_ENTRY,
                    ],
                },
                {"name": "Steady Hands", "data": ["Troop Firepower +12%."]},
                {"name": "Second Wind", "data": ["Recovers 5 troops every 30 seconds."]},
                {"name": "Veteran", "data": ["Load Speed+4%."]},
                {
                    "name": "Revival Booster",
                    "data": [
                        "REVIVAL BOOSTER LOCKED: Max all skills to unlock.",
                        "REVIVAL BOOSTER UNLOCKED: Durability +30%.",
                    ],
                },
            ],
        },
        {"name": "Anna Weber", "nickname": "", "army": "AirForce", "jn": []},
    ]


@pytest.fixture
def officer_catalog(tmp_path: Path, officer_payload: list[dict[str, object]]) -> Path:
    """Write the officer payload to a JSON file and return its path."""

    path = tmp_path / "officer.json"
    path.write_text(json.dumps(officer_payload), encoding="utf-8")
    return path


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no Django or file access.
    - `integration`: tests touching Django, management commands, or files.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
