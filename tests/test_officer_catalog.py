"""Tests for loading the officer catalog JSON."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from officers.catalog import CatalogError, find_officer, load_officers, parse_officers

pytestmark = pytest.mark.integration


def test_load_officers_builds_records_in_document_order(officer_catalog: Path) -> None:
    """Officers and their skills keep the catalog order."""

    officers = load_officers(officer_catalog)

    assert [officer.name for officer in officers] == ["John Reilly", "Anna Weber"]
    john = officers[0]
    assert john.nickname == "Iron John"
    assert john.army == "GroundForces"
    assert john.grade == Decimal("8.1")
    assert [skill.name for skill in john.skills] == [
        "Wall of Steel",
        "Steady Hands",
        "Second Wind",
        "Veteran",
        "Revival Booster",
    ]
    assert john.skills[0].tag == "Defense"
    assert john.skills[0].data[0].startswith("Tanks gain Blast Dmg Resist")
    assert officers[1].grade is None
    assert officers[1].skills == ()


def test_find_officer_matches_name_or_nickname(officer_catalog: Path) -> None:
    """Lookups ignore case and accept nicknames."""

    officers = load_officers(officer_catalog)

    assert find_officer(officers, "john reilly") is officers[0]
    assert find_officer(officers, " IRON JOHN ") is officers[0]
    assert find_officer(officers, "Nobody") is None
    assert find_officer(officers, "") is None


def test_load_officers_rejects_non_list_document(tmp_path: Path) -> None:
    """The catalog root must be a JSON list."""

    path = tmp_path / "officer.json"
    path.write_text('{"name": "John Reilly"}', encoding="utf-8")

    with pytest.raises(CatalogError, match="must be a JSON list"):
        load_officers(path)


def test_load_officers_wraps_decode_and_read_errors(tmp_path: Path) -> None:
    """Unreadable or malformed files surface as CatalogError."""

    broken = tmp_path / "broken.json"
    broken.write_text("[{", encoding="utf-8")

    with pytest.raises(CatalogError, match="not valid JSON"):
        load_officers(broken)

    with pytest.raises(CatalogError, match="Could not read"):
        load_officers(tmp_path / "missing.json")


def test_parse_officers_rejects_non_object_entries() -> None:
    """Every officer entry must be an object."""

    with pytest.raises(CatalogError, match="Officer entry 1"):
        parse_officers([{"name": "John Reilly"}, "Anna Weber"])
