"""Keyword matching over officer skill content."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class SearchableSkill(Protocol):
    """Attributes consulted when matching a skill against search terms."""

    name: str
    desc: str
    tag: str
    data: Sequence[str]


def split_terms(filter_term: str) -> list[str]:
    """Split a comma-separated filter into lowercased, non-empty terms."""

    return [term.strip() for term in filter_term.lower().split(",") if term.strip()]


def skill_matches_terms(skill: SearchableSkill, filter_term: str) -> bool:
    """Return whether any comma-separated term occurs in the skill's text.

    Args:
        skill: Skill record exposing name, desc, tag, and data.
        filter_term: Raw filter such as `firepower, dmg resist`.

    Returns:
        True when any term is a substring of the skill's combined lowercase
        text. A blank filter matches nothing.
    """

    terms = split_terms(filter_term)
    if not terms:
        return False

    searchable = " ".join([skill.name or "", skill.desc or "", skill.tag or "", *skill.data]).lower()
    return any(term in searchable for term in terms)
