"""Label-specific replacement rules for well-known upgrade attributes.

Some attributes appear in skill text with a stable phrasing (`Dmg Resist by
10%`, `(Dmg Coefficient 550)`). For those, a targeted regex is more reliable
than the generic heuristics in `skilltext.interpolation`.

Each rule set is keyed by a label fragment; an upgrade label uses the first
rule set whose key it contains. Templates are `str.format` strings receiving
the full match as `{0}`, capture groups as `{1}`, `{2}`, ... and the new level
value as `{value}`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

_NUMBER: Final[str] = r"\d+(?:\.\d+)?%?"


@dataclass(frozen=True, slots=True)
class ReplacementRule:
    """A single regex rewrite applied to every match in the text.

    Attributes:
        pattern: Compiled, case-insensitive pattern.
        template: Replacement template (see module docstring).
    """

    pattern: re.Pattern[str]
    template: str

    def apply(self, text: str, value: str) -> str:
        """Rewrite every match of the pattern in `text` using `value`."""

        return self.pattern.sub(lambda match: self.template.format(match.group(0), *match.groups(), value=value), text)


def _rule(pattern: str, template: str) -> ReplacementRule:
    return ReplacementRule(pattern=re.compile(pattern, re.IGNORECASE), template=template)


def _prefixed(prefix: str) -> ReplacementRule:
    """Rule replacing the number that directly follows `prefix`."""

    return _rule(rf"({prefix})({_NUMBER})", "{1}{value}")


REPLACEMENT_RULES: Final[dict[str, tuple[ReplacementRule, ...]]] = {
    "Dmg Coefficient": (
        _rule(r"\(Dmg Coefficient\s*\d+(?:\.\d+)?\)", "(Dmg Coefficient {value})"),
        _rule(r"Dmg Coefficient\s*\d+(?:\.\d+)?", "Dmg Coefficient {value}"),
    ),
    "Healing Coefficient": (
        _rule(r"\(Healing Coefficient\s*\d+(?:\.\d+)?\)", "(Healing Coefficient {value})"),
        _rule(r"Healing Coefficient\s*\d+(?:\.\d+)?", "Healing Coefficient {value}"),
    ),
    "Dmg Resist": (
        _prefixed(r"Dmg Resist by\s*"),
        _prefixed(r"Blast Dmg Resist by\s*"),
        _prefixed(r"Tank Dmg Resist\+"),
        _prefixed(r"Dmg Resist\s*\+"),
        _prefixed(r"Additional Tank Dmg Resist\+"),
    ),
    "Load Speed": (
        _prefixed(r"Load Speed\s+by\s+"),
        _prefixed(r"Load Speed\s+Buff:\s*"),
        _rule(rf"(Load Speed)(\+)({_NUMBER})", "{1}+{value}"),
    ),
    "Attack Dmg": (
        _prefixed(r"Attack Dmg of his Troop by\s*"),
        _prefixed(r"Attack Dmg by\s*"),
        _prefixed(r"Attack Dmg\s*\+"),
    ),
    "Firepower": (
        _prefixed(r"Firepower of all friendly Ground Forces within \d+ Map Grids by\s*"),
        _prefixed(r"Firepower by\s*"),
        _prefixed(r"Troop Firepower\s*\+"),
        _prefixed(r"Firepower\s*\+"),
        _prefixed(r"Artillery Firepower\s*\+"),
        _prefixed(r"Infantry Firepower\s*\+"),
    ),
    "Durability": (
        _prefixed(r"Tank Durability by\s*"),
        _prefixed(r"Durability\s*\+"),
    ),
    "Kill Radius": (
        _prefixed(r"Artillery Kill Radius\s*\+"),
        _prefixed(r"Kill Radius\s*\+"),
    ),
}


def find_rule_set(label: str) -> tuple[ReplacementRule, ...] | None:
    """Return the rule set for an upgrade label, or None for unknown labels."""

    for key, rules in REPLACEMENT_RULES.items():
        if key in label:
            return rules
    return None


def apply_rule_set(text: str, rules: tuple[ReplacementRule, ...], value: str) -> str:
    """Apply every rule of a set in order, each on the previous output."""

    for rule in rules:
        text = rule.apply(text, value)
    return text


def rule_set_matches(text: str, rules: tuple[ReplacementRule, ...]) -> bool:
    """Return whether any rule of a set matches `text`."""

    return any(rule.pattern.search(text) for rule in rules)
