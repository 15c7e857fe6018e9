"""Best-effort parsing of "UPGRADE PREVIEW:" blocks.

A skill's data list may contain one entry that enumerates the per-level values
of one or more attributes, one attribute per `<br />`-separated line:

    UPGRADE PREVIEW:<br />Load Speed Buff: 4%/5%/6%/7%/10%<br />Dmg Coefficient 550/650/800/950/1200

Parsing rules:
- Lines that cannot be parsed are skipped, never fatal.
- A line only counts when it yields at least one value per skill level.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from .levels import MIN_UPGRADE_VALUES

UPGRADE_PREVIEW_MARKER: Final[str] = "UPGRADE PREVIEW:"
LINE_BREAK: Final[str] = "<br />"

_LABELLED_NUMBERS_RE: Final[re.Pattern[str]] = re.compile(r"^([A-Za-z\s]+?)\s+(\d+(?:\.\d+)?%?/.*)")


@dataclass(frozen=True, slots=True)
class UpgradeLine:
    """A single parsed upgrade preview line.

    Attributes:
        label: Attribute label (e.g. `Load Speed Buff`).
        values: Value strings ordered by level; index 0 is level 1.
    """

    label: str
    values: tuple[str, ...]


def parse_upgrade_data(data: Sequence[str], *, min_values: int = MIN_UPGRADE_VALUES) -> dict[str, list[str]]:
    """Extract the upgrade table from a skill's data strings.

    Args:
        data: Skill description strings as stored in the officer catalog.
        min_values: Minimum number of values a line must yield to be kept.

    Returns:
        Mapping of label -> value strings in the order labels were first seen.
        A label that appears twice keeps its first position and the values of
        its last occurrence. An empty mapping means the skill text does not
        scale with level.
    """

    table: dict[str, list[str]] = {}
    for entry in data:
        if UPGRADE_PREVIEW_MARKER not in entry:
            continue
        for line in entry.split(LINE_BREAK):
            parsed = parse_upgrade_line(line.strip(), min_values=min_values)
            if parsed is None:
                continue
            table[parsed.label] = list(parsed.values)
    return table


def parse_upgrade_line(line: str, *, min_values: int = MIN_UPGRADE_VALUES) -> UpgradeLine | None:
    """Parse one upgrade preview line into a label and its per-level values.

    Args:
        line: A trimmed line from an upgrade preview block.
        min_values: Minimum number of values required.

    Returns:
        UpgradeLine for the first format that yields enough values, or None.
        Formats are tried in order:

        1. `Label: v1/v2/v3/v4/v5`
        2. `Multi Word Label v1/v2/v3/v4/v5`
        3. `Label rest/of/the/line` (split at the first space)
    """

    if not line or UPGRADE_PREVIEW_MARKER.rstrip(":") in line:
        return None
    if "/" not in line:
        return None

    if ":" in line:
        label, _, remainder = line.partition(":")
        parsed = _build_line(label, remainder, min_values=min_values)
        if parsed is not None:
            return parsed

    match = _LABELLED_NUMBERS_RE.match(line)
    if match is not None:
        parsed = _build_line(match.group(1), match.group(2), min_values=min_values)
        if parsed is not None:
            return parsed

    first_space = line.find(" ")
    if first_space > 0:
        return _build_line(line[:first_space], line[first_space + 1 :], min_values=min_values)
    return None


def _build_line(label: str, raw_values: str, *, min_values: int) -> UpgradeLine | None:
    """Split `raw_values` on `/` and wrap the result when it is long enough."""

    if "/" not in raw_values:
        return None
    values = tuple(value.strip() for value in raw_values.strip().split("/"))
    if len(values) < min_values:
        return None
    return UpgradeLine(label=label.strip(), values=values)
