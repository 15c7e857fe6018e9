"""Level interpolation for officer skill text.

A skill's base text shows attribute values for one level (usually level 1).
`apply_upgrade_values` rewrites that text for another level using the upgrade
table extracted by `skilltext.upgrade_preview`.

The source text is human-authored and irregular, so substitution is a
best-effort cascade:

0. Label-specific regex rules from `skilltext.replacement_rules`. When any
   rule of the label's set matches, the heuristics below are skipped.
A. Any value from the label's value list followed by `%`.
B. The level-1 value with stray whitespace between its digits (`1 0%`).
C. The level-1 value followed by `%`.
D. The first number within tolerance of the level-1 value.

Every strategy returns the rewritten text or None; the first non-None result
wins. When nothing matches the text is returned unchanged.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Final

from .levels import DEFAULT_TOLERANCE
from .numbers import clean_numeric, is_number_close, with_percent
from .replacement_rules import apply_rule_set, find_rule_set, rule_set_matches

logger = logging.getLogger(__name__)

_PERCENT_TOKEN_RE: Final[re.Pattern[str]] = re.compile(r"\d+(?:\.\d+)?%", re.ASCII)
_BARE_NUMBER_RE: Final[re.Pattern[str]] = re.compile(r"\b\d+(?:\.\d+)?\b", re.ASCII)


@dataclass(frozen=True, slots=True)
class Substitution:
    """Inputs for substituting one upgrade label's value.

    Attributes:
        values: All per-level values for the label; index 0 is level 1.
        target: Value for the requested level.
        base: Level-1 value stripped to digits and dots.
        tolerance: Maximum numeric distance for contextual matching.
    """

    values: tuple[str, ...]
    target: str
    base: str
    tolerance: Decimal = DEFAULT_TOLERANCE

    @property
    def clean_target(self) -> str:
        return clean_numeric(self.target)


Strategy = Callable[[str, Substitution], str | None]


def replace_any_level_value(text: str, sub: Substitution) -> str | None:
    """Replace the first `N%` token where N is any level's value.

    The displayed base value is not always the level-1 value, so every level
    is tried in order.
    """

    for value in sub.values:
        cleaned = clean_numeric(value)
        if not cleaned:
            continue
        percent_token = f"{cleaned}%"
        if percent_token in text:
            return text.replace(percent_token, sub.target, 1)
        # Unreachable: `+N%` always contains `N%`, which was checked above.
        plus_token = f"+{cleaned}%"
        if plus_token in text:
            return text.replace(plus_token, f"+{with_percent(sub.target)}", 1)
    return None


def repair_spaced_digits(text: str, sub: Substitution) -> str | None:
    """Replace a level-1 percentage whose digits are split by whitespace."""

    spaced = r"\s+".join(re.escape(char) for char in sub.base)
    pattern = re.compile(rf"\+?{spaced}%")
    if pattern.search(text) is None:
        return None
    replacement = with_percent(sub.target)
    return pattern.sub(lambda _match: replacement, text)


def replace_base_value(text: str, sub: Substitution) -> str | None:
    """Replace the first literal level-1 percentage."""

    percent_token = f"{sub.base}%"
    if percent_token in text:
        return text.replace(percent_token, sub.target, 1)
    # Unreachable: `+N%` always contains `N%`, which was checked above.
    plus_token = f"+{sub.base}%"
    if plus_token in text:
        return text.replace(plus_token, f"+{with_percent(sub.target)}", 1)
    return None


def replace_nearest_number(text: str, sub: Substitution) -> str | None:
    """Replace the first number numerically close to the level-1 value.

    Percentage targets only consider `N%` tokens and replace the first
    occurrence; plain targets consider bare numbers and replace every
    word-bounded occurrence.
    """

    if "%" in sub.target:
        for token in _PERCENT_TOKEN_RE.findall(text):
            if is_number_close(token[:-1], sub.base, tolerance=sub.tolerance):
                return text.replace(token, sub.target, 1)
        return None

    replacement = sub.clean_target
    for token in _BARE_NUMBER_RE.findall(text):
        if is_number_close(token, sub.base, tolerance=sub.tolerance):
            return re.sub(rf"\b{re.escape(token)}\b", lambda _match: replacement, text, flags=re.ASCII)
    return None


STRATEGIES: Final[tuple[tuple[str, Strategy], ...]] = (
    ("any_level_value", replace_any_level_value),
    ("spaced_digits", repair_spaced_digits),
    ("base_value", replace_base_value),
    ("nearest_number", replace_nearest_number),
)


def apply_intelligent_upgrade(text: str, label: str, sub: Substitution) -> str:
    """Run the heuristic strategy cascade for one upgrade label.

    Args:
        text: Current skill text.
        label: Upgrade label, used for logging only.
        sub: Substitution inputs for the label.

    Returns:
        The rewritten text, or `text` unchanged when no strategy matched.
    """

    if not sub.clean_target or not sub.base:
        return text

    for name, strategy in STRATEGIES:
        result = strategy(text, sub)
        if result is not None:
            logger.debug("Upgrade %r matched strategy %s.", label, name)
            return result

    logger.debug("Upgrade %r matched no strategy; text left unchanged.", label)
    return text


def apply_upgrade_values(
    text: str,
    upgrade_table: Mapping[str, Sequence[str]],
    level: int,
    *,
    tolerance: Decimal = DEFAULT_TOLERANCE,
) -> str:
    """Rewrite skill text for the requested level.

    Args:
        text: Base skill text (the first entry of a skill's data list).
        upgrade_table: Mapping of label -> per-level values, applied in
            mapping order. Each label sees the output of the previous one.
        level: Requested skill level (1-based).
        tolerance: Maximum numeric distance for contextual matching.

    Returns:
        The interpolated text. Labels without a value for `level` are skipped.
    """

    current = text
    for label, values in upgrade_table.items():
        if level < 1 or level > len(values):
            continue
        target = values[level - 1]
        if not target:
            continue

        rules = find_rule_set(label)
        if rules is not None and rule_set_matches(current, rules):
            logger.debug("Upgrade %r matched label-specific rules.", label)
            current = apply_rule_set(current, rules, target)
            continue

        sub = Substitution(
            values=tuple(values),
            target=target,
            base=clean_numeric(values[0]),
            tolerance=tolerance,
        )
        current = apply_intelligent_upgrade(current, label, sub)
    return current
