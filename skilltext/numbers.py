"""Numeric helpers for semi-structured skill text.

Skill descriptions embed game-balance values as free text (`+12%`, `1 0%`,
`550`). These helpers normalize such tokens without ever raising.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Final

from .levels import DEFAULT_TOLERANCE

_NON_NUMERIC_RE: Final[re.Pattern[str]] = re.compile(r"[^\d.]", re.ASCII)
_LEADING_NUMBER_RE: Final[re.Pattern[str]] = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))", re.ASCII)


def clean_numeric(value: str) -> str:
    """Strip every character that is not a digit or a dot.

    Args:
        value: Raw upgrade value (e.g. `12%`, `+1.5%`, `x550`).

    Returns:
        The digits-and-dots remainder, which may be empty.
    """

    return _NON_NUMERIC_RE.sub("", value)


def parse_number(value: object) -> Decimal | None:
    """Parse the leading number of a value, or None when there is none.

    Trailing garbage after the number is ignored, so `10%` parses as 10.
    """

    match = _LEADING_NUMBER_RE.match(str(value))
    if match is None:
        return None
    try:
        return Decimal(match.group(1))
    except InvalidOperation:
        return None


def is_number_close(first: object, second: object, *, tolerance: Decimal = DEFAULT_TOLERANCE) -> bool:
    """Return whether two numeric-looking values are within `tolerance`.

    Non-numeric inputs are never close.
    """

    left = parse_number(first)
    right = parse_number(second)
    if left is None or right is None:
        return False
    return abs(left - right) <= Decimal(str(tolerance))


def with_percent(value: str) -> str:
    """Append `%` to a value that does not already carry one."""

    return value if "%" in value else f"{value}%"
