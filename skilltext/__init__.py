"""Pure skill-text package for warpathCatalog.

This package turns officer skill description strings into level-specific
display text. It operates on in-memory strings only and must not import
Django.
"""

from .interpolation import apply_upgrade_values
from .render import resolve_skill_text
from .upgrade_preview import parse_upgrade_data

__all__ = ["apply_upgrade_values", "parse_upgrade_data", "resolve_skill_text"]
