"""Print an officer's skill text at every skill level.

Useful for checking how the upgrade interpolation handles a given officer's
catalog text before it reaches the UI.
"""

from __future__ import annotations

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from officers.catalog import CatalogError, find_officer, load_officers
from skilltext.levels import (
    MAX_LEVEL,
    MIN_LEVEL,
    REVIVAL_SKILL_INDEX,
    TOTAL_SKILLS,
    clamp_level,
    default_skill_levels,
    is_revival_skill_available,
)
from skilltext.render import resolve_skill_text
from skilltext.upgrade_preview import parse_upgrade_data


class Command(BaseCommand):
    """Preview level-specific skill text for one officer."""

    help = "Print an officer's skill text for each skill level (read-only)."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument(
            "catalog",
            nargs="?",
            default=None,
            help="Path to the officer JSON catalog (defaults to settings.OFFICER_CATALOG_PATH).",
        )
        parser.add_argument(
            "--officer",
            required=True,
            help="Officer name or nickname (case-insensitive).",
        )
        parser.add_argument(
            "--skill",
            type=int,
            default=None,
            help="Optional skill slot index (0-based); defaults to every skill.",
        )
        parser.add_argument(
            "--level",
            type=int,
            default=None,
            help=f"Optional level ({MIN_LEVEL}-{MAX_LEVEL}); defaults to every level.",
        )
        parser.add_argument(
            "--max-levels",
            action="store_true",
            help="Treat every regular skill as maxed, unlocking the revival skill.",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        catalog_path = options["catalog"] or settings.OFFICER_CATALOG_PATH
        skill_index: int | None = options["skill"]
        level: int | None = options["level"]

        if level is not None and clamp_level(level) != level:
            raise CommandError(f"--level must be between {MIN_LEVEL} and {MAX_LEVEL}.")

        try:
            officers = load_officers(catalog_path)
        except CatalogError as exc:
            raise CommandError(str(exc)) from exc

        officer = find_officer(officers, options["officer"])
        if officer is None:
            raise CommandError(f"Officer {options['officer']!r} not found in {catalog_path}.")

        if skill_index is not None and not 0 <= skill_index < len(officer.skills):
            raise CommandError(f"--skill must be between 0 and {len(officer.skills) - 1} for {officer.name}.")

        if options["max_levels"]:
            skill_levels = {index: MAX_LEVEL for index in range(TOTAL_SKILLS)}
        else:
            skill_levels = default_skill_levels()
        revival_available = is_revival_skill_available(skill_levels)

        levels = [level] if level is not None else list(range(MIN_LEVEL, MAX_LEVEL + 1))
        indexes = [skill_index] if skill_index is not None else list(range(len(officer.skills)))

        self.stdout.write(f"{officer.name} ({len(officer.skills)} skills)")
        for index in indexes:
            skill = officer.skills[index]
            self.stdout.write(f"[{index}] {skill.name}")

            if index == REVIVAL_SKILL_INDEX:
                variants = resolve_skill_text(skill.data, index=index, level=MAX_LEVEL, revival_available=revival_available)
                if not variants:
                    self.stdout.write("  (no revival text)")
                for text in variants:
                    self.stdout.write(f"  {text}")
                continue

            upgrade_table = parse_upgrade_data(skill.data)
            if not upgrade_table:
                self.stdout.write("  (no upgrade preview)")
            for label, values in upgrade_table.items():
                self.stdout.write(f"  {label}: {' / '.join(values)}")
            for current in levels:
                (text,) = resolve_skill_text(skill.data, index=index, level=current)
                self.stdout.write(f"  L{current}: {text}")
        return None
