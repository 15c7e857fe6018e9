"""Read-only officer catalog records built from the game's officer JSON.

The catalog file is a JSON list of officer objects. Each officer lists its
skills under `jn`; every skill carries a `data` list whose first entry is the
base description and which may include an "UPGRADE PREVIEW:" block and revival
variants.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Any

from skilltext.numbers import parse_number

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when an officer catalog document cannot be loaded."""


@dataclass(frozen=True, slots=True)
class Skill:
    """One officer skill.

    Attributes:
        name: Display name.
        data: Description strings; index 0 is the base text.
        tag: Skill category tag, if any.
        desc: Short description, if any.
        type: Skill type label, if any.
    """

    name: str
    data: tuple[str, ...]
    tag: str = ""
    desc: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Skill:
        """Build a Skill from a catalog `jn` entry, tolerating missing keys."""

        data = raw.get("data") or []
        return cls(
            name=str(raw.get("name") or ""),
            data=tuple(str(item) for item in data),
            tag=str(raw.get("tag") or ""),
            desc=str(raw.get("desc") or raw.get("description") or ""),
            type=str(raw.get("type") or ""),
        )


@dataclass(frozen=True, slots=True)
class Officer:
    """An officer and its ordered skills.

    Attributes:
        name: Officer name.
        nickname: Alternate display name.
        army: Army branch (e.g. `GroundForces`, `AirForce`).
        grade: Numeric grade when present.
        skills: Skills in slot order; slot 4 is the revival skill.
    """

    name: str
    nickname: str
    army: str
    grade: Decimal | None
    skills: tuple[Skill, ...]

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Officer:
        """Build an Officer from a catalog entry."""

        skills = raw.get("jn") or []
        grade = raw.get("grade")
        return cls(
            name=str(raw.get("name") or ""),
            nickname=str(raw.get("nickname") or ""),
            army=str(raw.get("army") or ""),
            grade=None if grade is None else parse_number(grade),
            skills=tuple(Skill.from_dict(skill) for skill in skills if isinstance(skill, Mapping)),
        )


def load_officers(path: str | Path) -> list[Officer]:
    """Load every officer from a catalog JSON file.

    Args:
        path: Path to the officer JSON document.

    Returns:
        Officers in document order.

    Raises:
        CatalogError: When the file cannot be read or decoded, when the
            document is not a list, or when an entry is not an object.
    """

    catalog_path = Path(path)
    try:
        payload = json.loads(catalog_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogError(f"Could not read officer catalog {catalog_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Officer catalog {catalog_path} is not valid JSON: {exc}") from exc

    officers = parse_officers(payload)
    logger.info("Loaded %d officers from %s.", len(officers), catalog_path)
    return officers


def parse_officers(payload: Any) -> list[Officer]:
    """Build Officer records from a decoded catalog document.

    Raises:
        CatalogError: When `payload` is not a list of objects.
    """

    if not isinstance(payload, list):
        raise CatalogError(f"Officer catalog must be a JSON list, got {type(payload).__name__}.")

    officers: list[Officer] = []
    for index, entry in enumerate(payload):
        if not isinstance(entry, Mapping):
            raise CatalogError(f"Officer entry {index} must be an object, got {type(entry).__name__}.")
        officers.append(Officer.from_dict(entry))
    return officers


def find_officer(officers: Iterable[Officer], name: str) -> Officer | None:
    """Return the first officer whose name or nickname matches, ignoring case."""

    wanted = name.strip().casefold()
    if not wanted:
        return None
    for officer in officers:
        if officer.name.casefold() == wanted or officer.nickname.casefold() == wanted:
            return officer
    return None
