"""Outdated-dependency scanner: runs ``npm outdated`` and numbers the result."""

from __future__ import annotations

import json

import structlog
from pydantic import BaseModel, ValidationError

from npm_updates.exceptions import OutdatedParseError
from npm_updates.manager import PackageManager
from npm_updates.models import IdentifiedDependency, OutdatedDependency, assign_ids

log = structlog.get_logger("npm_updates.scanner")


class OutdatedEntry(BaseModel):
    """One value of the ``npm outdated --json --long`` mapping.

    npm leaves out ``current`` for packages that are declared but not
    installed, so only ``latest`` is mandatory.
    """

    current: str = ""
    wanted: str = ""
    latest: str
    location: str = ""
    type: str = ""


def parse_outdated(raw: str) -> dict[str, OutdatedDependency]:
    """Parse the outdated document into ``{name: OutdatedDependency}``."""
    if not raw.strip():
        return {}

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise OutdatedParseError(f"invalid JSON from npm outdated: {e}") from e

    if not isinstance(data, dict):
        raise OutdatedParseError(
            f"expected a JSON object from npm outdated, got {type(data).__name__}"
        )

    result: dict[str, OutdatedDependency] = {}
    for name, details in data.items():
        try:
            entry = OutdatedEntry.model_validate(details)
        except ValidationError as e:
            raise OutdatedParseError(f"malformed entry for '{name}': {e}") from e
        result[name] = OutdatedDependency(
            name=name,
            current=entry.current,
            wanted=entry.wanted,
            latest=entry.latest,
            location=entry.location,
            type=entry.type,
        )
    return result


def scan(manager: PackageManager) -> list[IdentifiedDependency]:
    """Run ``npm outdated`` and return the outdated packages, sorted and numbered."""
    outdated = parse_outdated(manager.outdated())
    log.info("scanner.outdated_found", count=len(outdated))
    return assign_ids(outdated)
