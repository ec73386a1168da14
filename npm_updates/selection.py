"""Parsing of the ``--update`` id list."""

from __future__ import annotations

import re

from npm_updates.exceptions import InvalidSelectionError

# Spaces may surround ids and commas, but never split an id: "1 2" is not "12".
_SELECTION_RE = re.compile(r"^\s*\d+\s*(,\s*\d+\s*)*$")


def is_valid_selection(raw: str) -> bool:
    return _SELECTION_RE.match(raw) is not None


def parse_selection(raw: str) -> list[int]:
    """Return the ids in the order given. Duplicates are kept."""
    if not is_valid_selection(raw):
        raise InvalidSelectionError(
            "The update string must be a comma separated list of IDs (e.g. 1,2,3)"
        )
    return [int(part) for part in raw.split(",")]
