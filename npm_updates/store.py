"""Snapshot file, the hand-off between the check and update phases."""

from __future__ import annotations

import json
from pathlib import Path

import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError

from npm_updates.config import DEFAULT_SNAPSHOT_FILE
from npm_updates.exceptions import SnapshotError, SnapshotFormatError, SnapshotNotFoundError
from npm_updates.models import IdentifiedDependency

log = structlog.get_logger("npm_updates.store")


class SnapshotEntry(BaseModel):
    """On-disk shape of one snapshot record."""

    id: int
    name: str
    current: str
    wanted: str
    latest: str
    location: str
    type: str


_ENTRIES = TypeAdapter(list[SnapshotEntry])


class SnapshotStore:
    """
    Reads and writes the scanned, id-tagged dependency list.
    No locking: two concurrent invocations on the same file race.
    """

    def __init__(self, path: Path | str = DEFAULT_SNAPSHOT_FILE) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def save(self, records: list[IdentifiedDependency]) -> None:
        """Write *records* as indented JSON, replacing any previous snapshot."""
        try:
            with self.path.open("w", encoding="utf-8") as fh:
                json.dump([r.to_dict() for r in records], fh, indent=2)
                fh.write("\n")
        except OSError as e:
            raise SnapshotError(f"cannot write snapshot {self.path}: {e}") from e
        log.info("store.saved", path=str(self.path), count=len(records))

    def load(self) -> list[IdentifiedDependency]:
        try:
            with self.path.open(encoding="utf-8") as fh:
                raw = fh.read()
        except FileNotFoundError as e:
            raise SnapshotNotFoundError(
                f"no snapshot at {self.path}; run 'npm-updates --check' first"
            ) from e
        except UnicodeDecodeError as e:
            raise SnapshotFormatError(f"unreadable snapshot {self.path}: {e}") from e
        except OSError as e:
            raise SnapshotError(f"cannot read snapshot {self.path}: {e}") from e

        try:
            entries = _ENTRIES.validate_json(raw)
        except ValidationError as e:
            raise SnapshotFormatError(f"unreadable snapshot {self.path}: {e}") from e

        for index, entry in enumerate(entries):
            if entry.id != index:
                raise SnapshotFormatError(
                    f"unreadable snapshot {self.path}: entry {index} has id {entry.id}"
                )

        log.debug("store.loaded", path=str(self.path), count=len(entries))
        return [IdentifiedDependency.from_dict(e.model_dump()) for e in entries]

    def clear(self) -> None:
        """Delete the snapshot. Deleting a missing snapshot is an error."""
        try:
            self.path.unlink()
        except FileNotFoundError as e:
            raise SnapshotNotFoundError(f"no snapshot at {self.path} to remove") from e
        except OSError as e:
            raise SnapshotError(f"cannot remove snapshot {self.path}: {e}") from e
        log.info("store.cleared", path=str(self.path))
