"""npm-updates: list outdated npm packages and apply chosen updates."""

__version__ = "0.1.0"

from npm_updates.applier import UpdateApplier, UpdateReport
from npm_updates.manager import CommandResult, PackageManager
from npm_updates.models import (
    DependencyKind,
    IdentifiedDependency,
    OutdatedDependency,
    assign_ids,
    format_listing,
)
from npm_updates.scanner import parse_outdated, scan
from npm_updates.selection import parse_selection
from npm_updates.store import SnapshotStore

__all__ = [
    "CommandResult",
    "DependencyKind",
    "IdentifiedDependency",
    "OutdatedDependency",
    "PackageManager",
    "SnapshotStore",
    "UpdateApplier",
    "UpdateReport",
    "assign_ids",
    "format_listing",
    "parse_outdated",
    "parse_selection",
    "scan",
]
