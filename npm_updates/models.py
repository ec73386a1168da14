"""Core data types for outdated dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class DependencyKind(Enum):
    """Which manifest section a dependency belongs to."""

    PRODUCTION = "dependencies"
    DEVELOPMENT = "devDependencies"
    OTHER = "other"

    @classmethod
    def from_type(cls, raw: str) -> DependencyKind:
        """Map npm's raw ``type`` field; anything unrecognised is OTHER."""
        if raw == cls.PRODUCTION.value:
            return cls.PRODUCTION
        if raw == cls.DEVELOPMENT.value:
            return cls.DEVELOPMENT
        return cls.OTHER


@dataclass(frozen=True)
class OutdatedDependency:
    """A single outdated package as reported by ``npm outdated --long``."""

    name: str
    current: str
    wanted: str
    latest: str
    location: str
    type: str  # raw npm value: "dependencies", "devDependencies", ...

    @property
    def kind(self) -> DependencyKind:
        return DependencyKind.from_type(self.type)


@dataclass(frozen=True)
class IdentifiedDependency(OutdatedDependency):
    """
    An outdated dependency tagged with its position in a snapshot.
    Ids are only meaningful within the snapshot that assigned them.
    """

    id: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "current": self.current,
            "wanted": self.wanted,
            "latest": self.latest,
            "location": self.location,
            "type": self.type,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> IdentifiedDependency:
        return cls(
            id=int(data["id"]),
            name=data["name"],
            current=data["current"],
            wanted=data["wanted"],
            latest=data["latest"],
            location=data["location"],
            type=data["type"],
        )


def assign_ids(dependencies: Mapping[str, OutdatedDependency]) -> list[IdentifiedDependency]:
    """Sort by package name and number the result 0..N-1."""
    return [
        IdentifiedDependency(
            id=index,
            name=name,
            current=dep.current,
            wanted=dep.wanted,
            latest=dep.latest,
            location=dep.location,
            type=dep.type,
        )
        for index, (name, dep) in enumerate(sorted(dependencies.items()))
    ]


def format_listing(records: list[IdentifiedDependency]) -> list[str]:
    """Render ``[07] name (current => latest)`` lines for the check phase."""
    return [f"[{r.id:02d}] {r.name} ({r.current} => {r.latest})" for r in records]
