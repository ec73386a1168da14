"""Update applier — uninstall + pinned reinstall for each selected id."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import click
import structlog

from npm_updates.exceptions import CommandFailedError, PartialUpdateError
from npm_updates.manager import PackageManager
from npm_updates.models import IdentifiedDependency
from npm_updates.selection import parse_selection
from npm_updates.store import SnapshotStore

log = structlog.get_logger("npm_updates.applier")


@dataclass
class UpdateReport:
    updated: list[IdentifiedDependency] = field(default_factory=list)
    unknown_ids: list[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.unknown_ids


class UpdateApplier:
    """Applies a selection of updates from the stored snapshot, one at a time."""

    def __init__(
        self,
        manager: PackageManager,
        store: SnapshotStore,
        echo: Callable[[str], None] = click.echo,
    ) -> None:
        self._manager = manager
        self._store = store
        self._echo = echo

    def apply(self, raw_selection: str) -> UpdateReport:
        """Validate *raw_selection*, update each id in order, then drop the snapshot.

        Unknown ids are reported and skipped. Any package-manager failure
        propagates immediately and leaves the snapshot in place.
        """
        ids = parse_selection(raw_selection)
        self._echo("Updating...")
        self._echo("")
        snapshot = self._store.load()
        report = UpdateReport()

        for dep_id in ids:
            if not 0 <= dep_id < len(snapshot):
                log.info("applier.unknown_id", id=dep_id, snapshot_size=len(snapshot))
                self._echo(
                    f"WARNING: Unknown dependency id {dep_id} "
                    f"(snapshot has {len(snapshot)} entries)"
                )
                report.unknown_ids.append(dep_id)
                continue

            dep = snapshot[dep_id]
            self._echo(f"Updating '{dep.name}' from {dep.current} to {dep.latest}")
            self._replace(dep)
            self._echo(f"Dependency '{dep.name}' updated successfully")
            self._echo("")
            report.updated.append(dep)

        self._store.clear()
        self._echo("Done!")
        return report

    def _replace(self, dep: IdentifiedDependency) -> None:
        # Not atomic: a failed install leaves the package uninstalled.
        self._manager.uninstall(dep.name)
        try:
            self._manager.install(dep.name, dep.latest, dep.kind)
        except CommandFailedError as e:
            log.error("applier.install_failed", name=dep.name, previous=dep.current)
            raise PartialUpdateError(e, dep.name, dep.current) from e
        log.info("applier.updated", name=dep.name, version=dep.latest, kind=dep.kind.value)
