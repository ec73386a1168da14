"""CLI entry point: npm-updates.

Usage:
    npm-updates --check              # list outdated packages, write package-updates.json
    npm-updates --update 0,2,5       # update the listed ids, then remove the snapshot
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
import structlog

from npm_updates.applier import UpdateApplier
from npm_updates.config import Settings
from npm_updates.exceptions import CommandFailedError, NpmUpdatesError
from npm_updates.logging import setup_logging
from npm_updates.manager import PackageManager
from npm_updates.models import format_listing
from npm_updates.scanner import scan
from npm_updates.store import SnapshotStore

log = structlog.get_logger("npm_updates.cli")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


@click.command()
@click.option("--check", is_flag=True, help="Check for updates")
@click.option(
    "--update", "update_ids", default=None, metavar="IDS",
    help="Install updates (e.g. --update 1,2,3)",
)
@click.option(
    "--file", "snapshot_file", default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Snapshot file (default: package-updates.json, env NPM_UPDATES_FILE)",
)
@click.option("--npm", "npm_binary", default=None, help="Package manager binary (env NPM_UPDATES_NPM)")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    check: bool,
    update_ids: str | None,
    snapshot_file: Path | None,
    npm_binary: str | None,
    verbose: bool,
) -> None:
    """Check for outdated npm packages and apply selected updates."""
    settings = Settings.from_env()
    setup_logging("DEBUG" if verbose else settings.log_level, settings.log_format)

    if not check and update_ids is None:
        click.echo("WARNING: Is necessary to specify one of the arguments (--check or --update)", err=True)
        sys.exit(EXIT_USAGE)
    if check and update_ids is not None:
        click.echo("WARNING: Only one argument can be specified (--check or --update)", err=True)
        sys.exit(EXIT_USAGE)

    manager = PackageManager(npm_binary or settings.npm_binary)
    store = SnapshotStore(snapshot_file or settings.snapshot_file)

    try:
        if check:
            _check(manager, store)
            sys.exit(EXIT_OK)
        sys.exit(_update(manager, store, update_ids))
    except NpmUpdatesError as e:
        _report_error(e)
        sys.exit(EXIT_FAILURE)


def _check(manager: PackageManager, store: SnapshotStore) -> None:
    click.echo("Checking for updates...")
    click.echo()

    records = scan(manager)
    if not records:
        click.echo("No dependencies to update found")
        if store.exists():
            store.clear()
        return

    click.echo(f"{len(records)} dependencies to update found")
    click.echo("To update, run the following command:")
    click.echo("npm-updates --update [dependency-id]")
    click.echo()
    for line in format_listing(records):
        click.echo(line)
    click.echo()

    store.save(records)


def _update(manager: PackageManager, store: SnapshotStore, update_ids: str) -> int:
    report = UpdateApplier(manager, store).apply(update_ids)
    if not report.ok:
        skipped = ", ".join(str(i) for i in report.unknown_ids)
        click.echo(f"ERROR: Unknown dependency ids skipped: {skipped}", err=True)
        return EXIT_FAILURE
    return EXIT_OK


def _report_error(e: NpmUpdatesError) -> None:
    log.debug("cli.error", error=str(e), error_type=type(e).__name__)
    click.echo(f"ERROR: {e}", err=True)
    if isinstance(e, CommandFailedError) and e.stderr.strip():
        click.echo(f"ERROR: {e.cmd[0]} output: {e.stderr.strip()}", err=True)


if __name__ == "__main__":
    main()
