"""Thin wrapper around the npm binary.

Every invocation is synchronous and blocking; there is no timeout. Each
subcommand decides how a non-zero exit is read: ``npm outdated`` exits 1
when it finds something, so a non-zero exit that still produced stdout is a
result there, while for install/uninstall any non-zero exit is a failure.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

import structlog

from npm_updates.config import DEFAULT_NPM_BINARY
from npm_updates.exceptions import CommandFailedError, CommandLaunchError
from npm_updates.models import DependencyKind

log = structlog.get_logger("npm_updates.manager")

_KIND_FLAGS = {
    DependencyKind.PRODUCTION: "--save",
    DependencyKind.DEVELOPMENT: "--save-dev",
}


@dataclass
class CommandResult:
    cmd: list[str]
    returncode: int
    stdout: str
    stderr: str


class PackageManager:
    """Runs npm subcommands in a working directory."""

    def __init__(self, binary: str = DEFAULT_NPM_BINARY, cwd: Path | None = None) -> None:
        self.binary = binary
        self.cwd = cwd

    def run(self, args: list[str], *, nonzero_ok_with_output: bool = False) -> CommandResult:
        cmd = [self.binary, *args]
        log.debug("manager.run", cmd=cmd)
        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                cwd=str(self.cwd) if self.cwd else None,
            )
        except OSError as e:
            raise CommandLaunchError(cmd, str(e)) from e

        result = CommandResult(cmd, proc.returncode, proc.stdout or "", proc.stderr or "")
        if result.returncode != 0:
            if nonzero_ok_with_output and result.stdout.strip():
                log.debug("manager.nonzero_with_output", cmd=cmd, returncode=result.returncode)
                return result
            log.debug("manager.failed", cmd=cmd, returncode=result.returncode)
            raise CommandFailedError(cmd, result.returncode, result.stderr)
        return result

    def outdated(self) -> str:
        """Return the raw ``npm outdated --json --long`` document."""
        return self.run(["outdated", "--json", "--long"], nonzero_ok_with_output=True).stdout

    def uninstall(self, name: str) -> None:
        self.run(["uninstall", name, "--force"])

    def install(self, name: str, version: str, kind: DependencyKind) -> None:
        args = ["install", f"{name}@{version}"]
        flag = _KIND_FLAGS.get(kind)
        if flag:
            args.append(flag)
        args.append("--force")
        self.run(args)
