"""Custom exceptions for npm-updates."""

from __future__ import annotations


class NpmUpdatesError(Exception):
    """Base exception for all npm-updates errors."""


class CommandError(NpmUpdatesError):
    """Raised when a package-manager invocation does not succeed."""


class CommandLaunchError(CommandError):
    """Raised when the package-manager binary cannot be executed at all."""

    def __init__(self, cmd: list[str], reason: str):
        self.cmd = cmd
        self.reason = reason
        super().__init__(f"could not run '{' '.join(cmd)}': {reason}")


class CommandFailedError(CommandError):
    """Raised when a package-manager command exits non-zero without a usable result."""

    def __init__(self, cmd: list[str], returncode: int, stderr: str = ""):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"'{' '.join(cmd)}' failed with exit code {returncode}")


class PartialUpdateError(CommandFailedError):
    """Raised when install fails after the old version was already uninstalled."""

    def __init__(self, cause: CommandFailedError, name: str, previous_version: str):
        super().__init__(cause.cmd, cause.returncode, cause.stderr)
        self.name = name
        self.previous_version = previous_version
        target = f"{name}@{previous_version}" if previous_version else name
        self.args = (
            f"{cause} after '{name}' was uninstalled; restore it with: npm install {target}",
        )


class OutdatedParseError(NpmUpdatesError):
    """Raised when the 'outdated' output is not the expected JSON mapping."""


class SnapshotError(NpmUpdatesError):
    """Base exception for snapshot file problems."""


class SnapshotNotFoundError(SnapshotError):
    """Raised when the snapshot file does not exist."""


class SnapshotFormatError(SnapshotError):
    """Raised when the snapshot file cannot be parsed."""


class InvalidSelectionError(NpmUpdatesError):
    """Raised when the update selection is not a comma separated list of ids."""
