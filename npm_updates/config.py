"""Runtime settings, read from NPM_UPDATES_* environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SNAPSHOT_FILE = "package-updates.json"
DEFAULT_NPM_BINARY = "npm"


@dataclass
class Settings:
    snapshot_file: Path
    npm_binary: str
    log_level: str
    log_format: str  # "console" | "json"

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the environment.

        Reads:
            NPM_UPDATES_FILE       — snapshot path (default: ./package-updates.json)
            NPM_UPDATES_NPM        — package-manager binary (default: npm)
            NPM_UPDATES_LOG_LEVEL  — log level (default: WARNING)
            NPM_UPDATES_LOG_FORMAT — console | json (default: console)
        """
        return cls(
            snapshot_file=Path(os.environ.get("NPM_UPDATES_FILE", DEFAULT_SNAPSHOT_FILE)),
            npm_binary=os.environ.get("NPM_UPDATES_NPM", DEFAULT_NPM_BINARY),
            log_level=os.environ.get("NPM_UPDATES_LOG_LEVEL", "WARNING").upper(),
            log_format=os.environ.get("NPM_UPDATES_LOG_FORMAT", "console").lower(),
        )
