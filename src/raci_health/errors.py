# src/raci_health/errors.py
from __future__ import annotations

from datetime import datetime, timezone


class RaciError(Exception):
    """Base class for all structured raci_health exceptions."""

    def __init__(
        self, message: str, source: str | None = None, suggested_action: str | None = None
    ):
        super().__init__(message)
        self.timestamp = datetime.now(timezone.utc).isoformat()
        self.error_type = self.__class__.__name__
        self.source = source or "unknown"
        self.suggested_action = suggested_action

    def __str__(self) -> str:
        base = f"[{self.error_type}] {self.args[0]}"
        if self.source:
            base += f" (source={self.source})"
        if self.suggested_action:
            base += f" | action: {self.suggested_action}"
        return base


class ConfigError(RaciError):
    """Invalid or missing engine configuration (config.yaml)"""


class DataError(RaciError):
    """Malformed or unreadable input data"""


class SnapshotNotFoundError(DataError):
    """Matrix snapshot could not be located by the loader"""


class SnapshotError(RaciError):
    """Snapshot violates the loader contract (e.g. unresolved member reference)"""
