# src/raci_health/dataloader/snapshot_loader.py
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from raci_health.errors import DataError, SnapshotNotFoundError
from raci_health.schemas.models import MatrixSnapshot

logger = logging.getLogger(__name__)


class SnapshotLoader:
    """
    File → MatrixSnapshot.

    Rules:
      - Formats: UTF-8 JSON (.json) or YAML (.yaml/.yml)
      - Root: mapping with "tasks": [{id, name, order_index, assignments: [...]}]
      - Each assignment: {member_id, role, member: {id, name}} (member resolved)
      - Keys may also be camelCase (orderIndex, memberId, raciRole)
      - Tasks are returned sorted by order_index (stable)

    Fatal errors:
      - file missing                      → SnapshotNotFoundError
      - unreadable / unparsable / invalid → DataError
    """

    SUFFIXES = (".json", ".yaml", ".yml")

    def load(self, path: Path) -> MatrixSnapshot:
        data = self._read(path)
        snapshot = self._to_snapshot(data, path)
        logger.info(
            "SnapshotLoader OK: %d task(s), %d assignment(s) from %s",
            len(snapshot.tasks),
            snapshot.total_assignments,
            path,
        )
        return snapshot

    # ------------------------------
    # Internal helpers
    # ------------------------------
    def _read(self, path: Path) -> dict[str, Any]:
        if not isinstance(path, Path):
            raise DataError(
                message=f"Invalid path type: expected pathlib.Path, got {type(path).__name__}",
                source="SnapshotLoader._read",
                suggested_action="Pass a pathlib.Path pointing to the matrix snapshot.",
            )
        if not path.exists():
            raise SnapshotNotFoundError(
                message=f"Matrix snapshot not found: {path}",
                source="SnapshotLoader._read",
                suggested_action="Verify the snapshot path or matrix identifier.",
            )

        suffix = path.suffix.lower()
        if suffix not in self.SUFFIXES:
            raise DataError(
                message=f"Unsupported snapshot format: {path.suffix}",
                source="SnapshotLoader._read",
                suggested_action="Use a .json, .yaml or .yml snapshot file.",
            )

        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f) if suffix == ".json" else yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise DataError(
                message=f"Snapshot parsing failed: {e}",
                source="SnapshotLoader._read",
                suggested_action="Fix the snapshot file syntax.",
            ) from e
        except OSError as e:
            raise DataError(
                message=f"Unable to read snapshot: {e}",
                source="SnapshotLoader._read",
                suggested_action="Check file permissions and that the file is not locked.",
            ) from e

        if not isinstance(data, Mapping):
            raise DataError(
                message="Snapshot root must be a mapping with a 'tasks' list.",
                source="SnapshotLoader._read",
                suggested_action='Wrap tasks as {"tasks": [...]}.',
            )
        return dict(data)

    def _to_snapshot(self, data: dict[str, Any], path: Path) -> MatrixSnapshot:
        try:
            snapshot = MatrixSnapshot.model_validate(data)
        except ValidationError as e:
            raise DataError(
                message=f"Invalid snapshot structure in {path}: {e}",
                source="SnapshotLoader._to_snapshot",
                suggested_action="Check task/assignment fields and RACI role names.",
            ) from e

        tasks = sorted(snapshot.tasks, key=lambda t: t.order_index)
        return snapshot.model_copy(update={"tasks": tuple(tasks)})


__all__ = ["SnapshotLoader"]
