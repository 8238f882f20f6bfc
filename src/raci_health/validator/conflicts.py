# src/raci_health/validator/conflicts.py
from __future__ import annotations

from raci_health.schemas.models import MatrixSnapshot, RaciRole, ThresholdConfig
from raci_health.schemas.results import Conflict, ConflictKind, ConflictSeverity


def detect_conflicts(snapshot: MatrixSnapshot, thresholds: ThresholdConfig) -> list[Conflict]:
    """
    @brief
    Build the severity-classified conflicts report.

    @details
    Recomputes every count from the raw assignments instead of reusing the
    validation issues, so this report keeps its shape independently of the
    issue taxonomy. Per task, four independent checks:
      - no Accountable        → MISSING_ACCOUNTABLE  (critical)
      - several Accountable   → MULTIPLE_ACCOUNTABLE (critical)
      - no Responsible        → MISSING_RESPONSIBLE  (high)
      - too many assignments  → ROLE_OVERLOAD        (medium)
    """
    conflicts: list[Conflict] = []

    for task in snapshot.tasks:
        accountable = task.members_with_role(RaciRole.ACCOUNTABLE)
        responsible_count = task.count_role(RaciRole.RESPONSIBLE)
        total = len(task.assignments)

        if not accountable:
            conflicts.append(
                Conflict(
                    kind=ConflictKind.MISSING_ACCOUNTABLE,
                    task_id=task.id,
                    task_name=task.name,
                    details="No one is Accountable for this task",
                    severity=ConflictSeverity.CRITICAL,
                )
            )
        elif len(accountable) > 1:
            conflicts.append(
                Conflict(
                    kind=ConflictKind.MULTIPLE_ACCOUNTABLE,
                    task_id=task.id,
                    task_name=task.name,
                    details=f"{len(accountable)} people are Accountable: {', '.join(accountable)}",
                    severity=ConflictSeverity.CRITICAL,
                )
            )

        if responsible_count == 0:
            conflicts.append(
                Conflict(
                    kind=ConflictKind.MISSING_RESPONSIBLE,
                    task_id=task.id,
                    task_name=task.name,
                    details="No one is Responsible for doing this task",
                    severity=ConflictSeverity.HIGH,
                )
            )

        if total > thresholds.role_overload:
            conflicts.append(
                Conflict(
                    kind=ConflictKind.ROLE_OVERLOAD,
                    task_id=task.id,
                    task_name=task.name,
                    details=(
                        f"Task has {total} role assignments "
                        f"(threshold: {thresholds.role_overload})"
                    ),
                    severity=ConflictSeverity.MEDIUM,
                )
            )

    return conflicts
