# src/raci_health/validator/workload.py
from __future__ import annotations

from dataclasses import dataclass

from raci_health.schemas.models import MatrixSnapshot, RaciRole, ThresholdConfig
from raci_health.schemas.results import (
    MATRIX_WIDE_TASK_ID,
    MATRIX_WIDE_TASK_NAME,
    IssueKind,
    IssueSeverity,
    ValidationIssue,
)

_ROLE_FIELDS = {
    RaciRole.RESPONSIBLE: "responsible_count",
    RaciRole.ACCOUNTABLE: "accountable_count",
    RaciRole.CONSULTED: "consulted_count",
    RaciRole.INFORMED: "informed_count",
}


@dataclass(slots=True)
class MemberWorkload:
    """Per-member assignment counts accumulated across the whole matrix."""

    member_id: str
    name: str
    responsible_count: int = 0
    accountable_count: int = 0
    consulted_count: int = 0
    informed_count: int = 0
    total_count: int = 0


def aggregate_workload(snapshot: MatrixSnapshot) -> dict[str, MemberWorkload]:
    """
    @brief
    Count assignments per member over every task of the snapshot.

    @details
    Each assignment is visited exactly once and accumulated under its
    member_id. The counts do not depend on task or assignment order; only
    the insertion order of the returned mapping (first appearance) does.

    @params
        snapshot : MatrixSnapshot
            Matrix with resolved member references.

    @returns
        Mapping member_id → MemberWorkload.
    """
    workload: dict[str, MemberWorkload] = {}

    for task in snapshot.tasks:
        for assignment in task.assignments:
            stats = workload.get(assignment.member_id)
            if stats is None:
                stats = MemberWorkload(member_id=assignment.member_id, name=assignment.member_name)
                workload[assignment.member_id] = stats

            stats.total_count += 1
            counter = _ROLE_FIELDS[RaciRole(assignment.role)]
            setattr(stats, counter, getattr(stats, counter) + 1)

    return workload


def workload_warnings(
    workload: dict[str, MemberWorkload], thresholds: ThresholdConfig
) -> list[ValidationIssue]:
    """
    @brief
    Emit OVERLOAD_WARNING issues for members above the workload thresholds.

    @details
    Two independent checks per member; both can fire for the same member:
      - total_count > thresholds.overload_total
      - accountable_count > thresholds.overload_accountable
    """
    warnings: list[ValidationIssue] = []

    for stats in workload.values():
        if stats.total_count > thresholds.overload_total:
            warnings.append(
                _overload(
                    stats,
                    f"{stats.name} has {stats.total_count} assignments "
                    f"(threshold: {thresholds.overload_total})",
                )
            )

        if stats.accountable_count > thresholds.overload_accountable:
            warnings.append(
                _overload(
                    stats,
                    f"{stats.name} is Accountable for {stats.accountable_count} tasks "
                    f"(threshold: {thresholds.overload_accountable})",
                )
            )

    return warnings


def _overload(stats: MemberWorkload, message: str) -> ValidationIssue:
    return ValidationIssue(
        task_id=MATRIX_WIDE_TASK_ID,
        task_name=MATRIX_WIDE_TASK_NAME,
        kind=IssueKind.OVERLOAD_WARNING,
        message=message,
        severity=IssueSeverity.WARNING,
        member_id=stats.member_id,
        member_name=stats.name,
    )
