# src/raci_health/validator/task_rules.py
from __future__ import annotations

from dataclasses import dataclass, field

from raci_health.schemas.models import MatrixSnapshot, RaciRole, Task
from raci_health.schemas.results import (
    AssignmentCheck,
    IssueKind,
    IssueSeverity,
    ValidationIssue,
)


@dataclass(slots=True)
class TaskCheckResult:
    """
    Outcome of the per-task rule checks.

    Fields:
        errors: Accountable cardinality violations (MISSING_/MULTIPLE_ACCOUNTABLE).
        warnings: Responsible presence violations (MISSING_RESPONSIBLE).
    """

    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def check_task(task: Task) -> TaskCheckResult:
    """
    @brief
    Evaluate the RACI cardinality rules of a single task.

    @details
    Two independent rules, both applied on every call:
      (1) exactly one Accountable: 0 → MISSING_ACCOUNTABLE error,
          ≥2 → MULTIPLE_ACCOUNTABLE error naming every Accountable member;
      (2) at least one Responsible: 0 → MISSING_RESPONSIBLE warning.
    A task without assignments therefore yields one error and one warning.

    @params
        task : Task
            Task with resolved assignments.

    @returns
        TaskCheckResult with the issues found for this task.
    """
    result = TaskCheckResult()

    # (1) Accountable cardinality
    accountable = task.members_with_role(RaciRole.ACCOUNTABLE)
    if not accountable:
        result.errors.append(
            _issue(
                task,
                IssueKind.MISSING_ACCOUNTABLE,
                f'Task "{task.name}" has no Accountable person assigned',
                IssueSeverity.ERROR,
            )
        )
    elif len(accountable) > 1:
        result.errors.append(
            _issue(
                task,
                IssueKind.MULTIPLE_ACCOUNTABLE,
                f'Task "{task.name}" has multiple Accountable people ({", ".join(accountable)})',
                IssueSeverity.ERROR,
            )
        )

    # (2) Responsible presence
    if task.count_role(RaciRole.RESPONSIBLE) == 0:
        result.warnings.append(
            _issue(
                task,
                IssueKind.MISSING_RESPONSIBLE,
                f'Task "{task.name}" has no Responsible person assigned',
                IssueSeverity.WARNING,
            )
        )

    return result


def summarize_issues(snapshot: MatrixSnapshot) -> list[ValidationIssue]:
    """
    @brief
    Display-oriented issue list for grid views.

    @details
    Differs from check_task() on purpose: a task without any assignment is
    reported once as NO_ASSIGNMENTS and its other checks are skipped, and a
    missing Responsible is shown as an error. The output is for display only
    and never feeds the health score.
    """
    issues: list[ValidationIssue] = []

    for task in snapshot.tasks:
        if not task.assignments:
            issues.append(
                _issue(
                    task,
                    IssueKind.NO_ASSIGNMENTS,
                    "Task has no role assignments",
                    IssueSeverity.ERROR,
                )
            )
            continue

        accountable = task.count_role(RaciRole.ACCOUNTABLE)
        if accountable == 0:
            issues.append(
                _issue(
                    task,
                    IssueKind.MISSING_ACCOUNTABLE,
                    "Missing Accountable (A) assignment",
                    IssueSeverity.ERROR,
                )
            )
        elif accountable > 1:
            issues.append(
                _issue(
                    task,
                    IssueKind.MULTIPLE_ACCOUNTABLE,
                    f"Has {accountable} Accountable assignments (should be exactly 1)",
                    IssueSeverity.ERROR,
                )
            )

        if task.count_role(RaciRole.RESPONSIBLE) == 0:
            issues.append(
                _issue(
                    task,
                    IssueKind.MISSING_RESPONSIBLE,
                    "Missing Responsible (R) assignment",
                    IssueSeverity.ERROR,
                )
            )

    return issues


def check_new_assignment(task: Task, member_id: str, role: RaciRole | str) -> AssignmentCheck:
    """
    @brief
    Pre-check a prospective assignment against the current task state.

    @details
    Rejects an exact duplicate (member, role) pair and a second Accountable.
    Does not modify the task.
    """
    role = RaciRole(role)

    # (1) Exact duplicate
    if any(a.member_id == member_id and a.role == role for a in task.assignments):
        return AssignmentCheck(valid=False, error="This assignment already exists")

    # (2) Only one Accountable per task
    if role == RaciRole.ACCOUNTABLE:
        existing = next((a for a in task.assignments if a.role == RaciRole.ACCOUNTABLE), None)
        if existing is not None:
            return AssignmentCheck(
                valid=False,
                error=f"Task already has an Accountable person: {existing.member_name}",
            )

    return AssignmentCheck(valid=True)


def _issue(task: Task, kind: IssueKind, message: str, severity: IssueSeverity) -> ValidationIssue:
    return ValidationIssue(
        task_id=task.id,
        task_name=task.name,
        kind=kind,
        message=message,
        severity=severity,
    )
