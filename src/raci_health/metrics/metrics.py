# src/raci_health/metrics/metrics.py
from __future__ import annotations

import math

from raci_health.schemas.models import MatrixSnapshot, RaciRole, ScoringConfig
from raci_health.schemas.results import HealthMetrics

MAX_SCORE = 100
MIN_SCORE = 0

# (lower bound, label), checked top-down
_HEALTH_BANDS = (
    (90, "Excellent"),
    (70, "Good"),
    (50, "Fair"),
)
_LOWEST_BAND = "Needs Work"


def compute_metrics(snapshot: MatrixSnapshot) -> HealthMetrics:
    """
    @brief
    Derive the aggregate matrix metrics from raw snapshot data.

    @details
    - total_tasks: number of tasks;
    - valid_tasks: tasks with exactly one Accountable and at least one
      Responsible (recounted here, not derived from the issue lists);
    - tasks_coverage: share of tasks with any assignment, in [0, 1];
    - avg_assignments_per_task / avg_assignments_per_member: rounded to one
      decimal, 0 when the denominator is empty.
    """
    total_tasks = len(snapshot.tasks)
    total_assignments = snapshot.total_assignments

    # (1) Per-task validity and coverage
    valid_tasks = 0
    covered_tasks = 0
    members: set[str] = set()
    for task in snapshot.tasks:
        if (
            task.count_role(RaciRole.ACCOUNTABLE) == 1
            and task.count_role(RaciRole.RESPONSIBLE) >= 1
        ):
            valid_tasks += 1
        if task.assignments:
            covered_tasks += 1
        members.update(a.member_id for a in task.assignments)

    # (2) Ratios guarded against empty denominators
    coverage = covered_tasks / total_tasks if total_tasks else 0.0
    per_task = _round1(total_assignments / total_tasks) if total_tasks else 0.0
    per_member = _round1(total_assignments / len(members)) if members else 0.0

    return HealthMetrics(
        total_tasks=total_tasks,
        valid_tasks=valid_tasks,
        tasks_coverage=coverage,
        avg_assignments_per_task=per_task,
        avg_assignments_per_member=per_member,
    )


def compute_health_score(
    snapshot: MatrixSnapshot,
    error_count: int,
    warning_count: int,
    scoring: ScoringConfig | None = None,
) -> int:
    """
    @brief
    Reduce findings and coverage into a single 0..100 score.

    @details
    score = 100 - error_penalty*errors - warning_penalty*warnings
            + coverage_bonus (only if every task has at least one assignment)
    clamped to [0, 100]. An empty matrix scores 100.
    """
    if not snapshot.tasks:
        return MAX_SCORE

    scoring = scoring or ScoringConfig()

    score = MAX_SCORE
    score -= scoring.error_penalty * error_count
    score -= scoring.warning_penalty * warning_count
    if all(task.assignments for task in snapshot.tasks):
        score += scoring.coverage_bonus

    return max(MIN_SCORE, min(MAX_SCORE, score))


def health_label(score: int) -> str:
    """Map a health score to its display band."""
    for lower, label in _HEALTH_BANDS:
        if score >= lower:
            return label
    return _LOWEST_BAND


def _round1(value: float) -> float:
    # half-up to one decimal
    return math.floor(value * 10 + 0.5) / 10
