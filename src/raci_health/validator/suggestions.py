# src/raci_health/validator/suggestions.py
from __future__ import annotations

from collections.abc import Iterable

from raci_health.schemas.models import MatrixSnapshot, RaciRole, Task, ThresholdConfig
from raci_health.schemas.results import (
    MATRIX_WIDE_TASK_ID,
    MATRIX_WIDE_TASK_NAME,
    Impact,
    Suggestion,
    SuggestionKind,
)
from raci_health.validator.workload import MemberWorkload

_IMPACT_RANK = {Impact.HIGH: 0, Impact.MEDIUM: 1, Impact.LOW: 2}


def generate_suggestions(
    snapshot: MatrixSnapshot,
    workload: dict[str, MemberWorkload],
    thresholds: ThresholdConfig,
) -> list[Suggestion]:
    """
    @brief
    Produce heuristic, non-blocking recommendations for the matrix.

    @details
    Per-task heuristics are emitted first, in task order, followed by the
    matrix-wide heuristics in workload order. Heuristics are independent and
    additive; the same task or member may appear several times.

    @params
        snapshot : MatrixSnapshot
            Matrix under evaluation.
        workload : dict[str, MemberWorkload]
            Output of aggregate_workload() for the same snapshot.
        thresholds : ThresholdConfig
            Caps used by the heuristics.

    @returns
        Suggestions in generation order.
    """
    suggestions: list[Suggestion] = []

    for task in snapshot.tasks:
        suggestions.extend(_task_suggestions(task, thresholds))

    for stats in workload.values():
        suggestions.extend(_member_suggestions(stats, thresholds))

    return suggestions


def sort_by_impact(suggestions: Iterable[Suggestion]) -> list[Suggestion]:
    """Stable high → medium → low ordering for display."""
    return sorted(suggestions, key=lambda s: _IMPACT_RANK[Impact(s.impact)])


def _task_suggestions(task: Task, thresholds: ThresholdConfig) -> list[Suggestion]:
    out: list[Suggestion] = []

    consulted = task.count_role(RaciRole.CONSULTED)
    informed = task.count_role(RaciRole.INFORMED)
    responsible = task.count_role(RaciRole.RESPONSIBLE)
    accountable = task.count_role(RaciRole.ACCOUNTABLE)
    total = len(task.assignments)

    # (1) Too many consulted parties slow decisions down
    if consulted > thresholds.max_consulted:
        out.append(
            _for_task(
                task,
                SuggestionKind.OPTIMIZE,
                f"{consulted} people are Consulted, which can slow decisions down",
                "Move some Consulted members to Informed",
                Impact.MEDIUM,
            )
        )

    # (2) Nobody to consult or inform
    if consulted == 0 and informed == 0 and total > 0:
        out.append(
            _for_task(
                task,
                SuggestionKind.CLARIFY,
                "No Consulted or Informed stakeholders are defined",
                "Add stakeholders who should be consulted or kept informed",
                Impact.LOW,
            )
        )

    # (3) Too many doers
    if responsible > thresholds.max_responsible:
        out.append(
            _for_task(
                task,
                SuggestionKind.SIMPLIFY,
                f"{responsible} people are Responsible, which risks confusion over who does the work",
                "Split the task into smaller tasks or consolidate ownership",
                Impact.HIGH,
            )
        )

    # (4) Lone Accountable with no other roles
    if accountable == 1 and total == 1:
        out.append(
            _for_task(
                task,
                SuggestionKind.CLARIFY,
                "Only an Accountable person is assigned",
                "Also mark them Responsible or add other roles to the task",
                Impact.MEDIUM,
            )
        )

    # (5) Task likely too complex
    if total > thresholds.max_task_assignments:
        out.append(
            _for_task(
                task,
                SuggestionKind.SIMPLIFY,
                f"Task has {total} assignments and is likely too complex",
                "Break the task down or reduce the number of stakeholders",
                Impact.HIGH,
            )
        )

    return out


def _member_suggestions(stats: MemberWorkload, thresholds: ThresholdConfig) -> list[Suggestion]:
    out: list[Suggestion] = []

    if stats.total_count > thresholds.redistribute_total:
        out.append(
            _for_member(
                stats,
                f"{stats.name} is overloaded with {stats.total_count} assignments",
                "Rebalance assignments across the team",
            )
        )

    if stats.accountable_count > thresholds.redistribute_accountable:
        out.append(
            _for_member(
                stats,
                f"{stats.name} is Accountable for {stats.accountable_count} tasks",
                "Delegate accountability to other team members",
            )
        )

    return out


def _for_task(
    task: Task, kind: SuggestionKind, message: str, action: str, impact: Impact
) -> Suggestion:
    return Suggestion(
        task_id=task.id,
        task_name=task.name,
        kind=kind,
        message=message,
        recommended_action=action,
        impact=impact,
    )


def _for_member(stats: MemberWorkload, message: str, action: str) -> Suggestion:
    return Suggestion(
        task_id=MATRIX_WIDE_TASK_ID,
        task_name=MATRIX_WIDE_TASK_NAME,
        kind=SuggestionKind.REDISTRIBUTE,
        message=message,
        recommended_action=action,
        impact=Impact.HIGH,
        member_id=stats.member_id,
        member_name=stats.name,
    )
