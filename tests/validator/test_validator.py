# tests/validator/test_validator.py
from __future__ import annotations

import pytest

from raci_health.engine import RaciEngine, evaluate_matrix, summarize_matrix
from raci_health.errors import SnapshotError
from raci_health.schemas.models import (
    Assignment,
    EngineConfig,
    MatrixSnapshot,
    Member,
    RaciRole,
    ScoringConfig,
    Task,
    ThresholdConfig,
)
from raci_health.schemas.results import IssueKind, SuggestionKind
from raci_health.validator.validator import MatrixValidator

A = RaciRole.ACCOUNTABLE
R = RaciRole.RESPONSIBLE
C = RaciRole.CONSULTED
I = RaciRole.INFORMED  # noqa: E741


# -----------------------------
# HELPER FACTORIES
# -----------------------------
def mk_assignment(mid: str, role: RaciRole, name: str | None = None) -> Assignment:
    """
    @brief
    Assignment factory with a resolved member.

    @params
        mid : str
            Member identifier (also used as name when none is given).
        role : RaciRole
            RACI role of the assignment.
        name : str | None
            Optional display name.
    """
    return Assignment(member_id=mid, role=role, member=Member(id=mid, name=name or mid))


def mk_task(tid: str, *assignments: Assignment) -> Task:
    return Task(id=tid, name=f"Task {tid}", assignments=assignments)


def mk_snapshot(*tasks: Task) -> MatrixSnapshot:
    return MatrixSnapshot(id="m1", name="Matrix", tasks=tasks)


# -----------------------------
# Scenarios
# -----------------------------
def test_single_valid_task_is_valid() -> None:
    """
    @brief
    One Accountable and one Responsible (different members) → clean result.
    """
    # --- Arrange ---
    snapshot = mk_snapshot(mk_task("t1", mk_assignment("u1", A), mk_assignment("u2", R)))

    # --- Act ---
    result = evaluate_matrix(snapshot)

    # --- Assert ---
    assert result.is_valid is True
    assert result.errors == []
    assert result.warnings == []
    assert result.conflicts == []
    assert result.health_score == 100
    assert result.metrics.valid_tasks == 1


def test_empty_task_yields_two_issues() -> None:
    # --- Act ---
    result = evaluate_matrix(mk_snapshot(mk_task("t1")))

    # --- Assert ---
    assert result.is_valid is False
    assert [e.kind for e in result.errors] == [IssueKind.MISSING_ACCOUNTABLE]
    assert [w.kind for w in result.warnings] == [IssueKind.MISSING_RESPONSIBLE]
    assert result.metrics.valid_tasks == 0
    # 100 - 10 - 3, no coverage bonus
    assert result.health_score == 87


def test_two_accountable_yield_one_error() -> None:
    # --- Arrange ---
    snapshot = mk_snapshot(
        mk_task(
            "t1",
            mk_assignment("ua", A, "Alice"),
            mk_assignment("ub", A, "Bob"),
            mk_assignment("uc", R, "Carol"),
        )
    )

    # --- Act ---
    result = evaluate_matrix(snapshot)

    # --- Assert ---
    assert len(result.errors) == 1
    assert result.errors[0].kind == IssueKind.MULTIPLE_ACCOUNTABLE
    assert "Alice" in result.errors[0].message and "Bob" in result.errors[0].message
    assert result.warnings == []


def test_member_overload_warnings_feed_result() -> None:
    """
    @brief
    One member with 11 assignments, 6 of them Accountable → two overload warnings.
    """
    # --- Arrange ---
    tasks = [mk_task(f"a{i}", mk_assignment("u1", A, "Ann"), mk_assignment("r", R)) for i in range(6)]
    tasks += [mk_task(f"c{i}", mk_assignment("u1", C, "Ann")) for i in range(5)]
    snapshot = mk_snapshot(*tasks)

    # --- Act ---
    result = evaluate_matrix(snapshot)

    # --- Assert ---
    overload = [w for w in result.warnings if w.kind == IssueKind.OVERLOAD_WARNING]
    assert len(overload) == 2
    assert all(w.member_id == "u1" for w in overload)
    assert "11 assignments" in overload[0].message
    assert "Accountable for 6 tasks" in overload[1].message


def test_consulted_heavy_task_is_valid_with_single_optimize() -> None:
    # --- Arrange ---
    snapshot = mk_snapshot(
        mk_task(
            "t1",
            mk_assignment("a", A),
            mk_assignment("r", R),
            *[mk_assignment(f"c{i}", C) for i in range(5)],
        )
    )

    # --- Act ---
    result = evaluate_matrix(snapshot)

    # --- Assert ---
    assert result.is_valid is True
    assert result.errors == [] and result.warnings == []
    assert [s.kind for s in result.suggestions] == [SuggestionKind.OPTIMIZE]
    assert result.suggestions[0].task_id == "t1"


# -----------------------------
# Properties
# -----------------------------
def test_empty_matrix() -> None:
    # --- Act ---
    result = evaluate_matrix(mk_snapshot())

    # --- Assert ---
    assert result.health_score == 100
    assert result.health_label == "Excellent"
    assert result.errors == [] and result.warnings == []
    assert result.is_valid is True
    assert result.metrics.total_tasks == 0
    assert result.metrics.avg_assignments_per_task == 0
    assert result.metrics.avg_assignments_per_member == 0
    assert result.metrics.tasks_coverage == 0


def test_evaluate_is_idempotent() -> None:
    # --- Arrange ---
    snapshot = mk_snapshot(
        mk_task("t1", mk_assignment("u1", A), mk_assignment("u2", A)),
        mk_task("t2"),
        mk_task("t3", mk_assignment("u1", A), mk_assignment("u3", R), mk_assignment("u4", I)),
    )
    engine = RaciEngine()

    # --- Act ---
    first = engine.evaluate(snapshot)
    second = engine.evaluate(snapshot)

    # --- Assert ---
    assert first == second
    assert first.model_dump() == second.model_dump()
    assert first is not second


@pytest.mark.parametrize("n_empty", [0, 1, 5, 12, 40])
def test_score_is_bounded(n_empty: int) -> None:
    # --- Arrange ---
    tasks = [mk_task(f"e{i}") for i in range(n_empty)]
    tasks.append(mk_task("ok", mk_assignment("u1", A), mk_assignment("u2", R)))

    # --- Act ---
    score = evaluate_matrix(mk_snapshot(*tasks)).health_score

    # --- Assert ---
    assert 0 <= score <= 100
    if n_empty >= 8:
        assert score == 0


def test_valid_task_never_produces_errors_for_itself() -> None:
    snapshot = mk_snapshot(
        mk_task("good", mk_assignment("u1", A), mk_assignment("u1", R), mk_assignment("u2", R)),
        mk_task("bad"),
    )

    result = evaluate_matrix(snapshot)

    assert {e.task_id for e in result.errors} == {"bad"}


def test_summary_is_projection_of_evaluate() -> None:
    # --- Arrange ---
    snapshot = mk_snapshot(
        mk_task("t1", mk_assignment("u1", A), mk_assignment("u2", A)),
        mk_task("t2"),
        mk_task("t3", mk_assignment("u1", A), mk_assignment("u3", R)),
    )

    # --- Act ---
    result = evaluate_matrix(snapshot)
    summary = summarize_matrix(snapshot)

    # --- Assert ---
    assert summary.total_tasks == 3
    assert summary.valid_tasks == 1
    assert summary.error_count == len(result.errors) == 2
    assert summary.warning_count == len(result.warnings) == 2


def test_custom_thresholds_and_weights_are_honored() -> None:
    # --- Arrange ---
    cfg = EngineConfig(
        thresholds=ThresholdConfig(overload_total=1),
        scoring=ScoringConfig(warning_penalty=20, coverage_bonus=0),
    )
    snapshot = mk_snapshot(
        mk_task("t1", mk_assignment("u1", A), mk_assignment("u2", R)),
        mk_task("t2", mk_assignment("u1", A), mk_assignment("u3", R)),
    )

    # --- Act ---
    result = RaciEngine(cfg).evaluate(snapshot)

    # --- Assert ---
    assert [w.member_id for w in result.warnings] == ["u1"]
    assert result.health_score == 80


def test_result_serializes_camel_case() -> None:
    result = evaluate_matrix(mk_snapshot(mk_task("t1")))

    data = result.model_dump(mode="json", by_alias=True)

    assert set(data) >= {
        "isValid",
        "errors",
        "warnings",
        "suggestions",
        "conflicts",
        "healthScore",
        "metrics",
    }
    assert data["errors"][0]["taskId"] == "t1"
    assert data["conflicts"][0]["kind"] == "MISSING_ACCOUNTABLE"
    assert set(data["metrics"]) == {
        "totalTasks",
        "validTasks",
        "tasksCoverage",
        "avgAssignmentsPerTask",
        "avgAssignmentsPerMember",
    }


# -----------------------------
# Loader contract
# -----------------------------
def test_unresolved_member_fails_fast() -> None:
    snapshot = mk_snapshot(mk_task("t1", Assignment(member_id="ghost", role=A)))

    with pytest.raises(SnapshotError) as ei:
        evaluate_matrix(snapshot)

    assert "ghost" in str(ei.value)


def test_blank_member_name_is_evaluated() -> None:
    """
    @brief
    A resolved member with an empty display name is valid input.
    """
    # --- Arrange ---
    snapshot = mk_snapshot(
        mk_task(
            "t1",
            Assignment(member_id="u1", role=A, member=Member(id="u1", name="")),
            Assignment(member_id="u2", role=R, member=Member(id="u2", name="Bob")),
        )
    )

    # --- Act ---
    result = evaluate_matrix(snapshot)

    # --- Assert ---
    assert result.is_valid is True
    assert result.errors == []


def test_mismatched_member_reference_fails_fast() -> None:
    snapshot = mk_snapshot(
        mk_task("t1", Assignment(member_id="u1", role=A, member=Member(id="u2", name="Bob")))
    )

    with pytest.raises(SnapshotError):
        evaluate_matrix(snapshot)


def test_validator_instances_do_not_share_state() -> None:
    # --- Arrange ---
    cfg = EngineConfig()
    bad = mk_snapshot(mk_task("t1"))
    good = mk_snapshot(mk_task("t1", mk_assignment("u1", A), mk_assignment("u2", R)))

    # --- Act ---
    v1 = MatrixValidator(bad, cfg)
    v1.run_all_checks()
    v2 = MatrixValidator(good, cfg)
    v2.run_all_checks()

    # --- Assert ---
    assert len(v1.errors) == 1
    assert v2.errors == []
    assert v2.build_result().is_valid is True
