# src/raci_health/validator/validator.py
from __future__ import annotations

import logging

from raci_health.errors import SnapshotError
from raci_health.metrics.metrics import compute_health_score, compute_metrics, health_label
from raci_health.schemas.models import EngineConfig, MatrixSnapshot
from raci_health.schemas.results import (
    Conflict,
    EvaluationResult,
    HealthMetrics,
    Suggestion,
    ValidationIssue,
)
from raci_health.validator.conflicts import detect_conflicts
from raci_health.validator.suggestions import generate_suggestions
from raci_health.validator.task_rules import check_task
from raci_health.validator.workload import MemberWorkload, aggregate_workload, workload_warnings

logger = logging.getLogger(__name__)


class MatrixValidator:
    """
    @brief
    Single-use evaluation context for one matrix snapshot.

    @details
    Runs every analysis pass over the snapshot and accumulates the findings
    on the instance. A new instance is created per evaluation, so no state
    survives between calls.

    Raises SnapshotError only when the snapshot breaks the loader contract
    (unresolved member reference). Business-rule violations are collected
    into the result and never raised.
    """

    # ---------- Constructor ----------
    def __init__(self, snapshot: MatrixSnapshot, cfg: EngineConfig) -> None:
        """
        @brief
        Initialize evaluation context.

        @params
            snapshot : MatrixSnapshot
                Read-only matrix snapshot with resolved members.
            cfg : EngineConfig
                Thresholds and scoring weights.
        """
        self.snapshot = snapshot
        self.cfg = cfg

        # Accumulators
        self.errors: list[ValidationIssue] = []
        self.warnings: list[ValidationIssue] = []
        self.conflicts: list[Conflict] = []
        self.suggestions: list[Suggestion] = []
        self.workload: dict[str, MemberWorkload] = {}
        self.metrics: HealthMetrics = HealthMetrics()

    # ---------- Public lifecycle API ----------
    def run_all_checks(self) -> None:
        """
        @brief
        Execute the full evaluation sequence.

        @details
        The reference check runs first and aborts the evaluation on failure.
        The remaining passes are read-only and independent; only the score
        built in build_result() consumes their counts.
        """
        # (1) Loader contract
        self._check_member_references()

        # (2) Validation passes feeding the score
        self._check_tasks()
        self._check_workload()

        # (3) Independent report passes
        self._detect_conflicts()
        self._generate_suggestions()
        self._compute_metrics()

    def build_result(self) -> EvaluationResult:
        """
        @brief
        Assemble accumulated findings into an EvaluationResult.
        """
        score = compute_health_score(
            self.snapshot, len(self.errors), len(self.warnings), self.cfg.scoring
        )
        return EvaluationResult(
            is_valid=not self.errors,
            errors=list(self.errors),
            warnings=list(self.warnings),
            suggestions=list(self.suggestions),
            conflicts=list(self.conflicts),
            health_score=score,
            health_label=health_label(score),
            metrics=self.metrics,
        )

    # ---------- Passes ----------
    def _check_member_references(self) -> None:
        for task in self.snapshot.tasks:
            for assignment in task.assignments:
                member = assignment.member
                if member is None:
                    raise SnapshotError(
                        message=(
                            f"Unresolved member reference {assignment.member_id!r} "
                            f"on task {task.id!r}"
                        ),
                        source="MatrixValidator._check_member_references",
                        suggested_action="Resolve every assignment's member before evaluation.",
                    )
                if member.id != assignment.member_id:
                    raise SnapshotError(
                        message=(
                            f"Assignment on task {task.id!r} references member "
                            f"{assignment.member_id!r} but carries member {member.id!r}"
                        ),
                        source="MatrixValidator._check_member_references",
                        suggested_action="Check the snapshot loader's member join.",
                    )

    def _check_tasks(self) -> None:
        for task in self.snapshot.tasks:
            outcome = check_task(task)
            self.errors.extend(outcome.errors)
            self.warnings.extend(outcome.warnings)
        logger.debug(
            "Task rules: %d error(s), %d warning(s)", len(self.errors), len(self.warnings)
        )

    def _check_workload(self) -> None:
        self.workload = aggregate_workload(self.snapshot)
        overload = workload_warnings(self.workload, self.cfg.thresholds)
        self.warnings.extend(overload)
        logger.debug(
            "Workload: %d member(s), %d overload warning(s)", len(self.workload), len(overload)
        )

    def _detect_conflicts(self) -> None:
        self.conflicts = detect_conflicts(self.snapshot, self.cfg.thresholds)

    def _generate_suggestions(self) -> None:
        self.suggestions = generate_suggestions(
            self.snapshot, self.workload, self.cfg.thresholds
        )

    def _compute_metrics(self) -> None:
        self.metrics = compute_metrics(self.snapshot)
