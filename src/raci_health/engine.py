# src/raci_health/engine.py
from __future__ import annotations

import logging

from raci_health.schemas.models import EngineConfig, MatrixSnapshot
from raci_health.schemas.results import EvaluationResult, ValidationSummary
from raci_health.validator.validator import MatrixValidator

logger = logging.getLogger(__name__)


class RaciEngine:
    """
    @brief
    Stateless RACI validation and health-scoring engine.

    @details
    Holds only its configuration. Each call evaluates the given snapshot in a
    fresh MatrixValidator and returns a new result, so the same snapshot
    always yields the same result and concurrent calls need no coordination.
    """

    def __init__(self, cfg: EngineConfig | None = None) -> None:
        self.cfg = cfg or EngineConfig()

    def evaluate(self, snapshot: MatrixSnapshot) -> EvaluationResult:
        """
        @brief
        Run every pass over the snapshot and return the full result.

        @raises
            SnapshotError
                If an assignment's member reference is unresolved.
        """
        validator = MatrixValidator(snapshot, self.cfg)
        validator.run_all_checks()
        result = validator.build_result()

        logger.info(
            "Evaluated matrix %s: tasks=%d errors=%d warnings=%d score=%d",
            snapshot.id or "<unnamed>",
            result.metrics.total_tasks,
            len(result.errors),
            len(result.warnings),
            result.health_score,
        )
        return result

    def summarize(self, snapshot: MatrixSnapshot) -> ValidationSummary:
        """Count-only view, projected from evaluate() for consistency."""
        return summarize_result(self.evaluate(snapshot))


def summarize_result(result: EvaluationResult) -> ValidationSummary:
    return ValidationSummary(
        total_tasks=result.metrics.total_tasks,
        valid_tasks=result.metrics.valid_tasks,
        error_count=len(result.errors),
        warning_count=len(result.warnings),
    )


# ----------------------------
# THIN FACADE
# ----------------------------
def evaluate_matrix(
    snapshot: MatrixSnapshot, cfg: EngineConfig | None = None
) -> EvaluationResult:
    """Evaluate a snapshot with the given (or default) configuration."""
    return RaciEngine(cfg).evaluate(snapshot)


def summarize_matrix(
    snapshot: MatrixSnapshot, cfg: EngineConfig | None = None
) -> ValidationSummary:
    return RaciEngine(cfg).summarize(snapshot)
