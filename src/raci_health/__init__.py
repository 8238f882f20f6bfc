"""RACI matrix validation and health-scoring engine."""

from raci_health.engine import RaciEngine, evaluate_matrix, summarize_matrix, summarize_result
from raci_health.schemas.models import (
    Assignment,
    EngineConfig,
    MatrixSnapshot,
    Member,
    RaciRole,
    Task,
)
from raci_health.schemas.results import EvaluationResult, ValidationSummary

__all__ = [
    "RaciEngine",
    "evaluate_matrix",
    "summarize_matrix",
    "summarize_result",
    "Assignment",
    "EngineConfig",
    "MatrixSnapshot",
    "Member",
    "RaciRole",
    "Task",
    "EvaluationResult",
    "ValidationSummary",
]
