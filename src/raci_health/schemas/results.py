"""
@brief
Output models produced by a single engine evaluation.

@details
All result models serialize with camelCase aliases (`taskId`, `healthScore`,
...) when dumped with `by_alias=True`, so the JSON layout consumed by
clients keeps the established field names. Python code uses snake_case.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

# Sentinel task fields for matrix-wide findings
MATRIX_WIDE_TASK_ID = ""
MATRIX_WIDE_TASK_NAME = "Multiple tasks"


class _ResultModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "use_enum_values": True,
    }


class IssueKind(str, Enum):
    MISSING_ACCOUNTABLE = "MISSING_ACCOUNTABLE"
    MULTIPLE_ACCOUNTABLE = "MULTIPLE_ACCOUNTABLE"
    MISSING_RESPONSIBLE = "MISSING_RESPONSIBLE"
    NO_ASSIGNMENTS = "NO_ASSIGNMENTS"
    OVERLOAD_WARNING = "OVERLOAD_WARNING"


class IssueSeverity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class SuggestionKind(str, Enum):
    OPTIMIZE = "OPTIMIZE"
    REDISTRIBUTE = "REDISTRIBUTE"
    SIMPLIFY = "SIMPLIFY"
    CLARIFY = "CLARIFY"


class Impact(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ConflictKind(str, Enum):
    MULTIPLE_ACCOUNTABLE = "MULTIPLE_ACCOUNTABLE"
    MISSING_ACCOUNTABLE = "MISSING_ACCOUNTABLE"
    MISSING_RESPONSIBLE = "MISSING_RESPONSIBLE"
    ROLE_OVERLOAD = "ROLE_OVERLOAD"


class ConflictSeverity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"


class ValidationIssue(_ResultModel):
    """
    @brief
    One error or warning found in the matrix.

    @details
    Matrix-wide issues (member overload) use MATRIX_WIDE_TASK_ID and
    MATRIX_WIDE_TASK_NAME and carry the member fields instead.
    """

    task_id: str
    task_name: str
    kind: IssueKind
    message: str
    severity: IssueSeverity
    member_id: str | None = None
    member_name: str | None = None


class Suggestion(_ResultModel):
    """A non-blocking recommendation for improving the matrix."""

    task_id: str
    task_name: str
    kind: SuggestionKind
    message: str
    recommended_action: str
    impact: Impact
    member_id: str | None = None
    member_name: str | None = None


class Conflict(_ResultModel):
    """Severity-classified structural problem for the conflicts report."""

    kind: ConflictKind
    task_id: str
    task_name: str
    details: str
    severity: ConflictSeverity


class HealthMetrics(_ResultModel):
    total_tasks: int = 0
    valid_tasks: int = 0
    tasks_coverage: float = Field(0.0, ge=0.0, le=1.0)
    avg_assignments_per_task: float = 0.0
    avg_assignments_per_member: float = 0.0


class EvaluationResult(_ResultModel):
    """
    @brief
    Full return value of one evaluation.

    @details
    Carries no reference back into the snapshot; every field is built fresh.
    """

    is_valid: bool
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)
    conflicts: list[Conflict] = Field(default_factory=list)
    health_score: int = Field(..., ge=0, le=100)
    health_label: str
    metrics: HealthMetrics = Field(default_factory=HealthMetrics)


class ValidationSummary(_ResultModel):
    """Count-only projection of an EvaluationResult."""

    total_tasks: int
    valid_tasks: int
    error_count: int
    warning_count: int


class AssignmentCheck(_ResultModel):
    valid: bool
    error: str | None = None


__all__ = [
    "MATRIX_WIDE_TASK_ID",
    "MATRIX_WIDE_TASK_NAME",
    "IssueKind",
    "IssueSeverity",
    "SuggestionKind",
    "Impact",
    "ConflictKind",
    "ConflictSeverity",
    "ValidationIssue",
    "Suggestion",
    "Conflict",
    "HealthMetrics",
    "EvaluationResult",
    "ValidationSummary",
    "AssignmentCheck",
]
