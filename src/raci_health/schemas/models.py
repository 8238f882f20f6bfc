"""
@brief
Pydantic data models for the RACI health engine.

@details
Defines the two canonical input families:
    - Snapshot: Member, Assignment, Task, MatrixSnapshot (read-only matrix view)
    - Config: EngineConfig with nested ThresholdConfig, ScoringConfig, ReportConfig

Snapshot models are frozen and hold tuples, so an evaluation can never write
back into the data it was handed. Output models live in schemas/results.py.
"""

from __future__ import annotations

from enum import Enum

from pydantic import AliasChoices, BaseModel, Field
from pydantic.alias_generators import to_camel


class _StrictBaseModel(BaseModel):
    """
    @brief
    Base model enforcing strict defaults for configuration and data contracts.

    @details
    Forbids unknown fields and preserves exact naming rules.
    """

    model_config = {
        "extra": "forbid",  # Reject unknown fields
        "populate_by_name": True,  # Allow population by field name
        "use_enum_values": True,  # Export raw enum values
    }


class _FrozenModel(_StrictBaseModel):
    """Snapshot base: immutable, accepts snake_case or camelCase keys."""

    model_config = {
        **_StrictBaseModel.model_config,
        "frozen": True,
        "alias_generator": to_camel,
    }


class RaciRole(str, Enum):
    """The four RACI role categories assignable per task/member pair."""

    RESPONSIBLE = "RESPONSIBLE"
    ACCOUNTABLE = "ACCOUNTABLE"
    CONSULTED = "CONSULTED"
    INFORMED = "INFORMED"


# ------------------------------------------------------------
# Matrix snapshot
# ------------------------------------------------------------
class Member(_FrozenModel):
    """
    @brief
    Member identity used by reference only.

    @params
        id : str
            Member identifier owned by the persistence layer.
        name : str
            Display name used in messages.
    """

    id: str = Field(..., description="Member identifier")
    name: str = Field(..., description="Display name")
    email: str | None = Field(None, description="Optional contact address")


class Assignment(_FrozenModel):
    """
    @brief
    One role assignment of a member on a task.

    @details
    `member` is the resolved Member reference. The loader is expected to
    resolve it; an assignment with `member=None` is a contract violation that
    the engine rejects before evaluating.
    """

    id: str | None = Field(None, description="Assignment identifier")
    member_id: str = Field(..., description="Referenced member identifier")
    role: RaciRole = Field(
        ...,
        validation_alias=AliasChoices("role", "raciRole"),
        description="RACI role of the member on this task",
    )
    member: Member | None = Field(None, description="Resolved member reference")

    @property
    def member_name(self) -> str:
        return self.member.name if self.member is not None else ""


class Task(_FrozenModel):
    """
    @brief
    A matrix row: named task with its assignments.

    @details
    Duplicate (member, role) pairs are not rejected here; every entry is
    counted by the engine as given.
    """

    id: str = Field(..., description="Task identifier")
    name: str = Field(..., description="Task name")
    order_index: int = Field(0, description="Position of the task in the matrix")
    assignments: tuple[Assignment, ...] = Field(default_factory=tuple)

    def count_role(self, role: RaciRole) -> int:
        return sum(1 for a in self.assignments if a.role == role)

    def members_with_role(self, role: RaciRole) -> list[str]:
        return [a.member_name for a in self.assignments if a.role == role]


class MatrixSnapshot(_FrozenModel):
    """
    @brief
    Root value handed to the engine: ordered tasks with resolved members.
    """

    id: str | None = Field(None, description="Matrix identifier")
    name: str | None = Field(None, description="Matrix name")
    tasks: tuple[Task, ...] = Field(default_factory=tuple)

    @property
    def total_assignments(self) -> int:
        return sum(len(t.assignments) for t in self.tasks)


# ------------------------------------------------------------
# Engine configuration
# ------------------------------------------------------------
class ThresholdConfig(_StrictBaseModel):
    """
    @brief
    Sensitivity thresholds for workload warnings, conflicts and suggestions.

    @details
    Every rule fires when the observed count is strictly greater than
    the threshold.
    """

    # --- Workload warnings ---
    overload_total: int = Field(10, ge=0, description="Max total assignments per member")
    overload_accountable: int = Field(
        5, ge=0, description="Max Accountable assignments per member"
    )

    # --- Per-task suggestions ---
    max_consulted: int = Field(4, ge=0, description="Max Consulted parties per task")
    max_responsible: int = Field(5, ge=0, description="Max Responsible parties per task")
    max_task_assignments: int = Field(10, ge=0, description="Max assignments per task")

    # --- Matrix-wide suggestions ---
    redistribute_total: int = Field(
        12, ge=0, description="Member total above which rebalancing is suggested"
    )
    redistribute_accountable: int = Field(
        6, ge=0, description="Member Accountable count above which delegation is suggested"
    )

    # --- Conflicts ---
    role_overload: int = Field(
        15, ge=0, description="Task assignment count above which ROLE_OVERLOAD is reported"
    )


class ScoringConfig(_StrictBaseModel):
    """Weights of the health score formula."""

    error_penalty: int = Field(10, ge=0, description="Points removed per error")
    warning_penalty: int = Field(3, ge=0, description="Points removed per warning")
    coverage_bonus: int = Field(
        10, ge=0, description="Points added when every task has an assignment"
    )


class ReportConfig(_StrictBaseModel):
    """
    @brief
    Controls what the CLI writes after an evaluation.
    """

    write_report: bool = True
    include_summary: bool = True


class EngineConfig(_StrictBaseModel):
    """
    @brief
    Full engine configuration loaded from config.yaml.
    """

    thresholds: ThresholdConfig = Field(default_factory=ThresholdConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    output_dir: str | None = "data/output"


__all__ = [
    "RaciRole",
    "Member",
    "Assignment",
    "Task",
    "MatrixSnapshot",
    "ThresholdConfig",
    "ScoringConfig",
    "ReportConfig",
    "EngineConfig",
]
