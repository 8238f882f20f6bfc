from raci_health.validator.conflicts import detect_conflicts
from raci_health.validator.suggestions import generate_suggestions, sort_by_impact
from raci_health.validator.task_rules import check_new_assignment, check_task, summarize_issues
from raci_health.validator.validator import MatrixValidator
from raci_health.validator.workload import MemberWorkload, aggregate_workload, workload_warnings

__all__ = [
    "MatrixValidator",
    "check_task",
    "check_new_assignment",
    "summarize_issues",
    "aggregate_workload",
    "workload_warnings",
    "MemberWorkload",
    "detect_conflicts",
    "generate_suggestions",
    "sort_by_impact",
]
