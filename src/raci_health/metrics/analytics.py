# src/raci_health/metrics/analytics.py
from __future__ import annotations

import pandas as pd

from raci_health.schemas.models import MatrixSnapshot, ThresholdConfig
from raci_health.validator.workload import aggregate_workload

WORKLOAD_COLUMNS = [
    "member_id",
    "member_name",
    "responsible",
    "accountable",
    "consulted",
    "informed",
    "total",
    "overload_warning",
]


def workload_frame(
    snapshot: MatrixSnapshot, thresholds: ThresholdConfig | None = None
) -> pd.DataFrame:
    """
    @brief
    Tabulate per-member workload as a pandas DataFrame.

    @details
    One row per assigned member with counts per RACI role and an
    `overload_warning` flag that mirrors the workload warning thresholds.
    Rows are sorted by total (descending), then by member name.
    An empty snapshot yields an empty frame with the same columns.
    """
    thresholds = thresholds or ThresholdConfig()
    workload = aggregate_workload(snapshot)

    # (1) Flatten workload records
    records = [
        {
            "member_id": w.member_id,
            "member_name": w.name,
            "responsible": w.responsible_count,
            "accountable": w.accountable_count,
            "consulted": w.consulted_count,
            "informed": w.informed_count,
            "total": w.total_count,
            "overload_warning": (
                w.total_count > thresholds.overload_total
                or w.accountable_count > thresholds.overload_accountable
            ),
        }
        for w in workload.values()
    ]

    if not records:
        return pd.DataFrame(columns=WORKLOAD_COLUMNS)

    # (2) Stable ordering for reports
    df = pd.DataFrame.from_records(records, columns=WORKLOAD_COLUMNS)
    df = df.sort_values(["total", "member_name"], ascending=[False, True], kind="stable")
    return df.reset_index(drop=True)
