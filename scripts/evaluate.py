# scripts/evaluate.py
from __future__ import annotations

import argparse
import logging
import sys
import time
import traceback
from pathlib import Path
from typing import Any

from raci_health.dataloader.config_loader import ConfigLoader
from raci_health.dataloader.snapshot_loader import SnapshotLoader
from raci_health.engine import RaciEngine, summarize_result
from raci_health.errors import RaciError
from raci_health.metrics.analytics import workload_frame
from raci_health.metrics.logger import write_report
from raci_health.schemas.models import EngineConfig


def _setup_logging() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    @brief
    Parses command-line arguments for a single matrix evaluation.
    """
    parser = argparse.ArgumentParser(
        prog="raci-evaluate",
        description="Evaluate a RACI matrix snapshot: load → evaluate → report",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to engine config YAML (default: built-in thresholds)",
    )
    parser.add_argument(
        "--input",
        type=str,
        required=True,
        help="Path to matrix snapshot (.json, .yaml or .yml)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output directory for evaluation_report.json (default: config output_dir)",
    )
    parser.add_argument(
        "--workload",
        action="store_true",
        help="Also log the per-member workload table",
    )
    return parser.parse_args(argv)


def run_evaluation(
    config_path: Path | None,
    input_path: Path,
    output_dir: Path | None = None,
    show_workload: bool = False,
) -> dict[str, Any]:
    """
    @brief
    Load configuration and snapshot, evaluate, and optionally write the report.

    @returns
        Dictionary with validity flag, health score, counts and report path.

    @raises
        RaciError
            On configuration, loading or report writing failures.
    """
    t0 = time.perf_counter()

    # (1) Configuration
    if config_path is not None:
        logging.info("Loading config: %s", config_path)
        cfg = ConfigLoader().load(config_path)
    else:
        cfg = EngineConfig()

    # (2) Snapshot
    logging.info("Loading snapshot: %s", input_path)
    snapshot = SnapshotLoader().load(input_path)

    # (3) Evaluation
    result = RaciEngine(cfg).evaluate(snapshot)
    summary = summarize_result(result)

    for issue in result.errors:
        logging.warning("ERROR   %s: %s", issue.task_name, issue.message)
    for issue in result.warnings:
        logging.warning("WARNING %s: %s", issue.task_name, issue.message)

    if show_workload:
        frame = workload_frame(snapshot, cfg.thresholds)
        logging.info("Workload:\n%s", frame.to_string(index=False) if not frame.empty else "(empty)")

    # (4) Report
    report_path: Path | None = None
    if cfg.report.write_report:
        target_dir = output_dir or Path(cfg.output_dir or "data/output")
        report_path = write_report(
            result,
            out_dir=target_dir,
            summary=summary if cfg.report.include_summary else None,
        )

    logging.info(
        "Health %d/100 (%s): %d/%d valid tasks, %d error(s), %d warning(s) in %.3f s",
        result.health_score,
        result.health_label,
        summary.valid_tasks,
        summary.total_tasks,
        summary.error_count,
        summary.warning_count,
        time.perf_counter() - t0,
    )

    return {
        "valid": result.is_valid,
        "health_score": result.health_score,
        "summary": summary.model_dump(),
        "report": report_path,
    }


def main(argv: list[str] | None = None) -> int:
    """
    @brief
    CLI entry point.

    @details
    Exit codes:
      0 – matrix is valid
      1 – matrix has errors, or controlled failure (RaciError)
      2 – unexpected crash
    """
    _setup_logging()
    args = _parse_args(argv)

    try:
        result = run_evaluation(
            Path(args.config) if args.config else None,
            Path(args.input),
            Path(args.output) if args.output else None,
            show_workload=args.workload,
        )
        return 0 if result["valid"] else 1
    except RaciError as e:
        logging.error(str(e))
        return 1
    except Exception:
        logging.error("Unexpected error occurred:")
        traceback.print_exc()
        return 2


if __name__ == "__main__":
    sys.exit(main())
