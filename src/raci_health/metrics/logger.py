from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from raci_health.errors import DataError
from raci_health.schemas.results import EvaluationResult, ValidationSummary

logger = logging.getLogger(__name__)


def write_report(
    result: EvaluationResult,
    out_dir: Path,
    filename: str = "evaluation_report.json",
    summary: ValidationSummary | None = None,
) -> Path:
    """
    @brief
    Writes the evaluation report atomically in UTF-8 encoding.

    @details
    Serializes the result with its camelCase field names, optionally embeds
    the count summary under "summary", and replaces the target file in a
    single filesystem operation.

    @params
        result : EvaluationResult
            Output of the engine.
        out_dir : Path
            Directory where the report will be created.
        filename : str
            Target filename (default 'evaluation_report.json').
        summary : ValidationSummary | None
            Optional count projection to include.

    @returns
        Path to the written report.

    @raises
        DataError
            If result is not an EvaluationResult or writing fails.
    """
    if not isinstance(result, EvaluationResult):
        raise DataError("result must be an EvaluationResult", source="logger.write_report")

    # (1) Build serializable payload
    data = result.model_dump(mode="json", by_alias=True)
    if summary is not None:
        data["summary"] = summary.model_dump(mode="json", by_alias=True)
    payload = json.dumps(data, ensure_ascii=False, sort_keys=True, indent=2)

    # (2) Ensure output directory exists
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    # (3) Atomically write payload
    target = out_dir / filename
    _atomic_write_text(target, payload, encoding="utf-8")
    logger.info("Evaluation report saved: %s", target)
    return target


def _atomic_write_text(path: Path, text: str, encoding: str = "utf-8") -> None:
    """
    @brief
    Performs atomic text file writing using a temporary file swap.

    @raises
        DataError
            On write or rename failure.
    """
    path = Path(path)
    tmp_dir = path.parent
    tmp_dir.mkdir(parents=True, exist_ok=True)

    # (1) Create temporary file near the target for atomicity
    fd, tmp_path = tempfile.mkstemp(prefix=path.name + ".", dir=str(tmp_dir))
    try:
        with open(fd, "w", encoding=encoding, newline="") as f:
            f.write(text)
        os.replace(tmp_path, path)
    except OSError as e:
        # (2) Clean up temp file on error
        try:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
        finally:
            raise DataError(
                f"atomic write failed for {path}: {e}",
                source="logger._atomic_write_text",
                suggested_action="Check output directory permissions and disk space.",
            ) from e
