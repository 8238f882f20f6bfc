import json
from pathlib import Path

from scripts.evaluate import main, run_evaluation

ROOT = Path(__file__).resolve().parents[1]
EXAMPLE = ROOT / "data" / "examples" / "matrix.json"
CONFIG = ROOT / "config" / "config.yaml"


def test_run_evaluation_writes_report(tmp_path: Path):
    """
    @brief
    Smoke test of the evaluation pipeline on the bundled example.

    @details
    The example holds one valid task, one task with two Accountable people
    and one empty task, so the matrix is invalid and a report is written.
    """
    # --- Act ---
    result = run_evaluation(CONFIG, EXAMPLE, tmp_path, show_workload=True)

    # --- Assert ---
    assert result["valid"] is False
    assert result["summary"] == {
        "total_tasks": 3,
        "valid_tasks": 1,
        "error_count": 2,
        "warning_count": 1,
    }
    # 100 - 2*10 - 1*3, no coverage bonus
    assert result["health_score"] == 77

    report = json.loads(Path(result["report"]).read_text(encoding="utf-8"))
    assert report["healthScore"] == 77
    assert report["summary"]["errorCount"] == 2


def test_main_exit_codes(tmp_path: Path):
    # --- Arrange ---
    valid = tmp_path / "valid.json"
    valid.write_text(
        json.dumps(
            {
                "tasks": [
                    {
                        "id": "t1",
                        "name": "Plan",
                        "assignments": [
                            {"member_id": "u1", "role": "ACCOUNTABLE", "member": {"id": "u1", "name": "Ann"}},
                            {"member_id": "u2", "role": "RESPONSIBLE", "member": {"id": "u2", "name": "Bob"}},
                        ],
                    }
                ]
            }
        ),
        encoding="utf-8",
    )
    out = str(tmp_path / "out")

    # --- Act / Assert ---
    assert main(["--input", str(valid), "--output", out]) == 0
    assert main(["--config", str(CONFIG), "--input", str(EXAMPLE), "--output", out]) == 1
    assert main(["--input", str(tmp_path / "missing.json"), "--output", out]) == 1
