# scripts/gen_schemas.py
"""
Generate JSON Schemas for the RACI health engine models.

This script exports JSON Schema files for:
    - MatrixSnapshot (engine input)
    - EngineConfig (config.yaml)
    - EvaluationResult (engine output, camelCase)

Output directory: schemas/
"""

import json
from pathlib import Path

from raci_health.schemas.models import EngineConfig, MatrixSnapshot
from raci_health.schemas.results import EvaluationResult


def export_schema(model_cls, name: str, out_dir: Path, by_alias: bool = True) -> Path:
    """
    @brief
    Exports the JSON schema of a given Pydantic model.

    @returns
        Path of the written "<name>.schema.json" file.
    """
    # (1) Ensure output directory exists
    out_dir.mkdir(parents=True, exist_ok=True)

    # (2) Compute target path and generate schema data
    schema_path = (out_dir / f"{name}.schema.json").resolve()
    schema = model_cls.model_json_schema(by_alias=by_alias, mode="serialization")

    # (3) Serialize JSON Schema to file with indentation and final newline
    with schema_path.open("w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
        f.write("\n")

    try:
        rel = schema_path.relative_to(Path.cwd())
    except ValueError:
        rel = schema_path
    print(f"Generated {rel}")
    return schema_path


def main() -> None:
    out_dir = Path("schemas").resolve()

    export_schema(MatrixSnapshot, "matrix_snapshot", out_dir)
    export_schema(EngineConfig, "config", out_dir)
    export_schema(EvaluationResult, "evaluation_result", out_dir)


if __name__ == "__main__":
    main()
