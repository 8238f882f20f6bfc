# src/raci_health/dataloader/config_loader.py
from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, NoReturn

import yaml
from pydantic import ValidationError

from raci_health.errors import ConfigError
from raci_health.schemas.models import EngineConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    @brief
    Reads engine thresholds and scoring weights from a YAML file.

    @details
    Sections absent from the file keep their model defaults, so a config that
    only overrides `thresholds.overload_total` is valid. Unknown keys and
    negative bounds are rejected by `EngineConfig`. Every failure surfaces as
    a `ConfigError`; nothing from yaml or pydantic leaks to the caller.
    """

    SUFFIXES = (".yaml", ".yml")

    def load(self, path: Path) -> EngineConfig:
        """
        @brief
        Load and validate an engine configuration.

        @params
            path : Path
                Location of config.yaml (or .yml).

        @returns
            EngineConfig with defaults filled in for omitted sections.

        @raises
            ConfigError
                Bad path, unreadable or malformed YAML, or schema violation.
        """
        self._check_path(path)
        raw = self._parse(path)
        cfg = self._build(raw)
        logger.info("Config loaded from %s", path)
        return cfg

    # ------------------------------
    # Internal helpers
    # ------------------------------
    @staticmethod
    def _fail(step: str, message: str, action: str) -> NoReturn:
        raise ConfigError(
            message=message,
            source=f"ConfigLoader.{step}",
            suggested_action=action,
        )

    def _check_path(self, path: Path) -> None:
        if not isinstance(path, Path):
            self._fail(
                "_check_path",
                f"Config path must be a pathlib.Path, got {type(path).__name__}",
                "Wrap the config location in pathlib.Path.",
            )
        if not path.exists():
            self._fail(
                "_check_path",
                f"Config file not found: {path}",
                "Point --config at an existing YAML file or omit it for defaults.",
            )
        if path.suffix.lower() not in self.SUFFIXES:
            self._fail(
                "_check_path",
                f"Unsupported config extension {path.suffix!r}",
                "Rename the file to .yaml or .yml.",
            )

    def _parse(self, path: Path) -> Mapping[str, Any]:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(
                message=f"Cannot read config file {path}: {e}",
                source="ConfigLoader._parse",
                suggested_action="Check file permissions.",
            ) from e

        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(
                message=f"YAML parsing failed in {path.name}: {e}",
                source="ConfigLoader._parse",
                suggested_action="Fix the YAML syntax near the reported line.",
            ) from e

        if raw is None:
            self._fail(
                "_parse",
                f"Config file {path.name} is empty",
                "Add at least one section (thresholds, scoring, report) or drop --config.",
            )
        if not isinstance(raw, Mapping):
            self._fail(
                "_parse",
                f"Config root must be a mapping, got {type(raw).__name__}",
                "Use top-level keys such as thresholds: and scoring:.",
            )
        return raw

    @staticmethod
    def _build(raw: Mapping[str, Any]) -> EngineConfig:
        try:
            return EngineConfig.model_validate(dict(raw))
        except ValidationError as e:
            raise ConfigError(
                message=f"Invalid configuration structure ({e.error_count()} problem(s)): {e}",
                source="ConfigLoader._build",
                suggested_action="Remove unknown keys and keep every threshold non-negative.",
            ) from e


__all__ = ["ConfigLoader"]
