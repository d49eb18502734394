from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_INPUT_PATH = Path("data.txt")
DEFAULT_OUTPUT_PATH = Path("result.json")
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class Config:
    input_path: Path = DEFAULT_INPUT_PATH
    output_path: Path = DEFAULT_OUTPUT_PATH
    log_level: int = logging.WARNING


def _optional_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if not value or not value.strip():
        return default
    return value.strip()


def _log_level_from_env(name: str) -> int:
    level_name = _optional_env(name, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level in {name}: {level_name}")
    return level


def load_config() -> Config:
    return Config(
        input_path=Path(_optional_env("SESSION_REPORT_INPUT", str(DEFAULT_INPUT_PATH))),
        output_path=Path(_optional_env("SESSION_REPORT_OUTPUT", str(DEFAULT_OUTPUT_PATH))),
        log_level=_log_level_from_env("SESSION_REPORT_LOG_LEVEL"),
    )
