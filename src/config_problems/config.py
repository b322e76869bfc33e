from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from config_problems.trace import DEFAULT_MAX_TRACE_DEPTH

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".config-problems.json"


def _safe_int(value: str, default: int) -> int:
    try:
        return int(value)
    except ValueError:
        return default


def _trace_depth(value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        return DEFAULT_MAX_TRACE_DEPTH
    if value > DEFAULT_MAX_TRACE_DEPTH:
        logger.warning(
            f"max_trace_depth {value} exceeds the supported "
            f"{DEFAULT_MAX_TRACE_DEPTH} frames; clamping"
        )
        return DEFAULT_MAX_TRACE_DEPTH
    return value


@dataclass
class ProblemsConfig:
    max_trace_depth: int = DEFAULT_MAX_TRACE_DEPTH
    capture_synthetic_failures: bool = False

    def __post_init__(self) -> None:
        self.max_trace_depth = _trace_depth(self.max_trace_depth)

    @classmethod
    def from_env(cls) -> ProblemsConfig:
        max_depth = _safe_int(
            os.environ.get("CONFIG_PROBLEMS_MAX_TRACE_DEPTH", str(DEFAULT_MAX_TRACE_DEPTH)),
            DEFAULT_MAX_TRACE_DEPTH,
        )
        capture = os.environ.get("CONFIG_PROBLEMS_CAPTURE_SYNTHETIC_FAILURES", "false")

        return cls(
            max_trace_depth=max_depth,
            capture_synthetic_failures=capture.lower() in ("true", "1", "yes"),
        )

    @classmethod
    def from_file(cls, path: Path) -> ProblemsConfig:
        config = cls.from_env()

        if not path.exists():
            return config

        try:
            data = json.loads(path.read_text())
            section = data.get("problems", {})
            if not isinstance(section, dict):
                logger.warning(f"Ignoring non-object 'problems' section in {path}")
                return config

            if "max_trace_depth" in section:
                if not os.environ.get("CONFIG_PROBLEMS_MAX_TRACE_DEPTH"):
                    config.max_trace_depth = _trace_depth(section["max_trace_depth"])
            if isinstance(section.get("capture_synthetic_failures"), bool):
                if not os.environ.get("CONFIG_PROBLEMS_CAPTURE_SYNTHETIC_FAILURES"):
                    config.capture_synthetic_failures = section["capture_synthetic_failures"]

        except (json.JSONDecodeError, AttributeError, OSError) as e:
            logger.warning(f"Failed to load problems config from {path}: {e}")

        return config


def load_problems_config(path: Path | None = None) -> ProblemsConfig:
    """Load problems config from .config-problems.json, with env overrides."""
    if path is None:
        path = Path.cwd() / CONFIG_FILENAME
    return ProblemsConfig.from_file(path)
