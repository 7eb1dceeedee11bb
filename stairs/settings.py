"""Environment-driven configuration for stairs."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

_TRUTHY = {"1", "true", "yes", "on"}


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def load_config_file(path: Path) -> Mapping[str, Any]:
    """Load a YAML settings file from *path*."""

    if not path.exists():
        raise FileNotFoundError(f"Stairs configuration not found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, Mapping):
        raise ValueError(f"Stairs configuration at {path} must be a mapping")
    return payload


@dataclass(slots=True)
class Settings:
    """Runtime settings loaded from a YAML file and environment variables."""

    log_level: str = "WARNING"
    logging_config: Path | None = None
    strict_skip: bool = False

    @classmethod
    def load(cls) -> "Settings":
        """Load settings, letting environment variables override the file."""

        file_values: Mapping[str, Any] = {}
        if config_path := os.getenv("STAIRS_CONFIG"):
            file_values = load_config_file(Path(config_path))

        log_level = os.getenv("STAIRS_LOG_LEVEL", str(file_values.get("log_level", "WARNING")))
        logging_config = os.getenv("STAIRS_LOGGING_CONFIG", file_values.get("logging_config"))
        strict_skip = os.getenv("STAIRS_STRICT_SKIP", file_values.get("strict_skip", False))
        return cls(
            log_level=log_level.upper(),
            logging_config=Path(logging_config) if logging_config else None,
            strict_skip=_as_bool(strict_skip),
        )


__all__ = ["Settings", "load_config_file"]
