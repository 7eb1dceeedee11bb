"""Logging setup helpers for applications embedding stairs."""
from __future__ import annotations

import logging
import logging.config

import yaml

from stairs.settings import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings | None = None) -> None:
    """Configure logging from an INI/YAML file or fall back to basic configuration."""

    settings = settings or Settings.load()
    config_path = settings.logging_config
    if config_path is not None:
        suffix = config_path.suffix.lower()
        if not config_path.exists():
            raise FileNotFoundError(f"Logging configuration not found at {config_path}")
        if suffix in {".ini", ".cfg"}:
            logging.config.fileConfig(config_path, disable_existing_loggers=False)
            return
        if suffix in {".yaml", ".yml"}:
            with config_path.open("r", encoding="utf-8") as handle:
                payload = yaml.safe_load(handle) or {}
            payload.setdefault("version", 1)
            payload.setdefault("disable_existing_loggers", False)
            logging.config.dictConfig(payload)
            return
        raise ValueError(f"Unsupported logging config {config_path}")

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)


__all__ = ["LOG_FORMAT", "configure_logging"]
