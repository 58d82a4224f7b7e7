"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path

from schemaform.core.config import ConfigManager, FormConfig
from schemaform.core.stdlib_logging import configure_stdlib_logging


def load_form_config(args: argparse.Namespace) -> FormConfig:
    """Load configuration for a command and apply its logging settings.

    ``--verbose`` forces DEBUG regardless of the configured level.
    """
    config_path = getattr(args, "config", None)
    manager = ConfigManager(config_path=Path(config_path) if config_path else None)
    config = FormConfig(manager.load_config())
    level = "DEBUG" if getattr(args, "verbose", False) else config.log_level
    log_path = Path(config.log_path) if config.log_path else None
    configure_stdlib_logging(level=level, log_path=log_path)
    return config
