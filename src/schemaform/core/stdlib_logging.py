from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from schemaform.core.utils.io import ensure_parent_dir

_CONFIGURED_KEY: str | None = None
_SCHEMAFORM_HANDLER: logging.Handler | None = None

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_stdlib_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> None:
    """Configure the ``schemaform`` logger.

    Writes to ``log_path`` when given, otherwise to stderr so stdout stays
    reserved for command output. Idempotent per process for the same target.
    """
    global _CONFIGURED_KEY, _SCHEMAFORM_HANDLER

    target = str(Path(log_path).resolve()) if log_path else "<stderr>"
    key = f"{target}:{level.upper()}"
    if _CONFIGURED_KEY == key and _SCHEMAFORM_HANDLER is not None:
        return

    logger = logging.getLogger("schemaform")
    logger.setLevel(_level_from_name(level))

    if _SCHEMAFORM_HANDLER is not None:
        logger.removeHandler(_SCHEMAFORM_HANDLER)
        _SCHEMAFORM_HANDLER.close()
        _SCHEMAFORM_HANDLER = None

    handler: logging.Handler
    if log_path:
        ensure_parent_dir(Path(target))
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    _SCHEMAFORM_HANDLER = handler
    _CONFIGURED_KEY = key


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the installed handler."""
    global _CONFIGURED_KEY, _SCHEMAFORM_HANDLER
    if _SCHEMAFORM_HANDLER is not None:
        logging.getLogger("schemaform").removeHandler(_SCHEMAFORM_HANDLER)
        _SCHEMAFORM_HANDLER.close()
    _CONFIGURED_KEY = None
    _SCHEMAFORM_HANDLER = None


__all__ = ["configure_stdlib_logging", "reset_stdlib_logging_for_tests"]
