"""Core I/O primitives: parent directory creation and atomic writes."""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable, TextIO


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory for ``path`` exists."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def atomic_write(path: Path, writer: Callable[[TextIO], None], *, encoding: str = "utf-8") -> None:
    """Write a file atomically.

    ``writer`` receives a text handle on a temporary file in the target
    directory; the temporary file replaces ``path`` only once it has been
    fully written and flushed.
    """
    target = Path(path)
    ensure_parent_dir(target)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=str(target.parent))
    try:
        with os.fdopen(fd, "w", encoding=encoding) as handle:
            writer(handle)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, target)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
