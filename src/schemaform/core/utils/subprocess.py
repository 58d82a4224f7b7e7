from __future__ import annotations

"""Subprocess helpers with config-driven timeouts.

No shell=True: commands are always passed as argument lists.
"""

import logging
import shlex
import subprocess
from time import perf_counter
from typing import Any, Sequence

logger = logging.getLogger(__name__)


def _flatten_cmd(cmd: Any) -> Sequence[str]:
    if isinstance(cmd, (list, tuple)):
        return [str(p) for p in cmd]
    return shlex.split(str(cmd))


def run_with_timeout(cmd: Any, timeout: float, **kwargs: Any) -> subprocess.CompletedProcess:
    """Run a subprocess with an explicit timeout.

    Args:
        cmd: Command list/str passed through to ``subprocess.run``.
        timeout: Timeout in seconds (usually read from ``timeouts`` config).
        **kwargs: Additional arguments forwarded to ``subprocess.run``.

    Returns:
        CompletedProcess from ``subprocess.run``.

    Raises:
        subprocess.TimeoutExpired: When the command exceeds ``timeout``.
        OSError: When the executable cannot be started.
    """
    argv = list(_flatten_cmd(cmd))
    start = perf_counter()
    try:
        return subprocess.run(argv, timeout=float(timeout), **kwargs)
    finally:
        logger.debug("subprocess %s finished in %.3fs", argv, perf_counter() - start)


__all__ = ["run_with_timeout"]
