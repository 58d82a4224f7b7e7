"""Local committer identity lookup.

The probe is a boundary: failures must be fail-open and never break a form
run. A missing git binary, an unconfigured identity or a timeout all read as
"no default available".
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from schemaform.core.utils.subprocess import run_with_timeout

from .models import Identity

logger = logging.getLogger(__name__)


class IdentityProbe(Protocol):
    async def lookup_identity(self) -> Identity:
        ...


@dataclass(frozen=True)
class StaticIdentityProbe:
    """Probe returning a fixed identity (no environment access)."""

    identity: Identity = Identity()

    async def lookup_identity(self) -> Identity:
        return self.identity


@dataclass(frozen=True)
class GitIdentityProbe:
    """Read ``user.name`` / ``user.email`` from the git configuration."""

    timeout_seconds: float = 5.0
    cwd: Optional[Path] = None
    command: str = "git"

    def _read(self, setting: str) -> Optional[str]:
        try:
            proc = run_with_timeout(
                [self.command, "config", "--get", setting],
                timeout=self.timeout_seconds,
                cwd=str(self.cwd) if self.cwd else None,
                capture_output=True,
                text=True,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("git config --get %s failed: %s", setting, exc)
            return None
        if proc.returncode != 0:
            return None
        value = (proc.stdout or "").strip()
        return value or None

    def lookup_sync(self) -> Identity:
        if shutil.which(self.command) is None:
            logger.debug("%s not found on PATH; no identity defaults", self.command)
            return Identity()
        return Identity(author=self._read("user.name"), email=self._read("user.email"))

    async def lookup_identity(self) -> Identity:
        return self.lookup_sync()


__all__ = ["IdentityProbe", "StaticIdentityProbe", "GitIdentityProbe"]
