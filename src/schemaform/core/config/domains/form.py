"""Domain-specific configuration for form questions.

Provides cached access to locale messages, key conventions and timeouts.
"""
from __future__ import annotations

from functools import cached_property
from typing import Dict, FrozenSet, Optional

from schemaform.core.exceptions import ConfigError

from ..base import BaseDomainConfig


class FormConfig(BaseDomainConfig):
    """Typed accessor for the ``form`` section and its related sections."""

    def _config_section(self) -> str:
        return "form"

    @cached_property
    def locale(self) -> str:
        return str(self.section.get("locale") or "en")

    @cached_property
    def messages(self) -> Dict[str, str]:
        """Message templates for the configured locale."""
        catalogs = self.config.get("messages") or {}
        catalog = catalogs.get(self.locale)
        if not isinstance(catalog, dict):
            raise ConfigError(
                f"No message catalog for locale '{self.locale}'",
                context={"locale": self.locale, "available": sorted(catalogs)},
            )
        return {str(k): str(v) for k, v in catalog.items()}

    @cached_property
    def identity_keys(self) -> Dict[str, str]:
        """Property key -> identity field (``author`` or ``email``)."""
        return {str(k): str(v) for k, v in (self.section.get("identity_keys") or {}).items()}

    @cached_property
    def path_keys(self) -> FrozenSet[str]:
        return frozenset(str(k) for k in (self.section.get("path_keys") or []))

    @cached_property
    def skip_unknown_types(self) -> bool:
        return self.section.get("unknown_types", "error") == "skip"

    @cached_property
    def page_size(self) -> int:
        return int(self.section.get("page_size") or 1000)

    @cached_property
    def git_timeout_seconds(self) -> float:
        timeouts = self.config.get("timeouts") or {}
        if "git_operations_seconds" not in timeouts:
            raise ConfigError("timeouts.git_operations_seconds missing from configuration")
        return float(timeouts["git_operations_seconds"])

    @cached_property
    def log_level(self) -> str:
        return str((self.config.get("logging") or {}).get("level") or "WARNING")

    @cached_property
    def log_path(self) -> Optional[str]:
        return (self.config.get("logging") or {}).get("path") or None


__all__ = ["FormConfig"]
