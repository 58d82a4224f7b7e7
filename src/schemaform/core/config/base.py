"""Base class for domain-specific configuration accessors."""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from typing import Any, Dict, Optional

from .manager import ConfigManager


class BaseDomainConfig(ABC):
    """Abstract base class for domain-specific configuration accessors.

    Usage:
        class MyConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "mySection"

            @cached_property
            def my_setting(self) -> str:
                return self.section.get("mySetting", "default")
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        *,
        manager: Optional[ConfigManager] = None,
    ) -> None:
        """Initialize domain config.

        Args:
            config: Already-loaded configuration dict. Loaded via ``manager``
                (or a default ``ConfigManager``) when omitted.
            manager: Config manager used to load configuration lazily.
        """
        if config is None:
            config = (manager or ConfigManager()).load_config()
        self._config = config

    @property
    def config(self) -> Dict[str, Any]:
        return self._config

    @abstractmethod
    def _config_section(self) -> str:
        """Return the top-level config key for this domain."""
        ...

    @cached_property
    def section(self) -> Dict[str, Any]:
        """Get this domain's configuration section (empty dict if absent)."""
        return self._config.get(self._config_section(), {}) or {}


__all__ = ["BaseDomainConfig"]
