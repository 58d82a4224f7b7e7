"""Configuration loading and typed domain accessors."""
from .manager import ConfigManager, PROJECT_CONFIG_FILENAME
from .base import BaseDomainConfig
from .domains import FormConfig

__all__ = ["ConfigManager", "PROJECT_CONFIG_FILENAME", "BaseDomainConfig", "FormConfig"]
