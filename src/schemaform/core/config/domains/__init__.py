"""Domain-specific configuration accessors."""
from .form import FormConfig

__all__ = ["FormConfig"]
