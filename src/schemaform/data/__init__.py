"""
schemaform data resource helpers.

Provides access to bundled configuration files and JSON Schemas using
importlib.resources.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """
    Get absolute path to a data file or directory.

    Args:
        subpackage: Name of the data subpackage (e.g., "config", "schemas")
        filename: Optional filename within the subpackage

    Returns:
        Absolute path to the file or directory

    Example:
        >>> get_data_path("config", "form.yaml")
        PosixPath('/path/to/schemaform/data/config/form.yaml')
    """
    pkg = resources.files("schemaform.data")
    base = Path(str(pkg / subpackage))
    return base / filename if filename else base


__all__ = [
    "get_data_path",
]
