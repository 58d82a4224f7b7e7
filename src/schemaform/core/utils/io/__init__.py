"""File I/O helpers."""
from .core import atomic_write, ensure_parent_dir
from .yaml import iter_yaml_files, read_yaml, write_yaml

__all__ = [
    "atomic_write",
    "ensure_parent_dir",
    "iter_yaml_files",
    "read_yaml",
    "write_yaml",
]
