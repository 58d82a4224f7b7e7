"""Shared utilities (YAML I/O, merging, subprocess helpers)."""
