"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_config_flag(parser: argparse.ArgumentParser) -> None:
    """Add --config flag overriding the project config file."""
    parser.add_argument(
        "--config",
        type=str,
        help="Config file to use instead of ./.schemaform.yml",
    )


def add_schema_arg(parser: argparse.ArgumentParser) -> None:
    """Add the positional schema file argument."""
    parser.add_argument(
        "schema",
        help="Form schema file (YAML or JSON with a top-level 'properties' mapping)",
    )
