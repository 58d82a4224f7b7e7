"""
schemaform CLI package.

Provides the command-line interface with auto-discovery of commands
from cli/commands/.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter, format_json
from ._args import add_json_flag, add_config_flag, add_schema_arg
from ._utils import load_form_config

__all__ = [
    # Output formatting
    "OutputFormatter",
    "format_json",
    # Argument helpers
    "add_json_flag",
    "add_config_flag",
    "add_schema_arg",
    # Utilities
    "load_form_config",
]
