"""Unified CLI output formatting utilities.

Supports both JSON and text output modes so command results stay
machine-readable on stdout when ``--json`` is given.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional, Union

from schemaform.core.exceptions import SchemaFormError


def format_json(data: Any, indent: int = 2) -> str:
    return json.dumps(data, indent=indent, default=str, ensure_ascii=False)


class OutputFormatter:
    """Unified output formatter for CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        self.json_mode = json_mode
        self.indent = indent

    def success(
        self,
        data: Dict[str, Any],
        message: str,
        *,
        status: str = "success",
    ) -> None:
        """Output success result (``message`` is used in text mode)."""
        if self.json_mode:
            print(format_json({"status": status, **data}, self.indent))
        else:
            print(message)

    def error(
        self,
        error: Union[Exception, str],
        message: Optional[str] = None,
        *,
        error_code: Optional[str] = None,
    ) -> None:
        """Output error result to stderr.

        schemaform errors carry their class name as the code and their
        context; ``error_code`` overrides the code.
        """
        msg = message or str(error)
        if self.json_mode:
            output: Dict[str, Any] = {"error": error_code or "error", "message": msg}
            if isinstance(error, SchemaFormError):
                payload = error.to_json_error()
                output["error"] = error_code or payload["code"]
                if payload["context"]:
                    output["context"] = payload["context"]
            print(format_json(output, self.indent), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        print(format_json(data, self.indent))

    def text(self, message: str) -> None:
        print(message)

    def text_kv(self, key: str, value: Any, prefix: str = "  ") -> None:
        """Output key-value pair in text mode."""
        if not self.json_mode:
            print(f"{prefix}{key}: {value}")
