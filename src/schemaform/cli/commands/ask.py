"""schemaform ask command.

SUMMARY: Ask the questions of a form schema and print the answers

Runs the form in the terminal, one question at a time, and emits the
resulting parameter map as JSON (stdout or --output) or as text.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict

from schemaform.cli import OutputFormatter, add_config_flag, add_json_flag, add_schema_arg, load_form_config
from schemaform.core.exceptions import SchemaFormError
from schemaform.core.form import ConsolePrompter, FormQuestionnaire, load_answers, load_form_schema
from schemaform.core.form.templates import render_message
from schemaform.core.utils.io import atomic_write, write_yaml

SUMMARY = "Ask the questions of a form schema and print the answers"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_schema_arg(parser)
    parser.add_argument(
        "--answers",
        type=str,
        help="YAML/JSON file of pre-supplied answers (those questions are not asked)",
    )
    parser.add_argument(
        "--yes",
        "-y",
        dest="assume_yes",
        action="store_true",
        help="Accept every default without prompting",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Write the answers to this file (.yaml/.yml for YAML, JSON otherwise)",
    )
    add_json_flag(parser)
    add_config_flag(parser)


def _write_output(path: Path, params: Dict[str, Any]) -> None:
    if path.suffix.lower() in (".yaml", ".yml"):
        write_yaml(path, params)
        return

    def _writer(f) -> None:
        json.dump(params, f, indent=2, ensure_ascii=False, default=str)
        f.write("\n")

    atomic_write(path, _writer)


def _stderr_input(prompt: str) -> str:
    sys.stderr.write(prompt)
    sys.stderr.flush()
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\n")


def main(args: argparse.Namespace) -> int:
    """Run the form."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        config = load_form_config(args)
        schema = load_form_schema(Path(args.schema))
        provided = load_answers(Path(args.answers)) if args.answers else None

        prompter = None
        if formatter.json_mode:
            # Keep stdout for the JSON result; prompts go to stderr.
            prompter = ConsolePrompter(
                input_func=_stderr_input,
                output=sys.stderr,
                select_hint=config.messages.get("select_hint"),
                retry_message=render_message(config.messages, "invalid_input"),
            )
        questionnaire = FormQuestionnaire(config, prompter=prompter)
        params = asyncio.run(
            questionnaire.run(schema, provided_answers=provided, assume_yes=args.assume_yes)
        )

        if args.output:
            _write_output(Path(args.output), params)
            formatter.success(
                {"output": args.output, "answers": params},
                f"Answers written to {args.output}",
            )
        elif formatter.json_mode:
            formatter.success({"answers": params}, "")
        else:
            for key, value in params.items():
                formatter.text_kv(key, value, prefix="")
        return 0

    except SchemaFormError as e:
        formatter.error(e)
        return 1
    except EOFError:
        formatter.error("input ended before all questions were answered", error_code="eof")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
