"""schemaform preview command.

SUMMARY: Show the questions a form schema would ask

Synthesizes every question against the defaults-only answer map, without
prompting. Useful when authoring cascading lists.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from schemaform.cli import OutputFormatter, add_config_flag, add_json_flag, add_schema_arg, load_form_config
from schemaform.core.exceptions import SchemaFormError
from schemaform.core.form import FormQuestionnaire, QuestionKind, load_form_schema

SUMMARY = "Show the questions a form schema would ask"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_schema_arg(parser)
    add_json_flag(parser)
    add_config_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        config = load_form_config(args)
        schema = load_form_schema(Path(args.schema))
        questionnaire = FormQuestionnaire(config)
        questions = asyncio.run(questionnaire.preview(schema))
    except SchemaFormError as e:
        formatter.error(e)
        return 1

    if formatter.json_mode:
        formatter.json_output([q.to_dict() for q in questions])
        return 0

    for question in questions:
        formatter.text(f"{question.name} ({question.kind.value}): {question.message}")
        formatter.text_kv("default", question.default, prefix="    ")
        if question.kind is QuestionKind.SELECT:
            values = ", ".join(str(c.value) for c in question.choices) or "<none>"
            formatter.text_kv("choices", values, prefix="    ")
            if question.allow_multiple:
                formatter.text_kv("multiple", "yes", prefix="    ")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
