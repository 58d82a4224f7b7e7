"""Answer coercion and validation of pre-supplied answers."""
from __future__ import annotations

import re
from typing import Any, Union

from schemaform.core.exceptions import AnswerValidationError

from .models import PropertyDefinition, Question, QuestionKind

_INT_RE = re.compile(r"[-+]?\d+")


def parse_number(value: Any) -> Union[int, float]:
    """Parse a number answer, keeping integers integral.

    Raises:
        ValueError: If ``value`` is not numeric.
    """
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}")
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip()
    if _INT_RE.fullmatch(text):
        return int(text)
    number = float(text)
    if number != number or number in (float("inf"), float("-inf")):
        raise ValueError(f"Expected a finite number, got {value!r}")
    return number


def is_number(value: Any) -> bool:
    try:
        parse_number(value)
    except (TypeError, ValueError):
        return False
    return True


def coerce_value(prop: PropertyDefinition, value: Any) -> Any:
    """Coerce an accepted answer to the type its property declares.

    Numbers become ``int``/``float``; booleans given as text are parsed;
    everything else passes through unchanged.
    """
    if prop.type == "number" and value is not None and is_number(value):
        return parse_number(value)
    if prop.type == "boolean" and isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "y", "on")
    if prop.type == "list" and prop.checkbox and value is not None and not isinstance(value, list):
        return [value]
    return value


def validate_answer(question: Question, value: Any) -> None:
    """Run the question's validator against a value that was not prompted for.

    Select answers must also be among the resolved choices; a select with
    no choices accepts anything.

    Raises:
        AnswerValidationError: If the validator rejects ``value``.
    """
    result = question.check(value)
    if result is not True:
        message = result if isinstance(result, str) else "invalid input"
        raise AnswerValidationError(question.name, value, message)
    if question.kind is QuestionKind.SELECT and question.choices:
        allowed = [choice.value for choice in question.choices]
        picked = value if question.allow_multiple and isinstance(value, list) else [value]
        unknown = [v for v in picked if v not in allowed]
        if unknown:
            raise AnswerValidationError(
                question.name, value, f"not one of the available choices: {unknown!r}"
            )


__all__ = ["parse_number", "is_number", "coerce_value", "validate_answer"]
