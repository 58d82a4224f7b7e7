"""Question synthesis: one property definition in, one question out."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from schemaform.core.config import FormConfig
from schemaform.core.exceptions import UnknownPropertyTypeError

from . import choices as choice_lists
from .defaults import DefaultResolver
from .models import (
    CONFIRM_TYPES,
    INPUT_TYPES,
    SELECT_TYPES,
    FormSchema,
    PropertyDefinition,
    Question,
    QuestionKind,
)
from .templates import render_message

logger = logging.getLogger(__name__)


def question_kind(prop: PropertyDefinition) -> Optional[QuestionKind]:
    """Map a property type to its question kind (None when unsupported)."""
    if prop.type in INPUT_TYPES:
        return QuestionKind.PASSWORD if prop.type == "password" else QuestionKind.INPUT
    if prop.type in CONFIRM_TYPES:
        return QuestionKind.CONFIRM
    if prop.type in SELECT_TYPES:
        return QuestionKind.SELECT
    return None


class QuestionSynthesizer:
    """Build the question for a property given the answers collected so far."""

    def __init__(self, config: FormConfig, resolver: DefaultResolver) -> None:
        self.config = config
        self.resolver = resolver

    def _message(self, template_name: str, prop: PropertyDefinition) -> str:
        return render_message(self.config.messages, template_name, name=prop.name, key=prop.key)

    async def synthesize(
        self, key: str, schema: FormSchema, params: Dict[str, Any]
    ) -> Optional[Question]:
        """Return the question for ``key``.

        Returns None for an unsupported type when the configuration says to
        skip those; otherwise an unsupported type raises.

        Raises:
            UnknownPropertyTypeError: If the property type has no question kind.
        """
        prop = schema.properties[key]
        kind = question_kind(prop)
        if kind is QuestionKind.INPUT or kind is QuestionKind.PASSWORD:
            question = await self._input_question(prop, kind, params)
        elif kind is QuestionKind.CONFIRM:
            question = self._confirm_question(prop)
        elif kind is QuestionKind.SELECT:
            question = self._select_question(prop, schema, params)
        elif self.config.skip_unknown_types:
            logger.warning("skipping property %s with unsupported type %r", key, prop.type)
            return None
        else:
            raise UnknownPropertyTypeError(key, prop.type)

        logger.debug("synthesized %s question for %s", question.kind.value, key)
        return question

    async def _input_question(
        self, prop: PropertyDefinition, kind: QuestionKind, params: Dict[str, Any]
    ) -> Question:
        resolution = await self.resolver.resolve(prop, params)
        return Question(
            kind=kind,
            name=prop.key,
            message=self._message("input", prop),
            default=resolution.default,
            validate=resolution.validate,
        )

    def _confirm_question(self, prop: PropertyDefinition) -> Question:
        # The schema's own default is not consulted for yes/no questions.
        return Question(
            kind=QuestionKind.CONFIRM,
            name=prop.key,
            message=self._message("confirm", prop),
            default=False,
        )

    def _select_question(
        self, prop: PropertyDefinition, schema: FormSchema, params: Dict[str, Any]
    ) -> Question:
        entries = choice_lists.resolve_choices(prop.key, schema, params)
        first = choice_lists.first_value(entries)
        if prop.checkbox:
            default: Any = [first] if entries else []
        else:
            default = first
        return Question(
            kind=QuestionKind.SELECT,
            name=prop.key,
            message=self._message("select", prop),
            default=default,
            choices=entries,
            allow_multiple=prop.checkbox,
            page_size=self.config.page_size,
        )


__all__ = ["question_kind", "QuestionSynthesizer"]
