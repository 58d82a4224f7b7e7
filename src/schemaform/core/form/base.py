"""Schema-driven form: ask each property's question in order and fold the answers."""
from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from schemaform.core.config import FormConfig

from .defaults import DefaultResolver, LocalFileSystem
from .identity import GitIdentityProbe, IdentityProbe
from .models import FormSchema, PropertyDefinition, Question
from .prompts import ConsolePrompter, PromptExecutor
from .questions import QuestionSynthesizer
from .templates import render_message
from .validation import coerce_value, validate_answer

logger = logging.getLogger(__name__)

SchemaLike = Union[FormSchema, Mapping[str, Any]]


class FormQuestionnaire:
    """Execute the questions described by a form schema.

    Architecture:
    - synthesizer: turns one property into one ``Question``
    - prompter: external executor that asks a question and returns the answer
    - probe / filesystem: environment collaborators used for defaults and validation

    Questions are asked strictly one at a time, in schema order; each question
    sees every answer given before it.
    """

    def __init__(
        self,
        config: Optional[FormConfig] = None,
        *,
        prompter: Optional[PromptExecutor] = None,
        probe: Optional[IdentityProbe] = None,
        filesystem: Optional[LocalFileSystem] = None,
        cwd: Optional[Path] = None,
    ) -> None:
        self.config = config or FormConfig()
        self.filesystem = filesystem or LocalFileSystem(cwd=Path(cwd) if cwd else Path.cwd())
        self.probe = probe or GitIdentityProbe(
            timeout_seconds=self.config.git_timeout_seconds,
            cwd=self.filesystem.cwd,
        )
        self.prompter = prompter or ConsolePrompter(
            select_hint=self.config.messages.get("select_hint"),
            retry_message=render_message(self.config.messages, "invalid_input"),
        )
        resolver = DefaultResolver(self.config, self.probe, self.filesystem)
        self.synthesizer = QuestionSynthesizer(self.config, resolver)

    # ---------- Public API ----------
    async def run(
        self,
        schema: SchemaLike,
        provided_answers: Optional[Mapping[str, Any]] = None,
        assume_yes: bool = False,
    ) -> Dict[str, Any]:
        """Run the form and collect answers.

        Args:
            schema: Form schema (or its raw mapping)
            provided_answers: Pre-filled answers (bypasses prompting, still validated)
            assume_yes: If True, use synthesized defaults without prompting

        Returns:
            Parameter map with one entry per asked property

        Raises:
            AnswerValidationError: If a provided answer is rejected
            UnknownPropertyTypeError: If a property type is unsupported and not skipped
        """
        params, _questions = await self._fold(as_form_schema(schema), provided_answers, assume_yes)
        return params

    async def preview(
        self,
        schema: SchemaLike,
        provided_answers: Optional[Mapping[str, Any]] = None,
    ) -> List[Question]:
        """Synthesize every question as a defaults-only run would, without prompting."""
        _params, questions = await self._fold(as_form_schema(schema), provided_answers, True)
        return questions

    # ---------- Internal helpers ----------
    async def _fold(
        self,
        form: FormSchema,
        provided_answers: Optional[Mapping[str, Any]],
        assume_yes: bool,
    ) -> Tuple[Dict[str, Any], List[Question]]:
        provided: Dict[str, Any] = dict(provided_answers or {})
        params: Dict[str, Any] = {}
        questions: List[Question] = []

        for prop in form:
            if prop.disable:
                logger.debug("skipping disabled property %s", prop.key)
                continue
            question = await self.synthesizer.synthesize(prop.key, form, params)
            if question is None:
                continue
            questions.append(question)
            answer = await self._answer(prop, question, provided, assume_yes)
            params = {**params, prop.key: coerce_value(prop, answer)}

        return params, questions

    async def _answer(
        self,
        prop: PropertyDefinition,
        question: Question,
        provided: Dict[str, Any],
        assume_yes: bool,
    ) -> Any:
        if prop.key in provided:
            value = provided[prop.key]
            validate_answer(question, value)
            return value
        if assume_yes:
            return copy.deepcopy(question.default)
        return await self.prompter.ask(question)


def as_form_schema(schema: SchemaLike) -> FormSchema:
    if isinstance(schema, FormSchema):
        return schema
    return FormSchema.from_dict(schema)


__all__ = ["FormQuestionnaire", "as_form_schema"]
