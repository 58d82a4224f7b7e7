"""Schema-driven form package.

- models: schema, choice and question records
- identity: local committer identity probe
- defaults: default value and validator resolution
- choices: choice-list resolution (incl. cascading lists)
- questions: question synthesis per property type
- prompts: prompt executor contract and console implementation
- base: FormQuestionnaire, the form run itself
"""
from __future__ import annotations

from .base import FormQuestionnaire, as_form_schema
from .identity import GitIdentityProbe, IdentityProbe, StaticIdentityProbe
from .defaults import DefaultResolver, LocalFileSystem
from .loader import load_answers, load_form_schema
from .models import (
    Choice,
    ChoiceItem,
    FormSchema,
    Identity,
    ImageLink,
    PropertyDefinition,
    Question,
    QuestionKind,
)
from .prompts import ConsolePrompter, PromptExecutor
from .questions import QuestionSynthesizer

from . import choices
from . import validation

__all__ = [
    "FormQuestionnaire",
    "as_form_schema",
    "GitIdentityProbe",
    "IdentityProbe",
    "StaticIdentityProbe",
    "DefaultResolver",
    "LocalFileSystem",
    "load_answers",
    "load_form_schema",
    "Choice",
    "ChoiceItem",
    "FormSchema",
    "Identity",
    "ImageLink",
    "PropertyDefinition",
    "Question",
    "QuestionKind",
    "ConsolePrompter",
    "PromptExecutor",
    "QuestionSynthesizer",
    "choices",
    "validation",
]
