"""Fake collaborators for form runs."""
from __future__ import annotations

from typing import Any, Dict, List

from schemaform.core.form import Identity, Question


class ScriptedPrompter:
    """Prompt executor answering from a mapping of question name -> answer.

    Questions without a scripted answer get their default. Every question
    asked is recorded, together with the answers visible when it was asked.
    """

    def __init__(self, answers: Dict[str, Any]) -> None:
        self.answers = dict(answers)
        self.asked: List[Question] = []

    async def ask(self, question: Question) -> Any:
        self.asked.append(question)
        return self.answers.get(question.name, question.default)

    def question(self, name: str) -> Question:
        for question in self.asked:
            if question.name == name:
                return question
        raise KeyError(name)


class RecordingProbe:
    """Identity probe returning a fixed identity and counting lookups."""

    def __init__(self, identity: Identity | None = None) -> None:
        self.identity = identity or Identity()
        self.calls = 0

    async def lookup_identity(self) -> Identity:
        self.calls += 1
        return self.identity
