"""Prompt executors: the component that actually asks a question.

The form engine only needs ``await executor.ask(question)``. ``ConsolePrompter``
is the plain-terminal implementation used by the CLI; it owns the re-prompt
loop when an answer fails validation.
"""
from __future__ import annotations

import asyncio
import getpass
import sys
from typing import Any, Callable, List, Optional, Protocol, TextIO

from .models import Question, QuestionKind

_YES = ("y", "yes", "true", "1")
_NO = ("n", "no", "false", "0")


class PromptExecutor(Protocol):
    async def ask(self, question: Question) -> Any:
        ...


class _Retry(Exception):
    """Raised internally when raw input cannot be parsed for a question."""


class ConsolePrompter:
    """Ask questions on a text terminal using ``input()``."""

    def __init__(
        self,
        *,
        input_func: Callable[[str], str] = input,
        password_func: Callable[[str], str] = getpass.getpass,
        output: Optional[TextIO] = None,
        select_hint: Optional[str] = None,
        retry_message: str = "invalid input",
    ) -> None:
        self.input_func = input_func
        self.password_func = password_func
        self.output = output
        self.select_hint = select_hint
        self.retry_message = retry_message

    def _write(self, text: str) -> None:
        print(text, file=self.output or sys.stdout)

    async def ask(self, question: Question) -> Any:
        return await asyncio.to_thread(self.ask_sync, question)

    def ask_sync(self, question: Question) -> Any:
        """Ask until an answer passes the question's validator."""
        while True:
            try:
                answer = self._read(question)
            except _Retry:
                self._write(f"  {self.retry_message}")
                continue
            result = question.check(answer)
            if result is True:
                return answer
            self._write(f"  {result if isinstance(result, str) else self.retry_message}")

    def _read(self, question: Question) -> Any:
        if question.kind is QuestionKind.CONFIRM:
            return self._read_confirm(question)
        if question.kind is QuestionKind.SELECT:
            return self._read_select(question)
        if question.kind is QuestionKind.PASSWORD:
            raw = self.password_func(f"{question.message}: ")
        else:
            suffix = f" [{question.default}]" if question.default not in (None, "") else ""
            raw = self.input_func(f"{question.message}{suffix}: ")
        if raw == "" and question.default is not None:
            return question.default
        return raw

    def _read_confirm(self, question: Question) -> bool:
        suffix = " (Y/n)" if question.default else " (y/N)"
        raw = self.input_func(f"{question.message}{suffix} ").strip().lower()
        if raw == "":
            return bool(question.default)
        if raw in _YES:
            return True
        if raw in _NO:
            return False
        raise _Retry()

    def _read_select(self, question: Question) -> Any:
        hint = f" ({self.select_hint})" if self.select_hint else ""
        self._write(f"{question.message}{hint}:")
        if not question.choices:
            return question.default
        for index, choice in enumerate(question.choices, start=1):
            self._write(f"  {index}) {choice.name}")

        raw = self.input_func("> ").strip()
        if raw == "":
            return question.default

        picks = [p.strip() for p in raw.split(",") if p.strip()] if question.allow_multiple else [raw]
        values: List[Any] = []
        for pick in picks:
            if not pick.isdigit() or not 1 <= int(pick) <= len(question.choices):
                raise _Retry()
            values.append(question.choices[int(pick) - 1].value)
        return values if question.allow_multiple else values[0]


__all__ = ["PromptExecutor", "ConsolePrompter"]
