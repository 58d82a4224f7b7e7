from __future__ import annotations

from typing import Any, Dict, Mapping


class SchemaFormError(Exception):
    """Base exception for schemaform."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class SchemaError(SchemaFormError, ValueError):
    """Raised when a form schema document cannot be interpreted."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        SchemaFormError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class UnknownPropertyTypeError(SchemaError):
    """Raised when a property declares a type no question kind handles."""

    def __init__(self, key: str, type_name: Any) -> None:
        super().__init__(
            f"Property '{key}' has unsupported type {type_name!r}",
            context={"key": key, "type": type_name},
        )


class AnswerValidationError(SchemaFormError, ValueError):
    """Raised when a pre-supplied answer is rejected by its validator."""

    def __init__(self, key: str, value: Any, message: str) -> None:
        SchemaFormError.__init__(
            self,
            f"{key}: {message}",
            context={"key": key, "value": value},
        )
        ValueError.__init__(self, f"{key}: {message}")


class ConfigError(SchemaFormError):
    """Raised when configuration cannot be loaded or fails validation."""


__all__ = [
    "SchemaFormError",
    "SchemaError",
    "UnknownPropertyTypeError",
    "AnswerValidationError",
    "ConfigError",
]
