"""Typed records for form schemas and the questions synthesized from them."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from schemaform.core.exceptions import SchemaError

# A validator returns True when the answer is accepted, else the message to show.
Validator = Callable[[Any], Union[bool, str]]

INPUT_TYPES = ("string", "number", "password")
CONFIRM_TYPES = ("boolean",)
SELECT_TYPES = ("list",)

_KNOWN_ATTRIBUTES = {
    "type",
    "name",
    "default",
    "regExp",
    "invalidate",
    "disable",
    "list",
    "dependence",
    "depLevel",
    "ref",
    "checkbox",
}


def _optional_text(value: Any) -> Optional[str]:
    # YAML hands back floats and ints for unquoted values like ``1.0``.
    if value is None or value == "":
        return None
    return str(value)


class QuestionKind(str, Enum):
    INPUT = "input"
    PASSWORD = "password"
    CONFIRM = "confirm"
    SELECT = "select"


@dataclass(frozen=True)
class ImageLink:
    src: str
    alt: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "ImageLink":
        if isinstance(raw, Mapping):
            alt = raw.get("alt")
            return cls(src=str(raw.get("src") or ""), alt=str(alt) if alt else None)
        return cls(src=str(raw))


@dataclass(frozen=True)
class ChoiceItem:
    """One selectable entry of a ``list`` property."""

    value: Any
    name: str
    desc: Optional[str] = None
    url: Optional[str] = None
    img: Optional[str] = None
    imgs: List[ImageLink] = field(default_factory=list)
    sub_list: Dict[str, List["ChoiceItem"]] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "ChoiceItem":
        if not isinstance(raw, Mapping):
            raise SchemaError(f"Choice item must be a mapping, got {type(raw).__name__}")
        value = raw.get("value")
        sub_lists: Dict[str, List[ChoiceItem]] = {}
        for ref, items in (raw.get("subList") or {}).items():
            sub_lists[str(ref)] = [cls.from_raw(item) for item in items or []]
        return cls(
            value=value,
            name=str(raw.get("name", value)),
            desc=_optional_text(raw.get("desc")),
            url=_optional_text(raw.get("url")),
            img=_optional_text(raw.get("img")),
            imgs=[ImageLink.from_raw(i) for i in raw.get("imgs") or []],
            sub_list=sub_lists,
        )


@dataclass(frozen=True)
class PropertyDefinition:
    """One schema entry describing a single question.

    Attribute names are snake_case versions of the schema's camelCase keys;
    ``items`` holds the schema's ``list`` attribute.
    """

    key: str
    type: Any
    name: str
    default: Any = None
    reg_exp: Optional[str] = None
    invalidate: Optional[str] = None
    disable: bool = False
    items: List[ChoiceItem] = field(default_factory=list)
    dependence: Optional[str] = None
    dep_level: int = 0
    ref: Optional[str] = None
    checkbox: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, key: str, raw: Mapping[str, Any]) -> "PropertyDefinition":
        if not isinstance(raw, Mapping):
            raise SchemaError(
                f"Property '{key}' must be a mapping, got {type(raw).__name__}",
                context={"key": key},
            )
        try:
            dep_level = int(raw.get("depLevel") or 0)
        except (TypeError, ValueError):
            dep_level = 0
        return cls(
            key=key,
            type=raw.get("type"),
            name=str(raw.get("name") or key),
            default=raw.get("default"),
            reg_exp=raw.get("regExp") or None,
            invalidate=raw.get("invalidate") or None,
            disable=bool(raw.get("disable")),
            items=[ChoiceItem.from_raw(item) for item in raw.get("list") or []],
            dependence=raw.get("dependence") or None,
            dep_level=dep_level,
            ref=raw.get("ref") or None,
            checkbox=bool(raw.get("checkbox")),
            extra={k: v for k, v in raw.items() if k not in _KNOWN_ATTRIBUTES},
        )


@dataclass(frozen=True)
class FormSchema:
    """Ordered declaration of the questions to ask."""

    properties: Dict[str, PropertyDefinition]

    @classmethod
    def from_dict(cls, document: Mapping[str, Any]) -> "FormSchema":
        """Build a schema from ``{"properties": {...}}`` or a bare property mapping."""
        if not isinstance(document, Mapping):
            raise SchemaError(f"Schema must be a mapping, got {type(document).__name__}")
        raw_props = document.get("properties", document)
        if not isinstance(raw_props, Mapping):
            raise SchemaError("Schema 'properties' must be a mapping")
        return cls(
            properties={str(k): PropertyDefinition.from_raw(str(k), v) for k, v in raw_props.items()}
        )

    def __iter__(self):
        return iter(self.properties.values())

    def __len__(self) -> int:
        return len(self.properties)

    def get(self, key: Optional[str]) -> Optional[PropertyDefinition]:
        if key is None:
            return None
        return self.properties.get(key)


@dataclass(frozen=True)
class Choice:
    """Display entry handed to the prompt executor."""

    value: Any
    name: str
    short: Any

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "name": self.name, "short": self.short}


@dataclass(frozen=True)
class Question:
    """Executor-agnostic instruction to ask one question."""

    kind: QuestionKind
    name: str
    message: str
    default: Any = None
    choices: List[Choice] = field(default_factory=list)
    validate: Optional[Validator] = None
    allow_multiple: bool = False
    page_size: Optional[int] = None

    def check(self, answer: Any) -> Union[bool, str]:
        """Run the validator; questions without one accept everything."""
        if self.validate is None:
            return True
        return self.validate(answer)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.kind.value,
            "name": self.name,
            "message": self.message,
            "default": self.default,
        }
        if self.kind is QuestionKind.SELECT:
            data["choices"] = [c.to_dict() for c in self.choices]
            data["allowMultiple"] = self.allow_multiple
            data["pageSize"] = self.page_size
        return data


@dataclass(frozen=True)
class Identity:
    """Local committer identity; fields are None when unavailable."""

    author: Optional[str] = None
    email: Optional[str] = None

    def get(self, field_name: str) -> Optional[str]:
        if field_name == "author":
            return self.author
        if field_name == "email":
            return self.email
        return None


__all__ = [
    "Validator",
    "INPUT_TYPES",
    "CONFIRM_TYPES",
    "SELECT_TYPES",
    "QuestionKind",
    "ImageLink",
    "ChoiceItem",
    "PropertyDefinition",
    "FormSchema",
    "Choice",
    "Question",
    "Identity",
]
