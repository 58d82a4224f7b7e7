"""Load form schemas and answer files from disk (YAML or JSON)."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from schemaform.core.exceptions import SchemaError
from schemaform.core.schemas import SchemaValidationError, validate_payload
from schemaform.core.utils.io import read_yaml

from .models import FormSchema


def _read_mapping(path: Path, what: str) -> Dict[str, Any]:
    try:
        data = read_yaml(path, default=None, raise_on_error=True)
    except FileNotFoundError as exc:
        raise SchemaError(f"{what} not found: {path}", context={"path": str(path)}) from exc
    except Exception as exc:
        raise SchemaError(f"Cannot parse {what.lower()} {path}: {exc}", context={"path": str(path)}) from exc
    if not isinstance(data, dict):
        raise SchemaError(f"{what} {path} must contain a mapping", context={"path": str(path)})
    return data


def load_form_schema(path: Path) -> FormSchema:
    """Read a schema document with a top-level ``properties`` mapping.

    Raises:
        SchemaError: If the file is missing, unparsable, or not shaped like a form.
    """
    document = _read_mapping(Path(path), "Schema")
    try:
        validate_payload(document, "form.schema.yaml")
    except SchemaValidationError as exc:
        raise SchemaError(str(exc), context={"path": str(path)}) from exc
    return FormSchema.from_dict(document)


def load_answers(path: Path) -> Dict[str, Any]:
    """Read a mapping of pre-supplied answers."""
    return _read_mapping(Path(path), "Answers file")


__all__ = ["load_form_schema", "load_answers"]
