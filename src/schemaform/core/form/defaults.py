"""Default value and validator resolution for input questions."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, NamedTuple, Optional

from schemaform.core.config import FormConfig
from schemaform.core.exceptions import SchemaError

from .identity import IdentityProbe
from .models import PropertyDefinition, Validator
from .templates import render_message
from .validation import is_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalFileSystem:
    """Path helpers bound to a working directory."""

    cwd: Path = field(default_factory=Path.cwd)

    def resolve(self, path: Any) -> str:
        """Resolve ``path`` against the working directory (absolute paths win)."""
        return os.path.normpath(os.path.join(str(self.cwd), str(path or "")))

    def exists(self, path: str) -> bool:
        return os.path.exists(path)


class Resolution(NamedTuple):
    default: Any
    validate: Validator


def accept_all(_value: Any) -> bool:
    return True


class DefaultResolver:
    """Compute the effective default and validator for one property.

    Rules, applied in order (a later validator replaces an earlier one):
    - baseline: the literal ``default``; numbers must parse, other input is accepted
    - identity keys: the local identity fills in a missing default
    - path keys: the default is resolved against the working directory and
      answers must name an existing path
    - ``regExp``: answers must match the pattern
    """

    def __init__(
        self,
        config: FormConfig,
        probe: IdentityProbe,
        filesystem: Optional[LocalFileSystem] = None,
    ) -> None:
        self.config = config
        self.probe = probe
        self.filesystem = filesystem or LocalFileSystem()

    def _invalid_message(self, prop: PropertyDefinition) -> str:
        return prop.invalidate or render_message(self.config.messages, "invalid_input")

    def _number_validator(self) -> Validator:
        message = render_message(self.config.messages, "not_a_number")

        def _validate(value: Any) -> Any:
            return True if is_number(value) else message

        return _validate

    def _path_validator(self, prop: PropertyDefinition) -> Validator:
        message = self._invalid_message(prop)
        fs = self.filesystem

        def _validate(value: Any) -> Any:
            return True if fs.exists(fs.resolve(value)) else message

        return _validate

    def _pattern_validator(self, prop: PropertyDefinition) -> Validator:
        try:
            pattern = re.compile(str(prop.reg_exp))
        except re.error as exc:
            raise SchemaError(
                f"Property '{prop.key}' has an invalid regExp: {exc}",
                context={"key": prop.key, "regExp": prop.reg_exp},
            ) from exc
        message = self._invalid_message(prop)

        def _validate(value: Any) -> Any:
            text = "" if value is None else str(value)
            return True if pattern.search(text) else message

        return _validate

    async def resolve(self, prop: PropertyDefinition, params: Dict[str, Any]) -> Resolution:
        """Resolve ``prop`` given the answers collected so far in ``params``."""
        default = prop.default
        validate: Validator = self._number_validator() if prop.type == "number" else accept_all

        identity_field = self.config.identity_keys.get(prop.key)
        if identity_field and default is None:
            identity = await self.probe.lookup_identity()
            default = identity.get(identity_field)
            logger.debug("identity default for %s: %r", prop.key, default)

        if prop.key in self.config.path_keys:
            default = self.filesystem.resolve(default)
            validate = self._path_validator(prop)

        if prop.reg_exp:
            validate = self._pattern_validator(prop)

        return Resolution(default=default, validate=validate)


__all__ = ["LocalFileSystem", "Resolution", "accept_all", "DefaultResolver"]
