"""Message template rendering for question prompts."""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

from jinja2 import Environment, Template, TemplateError

from schemaform.core.exceptions import ConfigError

_ENV = Environment(autoescape=False)


@lru_cache(maxsize=128)
def _compile(source: str) -> Template:
    return _ENV.from_string(source)


def render_message(messages: Mapping[str, str], template_name: str, **context: Any) -> str:
    """Render the ``template_name`` entry of a message catalog.

    Raises:
        ConfigError: If the catalog has no such template or it fails to render.
    """
    source = messages.get(template_name)
    if source is None:
        raise ConfigError(
            f"Message template '{template_name}' missing from catalog",
            context={"template": template_name},
        )
    try:
        return _compile(source).render(**context)
    except TemplateError as exc:
        raise ConfigError(
            f"Message template '{template_name}' failed to render: {exc}",
            context={"template": template_name},
        ) from exc


__all__ = ["render_message"]
