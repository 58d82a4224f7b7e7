"""Choice-list resolution for select questions, including cascading lists."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .models import Choice, ChoiceItem, FormSchema, PropertyDefinition

logger = logging.getLogger(__name__)

DETAIL_PREFIX = "\n\n    "
LINK_PREFIX = "\n\n    - "


def implicit_dependency_value(dependency: PropertyDefinition) -> Any:
    """Value assumed for a dependency nobody has answered: its first item."""
    if not dependency.items:
        return None
    return dependency.items[0].value


def dependency_value(dependency: PropertyDefinition, params: Dict[str, Any]) -> Any:
    answered = params.get(dependency.key)
    if answered is not None:
        return answered
    return implicit_dependency_value(dependency)


def _is_forward_reference(schema: FormSchema, key: str, dependency_key: str) -> bool:
    order = list(schema.properties)
    return order.index(dependency_key) >= order.index(key)


def resolve_items(key: str, schema: FormSchema, params: Dict[str, Any]) -> List[ChoiceItem]:
    """Return the selectable items for property ``key``.

    A property without ``dependence`` offers its own list. A dependent property
    offers the ``subList[ref]`` of the dependency item matching the dependency's
    current value, but only when ``depLevel`` is positive. Every miss (unknown
    or later-declared dependency, no matching item, no such sub-list) yields an
    empty list.
    """
    prop = schema.properties[key]
    if not prop.dependence:
        return list(prop.items)
    if prop.dep_level <= 0:
        return []

    dependency = schema.get(prop.dependence)
    if dependency is None or _is_forward_reference(schema, key, prop.dependence):
        logger.debug("%s depends on unresolvable property %s", key, prop.dependence)
        return []

    value = dependency_value(dependency, params)
    for item in dependency.items:
        if item.value == value:
            if prop.ref is None:
                return []
            return list(item.sub_list.get(prop.ref) or [])

    logger.debug("%s: no %s item matches %r", key, prop.dependence, value)
    return []


def _link_lines(item: ChoiceItem) -> str:
    if item.url:
        return LINK_PREFIX + item.url
    if item.imgs:
        return "".join(
            LINK_PREFIX + img.src + (f" - {img.alt}" if img.alt else "") for img in item.imgs
        )
    if item.img:
        return LINK_PREFIX + item.img
    return ""


def display_entry(item: ChoiceItem) -> Choice:
    """Build the display entry shown for one item."""
    text = item.name
    if item.desc:
        text += DETAIL_PREFIX + item.desc
    text += _link_lines(item)
    return Choice(value=item.value, name=text, short=item.value)


def resolve_choices(key: str, schema: FormSchema, params: Dict[str, Any]) -> List[Choice]:
    return [display_entry(item) for item in resolve_items(key, schema, params)]


def first_value(choices: List[Choice]) -> Optional[Any]:
    return choices[0].value if choices else None


__all__ = [
    "implicit_dependency_value",
    "dependency_value",
    "resolve_items",
    "display_entry",
    "resolve_choices",
    "first_value",
]
