"""
Template substitution for spec values.

Replaces ``{{name}}`` and ``{{name.field}}`` placeholders inside arbitrarily
nested strings, lists and mappings using a flat property scope.

Placeholders whose name is absent from the scope are left verbatim so a
value can be substituted in stages (component props first, ``$each`` items
later). ``{{name.field}}`` yields an empty string when ``name`` is not a
mapping or lacks ``field``.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Mapping
from typing import Any

from .ir.props import format_number

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)(?:\.(\w+))?\}\}", re.ASCII)

MissingHook = Callable[[str, str | None], str | None]


def stringify(value: Any) -> str:
    """
    Render a scope value as placeholder text.

    Examples:
        >>> stringify(True)
        'true'
        >>> stringify(3.0)
        '3'
        >>> stringify({"a": 1})
        '{"a":1}'
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def substitute(
    value: Any,
    scope: Mapping[str, Any],
    missing: MissingHook | None = None,
) -> Any:
    """
    Return a structurally identical copy of ``value`` with placeholders replaced.

    Args:
        value: String, list, mapping or scalar
        scope: Flat property scope
        missing: Optional hook called with ``(name, field)`` for placeholders
            whose name is not in scope; returning ``None`` keeps the
            placeholder verbatim

    Returns:
        A new value; the input is never mutated

    Examples:
        >>> substitute({"Text": {"content": "{{label}}"}}, {"label": "Save"})
        {'Text': {'content': 'Save'}}
        >>> substitute("{{item.label}} / {{other}}", {"item": {"label": "A"}})
        'A / {{other}}'
    """
    if isinstance(value, str):
        return _substitute_string(value, scope, missing)
    if isinstance(value, list):
        return [substitute(item, scope, missing) for item in value]
    if isinstance(value, Mapping):
        return {key: substitute(item, scope, missing) for key, item in value.items()}
    return value


def _substitute_string(text: str, scope: Mapping[str, Any], missing: MissingHook | None) -> str:
    if "{{" not in text:
        return text

    def replace(match: re.Match[str]) -> str:
        name, field = match.group(1), match.group(2)
        if name not in scope:
            if missing is not None:
                replacement = missing(name, field)
                if replacement is not None:
                    return replacement
            return match.group(0)

        value = scope[name]
        if field is None:
            return stringify(value)
        if isinstance(value, Mapping) and field in value:
            return stringify(value[field])
        return ""

    return PLACEHOLDER_PATTERN.sub(replace, text)


def find_placeholders(value: Any) -> set[str]:
    """Collect the names of all placeholders appearing anywhere in ``value``."""
    found: set[str] = set()
    if isinstance(value, str):
        found.update(match.group(1) for match in PLACEHOLDER_PATTERN.finditer(value))
    elif isinstance(value, list):
        for item in value:
            found |= find_placeholders(item)
    elif isinstance(value, Mapping):
        for item in value.values():
            found |= find_placeholders(item)
    return found


__all__ = ["PLACEHOLDER_PATTERN", "MissingHook", "stringify", "substitute", "find_placeholders"]
