# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Stringification of tag names, content and attributes."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any, Union

Attributes = Union[Mapping[Any, Any], Iterable[Any], None]


def normalize_tag_name(name: str) -> str:
    """Return a tag name stripped and lowercased."""
    return name.strip().lower()


def stringify_value(value: Any) -> str:
    """Convert content or an attribute value to text.

    Strings pass through, numbers use str(); anything else (dicts, lists,
    booleans, objects) is written as compact JSON.

    Examples:
        >>> stringify_value(42)
        '42'
        >>> stringify_value({'a': [1, 2]})
        '{"a":[1,2]}'
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return json.dumps(value, separators=(',', ':'), ensure_ascii=False, default=str)


def keyword_to_attribute(name: str) -> str:
    """Map a Python keyword argument to an attribute name.

    One trailing underscore is dropped so reserved words can be used,
    remaining underscores become hyphens.

    Examples:
        >>> keyword_to_attribute('class_')
        'class'
        >>> keyword_to_attribute('data_index')
        'data-index'
    """
    if name.endswith('_') and len(name) > 1:
        name = name[:-1]
    return name.replace('_', '-')


def collect_attributes(
    attributes: Attributes = None, **attrs: Any
) -> list[tuple[Any, Any]]:
    """Merge positional attributes and keyword attributes into ordered pairs.

    Args:
        attributes: A mapping (integer keys are positional bare attributes),
            or an iterable mixing bare tokens and (key, value) pairs.
        **attrs: Keyword attributes, applied after ``attributes``.

    Returns:
        List of (key, value) pairs. Bare tokens from an iterable get their
        index as key.
    """
    items: list[tuple[Any, Any]] = []

    if attributes is None:
        pass
    elif isinstance(attributes, Mapping):
        items.extend(attributes.items())
    elif isinstance(attributes, str):
        items.append((0, attributes))
    else:
        for index, entry in enumerate(attributes):
            if isinstance(entry, tuple) and len(entry) == 2:
                items.append(entry)
            else:
                items.append((index, entry))

    for name, value in attrs.items():
        items.append((keyword_to_attribute(name), value))

    return items


def _is_named(key: Any) -> bool:
    return isinstance(key, str) and not key.isdigit()


def _is_blank(key: Any) -> bool:
    return isinstance(key, str) and not key.strip()


def stringify_attributes(attributes: Attributes = None, **attrs: Any) -> str:
    """Build the attribute part of a tag, each entry with a leading space.

    Rules, per entry in insertion order:
        - value ``False`` or blank string key: skipped
        - named key with a value other than None/True: ``key="value"``
        - named key with None or True: bare ``key``
        - positional key: bare value (or the key if the value is empty)

    Examples:
        >>> stringify_attributes({'type': 'text', 'required': None, 'disabled': False})
        ' type="text" required'
        >>> stringify_attributes(['hidden', ('id', 'x')])
        ' hidden id="x"'
    """
    parts: list[str] = []

    for key, value in collect_attributes(attributes, **attrs):
        if value is False or _is_blank(key):
            continue

        if _is_named(key) and value is not None and value is not True:
            text = stringify_value(value).replace('"', '&quot;')
            parts.append(f' {key}="{text}"')
        elif _is_named(key):
            parts.append(f' {key}')
        elif value is None or value is True or value == '':
            parts.append(f' {key}')
        else:
            parts.append(f' {stringify_value(value)}')

    return ''.join(parts)
