# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tag registry - known HTML tag names and their properties.

The registry is a fixed, read-only table keyed by lowercase tag name.
It drives the tag methods generated on ``HtmlBuilder`` and decides which
of them are void (always self-closing, no content argument).

Example:
    >>> from genro_html.tags import get_tag, is_void
    >>> get_tag('DIV')
    TagDefinition(name='div', void=False, deprecated=False)
    >>> is_void('br')
    True

References:
    - WHATWG HTML Standard: https://html.spec.whatwg.org/
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class TagDefinition:
    """Properties of a known HTML tag.

    Attributes:
        name: Lowercase tag name.
        void: True for void elements (no content, no closing tag).
        deprecated: True for tags not supported in HTML5.
    """

    name: str
    void: bool = False
    deprecated: bool = False


def _tag(name: str, void: bool = False, deprecated: bool = False) -> TagDefinition:
    return TagDefinition(name, void, deprecated)


_DEFINITIONS = (
    _tag('a',          void=False, deprecated=False),
    _tag('abbr',       void=False, deprecated=False),
    _tag('acronym',    void=False, deprecated=True),
    _tag('address',    void=False, deprecated=False),
    _tag('applet',     void=False, deprecated=True),
    _tag('area',       void=True,  deprecated=False),
    _tag('article',    void=False, deprecated=False),
    _tag('aside',      void=False, deprecated=False),
    _tag('audio',      void=False, deprecated=False),
    _tag('b',          void=False, deprecated=False),
    _tag('base',       void=True,  deprecated=False),
    _tag('basefont',   void=False, deprecated=True),
    _tag('bdi',        void=False, deprecated=False),
    _tag('bdo',        void=False, deprecated=False),
    _tag('big',        void=False, deprecated=True),
    _tag('blockquote', void=False, deprecated=False),
    _tag('body',       void=False, deprecated=False),
    _tag('br',         void=True,  deprecated=False),
    _tag('button',     void=False, deprecated=False),
    _tag('canvas',     void=False, deprecated=False),
    _tag('caption',    void=False, deprecated=False),
    _tag('center',     void=False, deprecated=True),
    _tag('cite',       void=False, deprecated=False),
    _tag('code',       void=False, deprecated=False),
    _tag('col',        void=True,  deprecated=False),
    _tag('colgroup',   void=False, deprecated=False),
    _tag('data',       void=False, deprecated=False),
    _tag('datalist',   void=False, deprecated=False),
    _tag('dd',         void=False, deprecated=False),
    _tag('del',        void=False, deprecated=False),
    _tag('details',    void=False, deprecated=False),
    _tag('dfn',        void=False, deprecated=False),
    _tag('dialog',     void=False, deprecated=False),
    _tag('dir',        void=False, deprecated=True),
    _tag('div',        void=False, deprecated=False),
    _tag('dl',         void=False, deprecated=False),
    _tag('dt',         void=False, deprecated=False),
    _tag('em',         void=False, deprecated=False),
    _tag('embed',      void=True,  deprecated=False),
    _tag('fieldset',   void=False, deprecated=False),
    _tag('figcaption', void=False, deprecated=False),
    _tag('figure',     void=False, deprecated=False),
    _tag('font',       void=False, deprecated=True),
    _tag('footer',     void=False, deprecated=False),
    _tag('form',       void=False, deprecated=False),
    _tag('frame',      void=False, deprecated=True),
    _tag('frameset',   void=False, deprecated=True),
    _tag('h1',         void=False, deprecated=False),
    _tag('h2',         void=False, deprecated=False),
    _tag('h3',         void=False, deprecated=False),
    _tag('h4',         void=False, deprecated=False),
    _tag('h5',         void=False, deprecated=False),
    _tag('h6',         void=False, deprecated=False),
    _tag('head',       void=False, deprecated=False),
    _tag('header',     void=False, deprecated=False),
    _tag('hr',         void=True,  deprecated=False),
    _tag('html',       void=False, deprecated=False),
    _tag('i',          void=False, deprecated=False),
    _tag('iframe',     void=False, deprecated=False),
    _tag('img',        void=True,  deprecated=False),
    _tag('input',      void=True,  deprecated=False),
    _tag('ins',        void=False, deprecated=False),
    _tag('kbd',        void=False, deprecated=False),
    _tag('label',      void=False, deprecated=False),
    _tag('legend',     void=False, deprecated=False),
    _tag('li',         void=False, deprecated=False),
    _tag('link',       void=True,  deprecated=False),
    _tag('main',       void=False, deprecated=False),
    _tag('map',        void=False, deprecated=False),
    _tag('mark',       void=False, deprecated=False),
    _tag('meta',       void=True,  deprecated=False),
    _tag('meter',      void=False, deprecated=False),
    _tag('nav',        void=False, deprecated=False),
    _tag('noframes',   void=False, deprecated=True),
    _tag('noscript',   void=False, deprecated=False),
    _tag('object',     void=False, deprecated=False),
    _tag('ol',         void=False, deprecated=False),
    _tag('optgroup',   void=False, deprecated=False),
    _tag('option',     void=False, deprecated=False),
    _tag('output',     void=False, deprecated=False),
    _tag('p',          void=False, deprecated=False),
    _tag('param',      void=True,  deprecated=False),
    _tag('picture',    void=False, deprecated=False),
    _tag('pre',        void=False, deprecated=False),
    _tag('progress',   void=False, deprecated=False),
    _tag('q',          void=False, deprecated=False),
    _tag('rp',         void=False, deprecated=False),
    _tag('rt',         void=False, deprecated=False),
    _tag('ruby',       void=False, deprecated=False),
    _tag('s',          void=False, deprecated=False),
    _tag('samp',       void=False, deprecated=False),
    _tag('script',     void=False, deprecated=False),
    _tag('section',    void=False, deprecated=False),
    _tag('select',     void=False, deprecated=False),
    _tag('small',      void=False, deprecated=False),
    _tag('source',     void=True,  deprecated=False),
    _tag('span',       void=False, deprecated=False),
    _tag('strike',     void=False, deprecated=True),
    _tag('strong',     void=False, deprecated=False),
    _tag('style',      void=False, deprecated=False),
    _tag('sub',        void=False, deprecated=False),
    _tag('summary',    void=False, deprecated=False),
    _tag('sup',        void=False, deprecated=False),
    _tag('svg',        void=False, deprecated=False),
    _tag('table',      void=False, deprecated=False),
    _tag('tbody',      void=False, deprecated=False),
    _tag('td',         void=False, deprecated=False),
    _tag('template',   void=False, deprecated=False),
    _tag('textarea',   void=False, deprecated=False),
    _tag('tfoot',      void=False, deprecated=False),
    _tag('th',         void=False, deprecated=False),
    _tag('thead',      void=False, deprecated=False),
    _tag('time',       void=False, deprecated=False),
    _tag('title',      void=False, deprecated=False),
    _tag('tr',         void=False, deprecated=False),
    _tag('track',      void=True,  deprecated=False),
    _tag('tt',         void=False, deprecated=True),
    _tag('u',          void=False, deprecated=False),
    _tag('ul',         void=False, deprecated=False),
    _tag('var',        void=False, deprecated=False),
    _tag('video',      void=False, deprecated=False),
    _tag('wbr',        void=True,  deprecated=False),
)

TAGS: Mapping[str, TagDefinition] = MappingProxyType(
    {definition.name: definition for definition in _DEFINITIONS}
)

ALL_TAGS: frozenset[str] = frozenset(TAGS)
VOID_ELEMENTS: frozenset[str] = frozenset(t.name for t in _DEFINITIONS if t.void)
DEPRECATED_ELEMENTS: frozenset[str] = frozenset(
    t.name for t in _DEFINITIONS if t.deprecated
)


def get_tag(name: str) -> TagDefinition | None:
    """Return the definition for a tag name, or None if unknown.

    Lookup is case-insensitive and ignores surrounding whitespace.
    """
    return TAGS.get(name.strip().lower())


def is_void(name: str) -> bool:
    """True if name is a known void element."""
    definition = get_tag(name)
    return definition is not None and definition.void


def is_deprecated(name: str) -> bool:
    """True if name is a known tag not supported in HTML5."""
    definition = get_tag(name)
    return definition is not None and definition.deprecated
