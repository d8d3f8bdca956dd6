# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Regex based HTML minification."""

from __future__ import annotations

import re

# Applied in order.
_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r'<!--.*?-->', re.DOTALL), ''),   # comments
    (re.compile(r'(\s)+'), r'\1'),                # whitespace runs -> one char
    (re.compile(r'>[^\S ]+'), '>'),               # after a tag, except one space
    (re.compile(r'[^\S ]+<'), '<'),               # before a tag, except one space
    (re.compile(r'<\s+'), '<'),                   # inside tag start
    (re.compile(r'\s+>'), '>'),                   # inside tag end
)


def minify(html: str) -> str:
    """Remove comments and unnecessary whitespace from an HTML string.

    Example:
        >>> minify('<div >\\n    <label>   Text:</label>\\n</div \\n>')
        '<div> <label> Text:</label></div>'
    """
    for pattern, replacement in _PATTERNS:
        html = pattern.sub(replacement, html)
    return html.strip()
