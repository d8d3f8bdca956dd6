# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HTML validation through a lenient HTML5 parser.

The builder only needs one capability from a validator: ``validate(html)``
raising on malformed input. ``JustHtmlValidator`` implements it with
justhtml's error collection; any object with a compatible ``validate``
method can be passed to ``HtmlBuilder(strict=True, validator=...)``.

Example:
    >>> validate('<p>fine</p>')
    >>> validate('<img src="x.png"></img>')
    Traceback (most recent call last):
        ...
    genro_html.exceptions.InvalidHtmlError: HTML is invalid! ...
"""

from __future__ import annotations

import logging
from typing import Iterable, NamedTuple, Protocol

from justhtml import JustHTML

from .exceptions import InvalidHtmlError

logger = logging.getLogger(__name__)

# Fragments produced by a builder rarely start with a doctype.
MISSING_DOCTYPE_CODES: frozenset[str] = frozenset({
    'expected-doctype-but-got-start-tag',
    'expected-doctype-but-got-end-tag',
    'expected-doctype-but-got-chars',
    'expected-doctype-but-got-eof',
})


class Problem(NamedTuple):
    """A single problem reported by the parser."""

    severity: str
    code: str
    message: str
    line: int | None = None
    column: int | None = None


class HtmlValidator(Protocol):
    """Anything able to reject malformed HTML."""

    def validate(self, html: str) -> None:
        ...


def _severity(code: str) -> str:
    return 'warning' if 'doctype' in code else 'error'


class JustHtmlValidator:
    """Validator backed by justhtml's parse error collection.

    Args:
        ignored_codes: Parser error codes that never fail validation.
            Defaults to the missing-doctype codes.
    """

    def __init__(self, ignored_codes: Iterable[str] = MISSING_DOCTYPE_CODES) -> None:
        self.ignored_codes = frozenset(ignored_codes)

    def problems(self, html: str) -> list[Problem]:
        """Parse html and return the problems that are not ignored."""
        # an empty document still has to go through the parser
        html = html or '<br>'

        doc = JustHTML(html, collect_errors=True)
        problems = [
            Problem(
                _severity(error.code),
                error.code,
                getattr(error, 'message', None) or error.code,
                error.line,
                error.column,
            )
            for error in doc.errors
            if error.code not in self.ignored_codes
        ]
        logger.debug(
            "parsed %d chars: %d problem(s), %d ignored",
            len(html), len(problems), len(doc.errors) - len(problems),
        )
        return problems

    def validate(self, html: str) -> None:
        """Raise InvalidHtmlError if html has any problem not ignored."""
        problems = self.problems(html)
        if problems:
            raise InvalidHtmlError(problems)


def validate(html: str) -> None:
    """Validate html with the default JustHtmlValidator."""
    JustHtmlValidator().validate(html)
