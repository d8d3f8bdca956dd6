# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlBuilder exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .validation import Problem


class HtmlBuilderError(Exception):
    """Base exception for HtmlBuilder errors."""

    pass


class ValidationError(HtmlBuilderError, ValueError):
    """Raised when a required string argument is empty or blank."""

    pass


class StateError(HtmlBuilderError, RuntimeError):
    """Raised on structural misuse of the nesting stack.

    Attributes:
        tags: Names of the tags still open when the error was raised.
    """

    def __init__(self, message: str, tags: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.tags = tuple(tags)


class InvocationError(HtmlBuilderError, AttributeError):
    """Raised when a tag method is called with an unknown tag name."""

    def __init__(self, message: str, name: str = '') -> None:
        super().__init__(message)
        self.name = name


class InvalidHtmlError(HtmlBuilderError):
    """Raised by strict mode when the rendered HTML does not parse cleanly.

    Attributes:
        problems: All reported problems, in parser order.
        first: The first reported problem.
    """

    def __init__(self, problems: Sequence[Problem]) -> None:
        self.problems = list(problems)
        self.first = self.problems[0]
        super().__init__(
            f"HTML is invalid! Found {self.count} problem(s). "
            f"First: [severity:{self.first.severity}/code:{self.first.code}] "
            f"{self.first.message}"
        )

    @property
    def count(self) -> int:
        return len(self.problems)

    @property
    def severity(self) -> str:
        return self.first.severity

    @property
    def code(self) -> str:
        return self.first.code
