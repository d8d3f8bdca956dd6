# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-HTML - Fluent builder for writing HTML from Python.

A small library that emits HTML text through a chainable API, with
nested open/close tags, conditional emission and inline callbacks.
"""

__version__ = "0.1.0"

from .base import BuilderBase
from .builder import HtmlBuilder, render_element
from .conditions import ConditionEvaluator, Depth
from .decorators import hybridmethod
from .exceptions import (
    HtmlBuilderError,
    InvalidHtmlError,
    InvocationError,
    StateError,
    ValidationError,
)
from .minify import minify
from .tags import TAGS, TagDefinition, get_tag
from .validation import HtmlValidator, JustHtmlValidator, Problem, validate

__all__ = [
    # Builder classes
    "BuilderBase",
    "HtmlBuilder",
    "render_element",
    "hybridmethod",
    # Conditions
    "ConditionEvaluator",
    "Depth",
    # Tag registry
    "TAGS",
    "TagDefinition",
    "get_tag",
    # Collaborators
    "HtmlValidator",
    "JustHtmlValidator",
    "Problem",
    "validate",
    "minify",
    # Exceptions
    "HtmlBuilderError",
    "ValidationError",
    "StateError",
    "InvocationError",
    "InvalidHtmlError",
]
