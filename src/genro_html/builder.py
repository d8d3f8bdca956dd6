# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlBuilder - fluent interface for writing HTML.

Every call appends rendered text to a buffer and returns the builder, so a
whole document can be written as one chain. ``open()``/``close()`` nest
elements and drive indentation, ``condition()`` makes the next call (or a
whole opened element) conditional, ``function()`` runs arbitrary Python
code in the middle of the chain, and ``render()`` returns the result.

Example:
    Writing a form::

        from genro_html import HtmlBuilder

        html = (
            HtmlBuilder()
            .element('h1', 'HTML Forms', {'class': 'title'})
            .open('form', method='POST')
                .h2('Example', class_='subtitle')
                .p('This is an example form.')
                .br()
                .if_(user is not None).div(f'Hello {user}')
                .open('fieldset')
                    .legend('Form 1', style='color: #333;')
                    .label('Message: ', class_='text')
                    .input({'type': 'text', 'required': None})
                    .entity('nbsp')
                    .input(type='submit', value='Submit')
                .close()
                .condition(errors)
                .open('ul', class_='errors')
                    .do(lambda b: [b.li(error) for error in errors])
                .close()
            .close()
            .render()
        )
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from .attributes import Attributes, normalize_tag_name, stringify_attributes, stringify_value
from .base import BuilderBase
from .conditions import ConditionEvaluator, Depth
from .decorators import hybridmethod
from .exceptions import StateError, ValidationError
from .minify import minify as _minify
from .tags import get_tag
from .validation import HtmlValidator, JustHtmlValidator
from .validation import validate as _validate

logger = logging.getLogger(__name__)


def _require_text(value: str, what: str) -> str:
    """Return value stripped, raising ValidationError if nothing is left."""
    text = value.strip()
    if not text:
        raise ValidationError(f"{what} cannot be an empty string")
    return text


class HtmlBuilder(BuilderBase):
    """Fluent HTML builder with nesting, conditions and callbacks.

    Args:
        strict: Validate the HTML on every render().
        indent: Put every fragment on its own line, indented by depth.
        indent_width: Spaces per nesting level when indenting.
        validator: Object with a ``validate(html)`` method used by strict
            mode. Defaults to a JustHtmlValidator.

    Usage:
        >>> HtmlBuilder().open('div').p('Hello').close().render()
        '<div>\\n    <p>Hello</p>\\n</div>'
        >>> HtmlBuilder.input({'type': 'text', 'required': None, 'disabled': False})
        '<input type="text" required />'
    """

    def __init__(
        self,
        strict: bool = False,
        indent: bool = True,
        indent_width: int = 4,
        validator: HtmlValidator | None = None,
    ) -> None:
        self.strict = strict
        self.indent = indent
        self.indent_width = indent_width
        self._validator = validator
        self._conditions = ConditionEvaluator()
        self._buffer: list[str] = []
        self._stack: list[str] = []

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(depth={self.depth}, "
            f"fragments={len(self._buffer)}, strict={self.strict})"
        )

    def __str__(self) -> str:
        return self.render()

    @property
    def validator(self) -> HtmlValidator:
        """The validator used by strict mode."""
        if self._validator is None:
            self._validator = JustHtmlValidator()
        return self._validator

    @property
    def depth(self) -> int:
        """Number of currently open tags."""
        return len(self._stack)

    @property
    def open_tags(self) -> tuple[str, ...]:
        """Names of currently open tags, outermost first."""
        return tuple(self._stack)

    @property
    def is_empty(self) -> bool:
        """True if nothing has been written since the last render()."""
        return not self._buffer

    # -------------------------------------------------------------------------
    # Emission
    # -------------------------------------------------------------------------

    def node(self, text: str) -> HtmlBuilder:
        """Write a raw text node, e.g. ``'<!DOCTYPE html>'``.

        Raises:
            ValidationError: If text is blank.
        """
        text = _require_text(text, "Node text")
        if self._conditions.evaluate():
            self.write(text)
        return self

    def comment(self, text: str) -> HtmlBuilder:
        """Write an HTML comment; text is given without ``<!--`` and ``-->``.

        Raises:
            ValidationError: If text is blank.
        """
        text = _require_text(text, "Comment text")
        if self._conditions.evaluate():
            self.write(f"<!-- {text} -->")
        return self

    def entity(self, name: str) -> HtmlBuilder:
        """Write an HTML entity; ``'copy'``, ``'&copy;'`` and ``'copy;'`` all work.

        Raises:
            ValidationError: If name is blank.
        """
        name = _require_text(name.strip('& ;'), "Entity name")
        if self._conditions.evaluate():
            self.write(f"&{name};")
        return self

    @hybridmethod
    def element(
        self, name: str, content: Any = '', attributes: Attributes = None, /, **attrs: Any
    ) -> HtmlBuilder:
        """Write a complete element.

        Args:
            name: Tag name. Stripped and lowercased, need not be a known tag.
            content: Text or HTML content. None makes a self-closing tag,
                non-string values are stringified (structures as JSON).
            attributes: Mapping or iterable of attributes. A None value makes
                a boolean attribute, a bare token without key too, and False
                drops the attribute.
            **attrs: More attributes; ``class_`` is written ``class`` and
                ``data_id`` is written ``data-id``.

        Raises:
            ValidationError: If name is blank.
        """
        name = normalize_tag_name(_require_text(name, "Tag name"))

        if self._conditions.evaluate():
            self._log_deprecated(name)
            attributes_text = stringify_attributes(attributes, **attrs)
            if content is None:
                self.write(f"<{name}{attributes_text} />")
            else:
                self.write(f"<{name}{attributes_text}>{stringify_value(content)}</{name}>")
        return self

    def open(self, name: str, attributes: Attributes = None, /, **attrs: Any) -> HtmlBuilder:
        """Write an opening tag and enter it; see close().

        If the element is suppressed by a condition, everything written
        until the matching close() is suppressed as well.

        Raises:
            ValidationError: If name is blank.
        """
        name = normalize_tag_name(_require_text(name, "Tag name"))

        if self._conditions.evaluate(Depth.OPENING):
            self._log_deprecated(name)
            self.write(f"<{name}{stringify_attributes(attributes, **attrs)}>")

        self._stack.append(name)
        return self

    def close(self) -> HtmlBuilder:
        """Write the closing tag of the last tag opened with open().

        Raises:
            StateError: If no tag is open.
        """
        if not self._stack:
            raise StateError(
                "Not in a context to close a tag! "
                f"Call to {type(self).__name__}.close() is superfluous"
            )

        name = self._stack.pop()
        if self._conditions.evaluate(Depth.CLOSING):
            self.write(f"</{name}>")
        return self

    # -------------------------------------------------------------------------
    # Control flow
    # -------------------------------------------------------------------------

    def condition(self, condition: Any) -> HtmlBuilder:
        """Make the very next call conditional on the truthiness of condition.

        When the next call is open(), the whole element and its content
        depend on the condition.
        """
        self._conditions.push(condition)
        return self

    def if_(self, condition: Any) -> HtmlBuilder:
        """Alias for condition()."""
        return self.condition(condition)

    def function(self, callback: Callable[[HtmlBuilder], Any]) -> HtmlBuilder:
        """Call callback with the builder, e.g. to write elements in a loop.

        The return value of callback is ignored.
        """
        if self._conditions.evaluate():
            callback(self)
        return self

    def do(self, callback: Callable[[HtmlBuilder], Any]) -> HtmlBuilder:
        """Alias for function()."""
        return self.function(callback)

    # -------------------------------------------------------------------------
    # Buffer
    # -------------------------------------------------------------------------

    def write(self, content: str) -> HtmlBuilder:
        """Append content to the buffer as is, ignoring conditions.

        With indentation on, content is prefixed by ``indent_width`` spaces
        per open tag and followed by a newline.
        """
        if self.indent:
            content = f"{' ' * (self.indent_width * len(self._stack))}{content}\n"
        self._buffer.append(content)
        return self

    def render(self) -> str:
        """Return the HTML written so far and reset the builder.

        Raises:
            StateError: If some tags are still open. Nothing is reset.
            InvalidHtmlError: In strict mode, if the HTML is invalid.
                The builder has already been reset at that point.
        """
        if self._stack:
            tags = ', '.join(self._stack)
            raise StateError(
                f'Cannot render HTML. The following tag(s): "{tags}" '
                "has/have not been closed properly",
                self._stack,
            )

        html = ''.join(self._buffer).strip()
        fragments = len(self._buffer)
        self.reset()

        logger.debug("rendered %d fragment(s), %d chars", fragments, len(html))

        if self.strict:
            self.validator.validate(html)

        return html

    def reset(self) -> HtmlBuilder:
        """Discard buffer, open tags and conditions."""
        self._buffer.clear()
        self._stack.clear()
        self._conditions.reset()
        return self

    # -------------------------------------------------------------------------
    # Standalone helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def validate(html: str) -> None:
        """Validate html with the default validator; see validation.validate()."""
        _validate(html)

    @staticmethod
    def minify(html: str) -> str:
        """Minify html; see minify.minify()."""
        return _minify(html)

    def _log_deprecated(self, name: str) -> None:
        definition = get_tag(name)
        if definition is not None and definition.deprecated:
            logger.debug("<%s> is not supported in HTML5", name)


def render_element(
    name: str, content: Any = '', attributes: Attributes = None, /, **attrs: Any
) -> str:
    """Render a single element outside any chain.

    Example:
        >>> render_element('a', 'Home', href='/')
        '<a href="/">Home</a>'
    """
    return HtmlBuilder().element(name, content, attributes, **attrs).render()
