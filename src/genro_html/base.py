# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BuilderBase - tag method generation for HTML builders."""

from __future__ import annotations

import keyword
from abc import ABCMeta, abstractmethod
from typing import Any, Callable

from .attributes import Attributes
from .decorators import hybridmethod
from .exceptions import InvocationError
from .tags import TAGS, TagDefinition, get_tag


def _make_tag_method(definition: TagDefinition) -> hybridmethod:
    """Create the method for a specific tag."""
    name = definition.name

    if definition.void:
        def tag_method(self: Any, attributes: Attributes = None, /, **attrs: Any) -> Any:
            return self.element(name, None, attributes, **attrs)
        signature = f"{name}(attributes=None, **attrs)"
    else:
        def tag_method(
            self: Any, content: Any = '', attributes: Attributes = None, /, **attrs: Any
        ) -> Any:
            return self.element(name, content, attributes, **attrs)
        signature = f"{name}(content='', attributes=None, **attrs)"

    doc = f"{signature}: create a <{name}> element."
    if definition.void:
        doc += " Void element, always self-closing."
    if definition.deprecated:
        doc += " Not supported in HTML5."

    tag_method.__name__ = name
    tag_method.__qualname__ = name
    tag_method.__doc__ = doc
    return hybridmethod(tag_method)


class _BuilderMeta(ABCMeta):
    """Metaclass rejecting unknown tag names looked up on the class."""

    def __getattr__(cls, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(
                f"type object '{cls.__name__}' has no attribute '{name}'"
            )
        raise InvocationError(
            f"Call to undefined method {cls.__name__}.{name}()", name
        )


class BuilderBase(metaclass=_BuilderMeta):
    """Abstract base class for fluent HTML builders.

    Subclasses get one method per known HTML tag, generated from the tag
    registry when the class is created. Methods the subclass defines itself
    are never overwritten. Tag names that are Python keywords also get an
    alias with a trailing underscore (``del_``).

    Usage:
        >>> builder.div('content', {'class': 'box'})   # element('div', ...)
        >>> builder.br()                               # void: <br />
        >>> builder.tag('del', 'removed')              # generic dispatch
        >>> HtmlBuilder.p('Hi')                        # stateless, returns str
    """

    # Class-level dict mapping tag -> method name
    _element_tags: dict[str, str]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Generate tag methods and build the _element_tags dict."""
        super().__init_subclass__(**kwargs)

        cls._element_tags = {}
        for definition in TAGS.values():
            method_name = definition.name
            if keyword.iskeyword(method_name):
                alias = f"{method_name}_"
                if not hasattr(cls, alias):
                    setattr(cls, alias, _make_tag_method(definition))
            if not hasattr(cls, method_name):
                setattr(cls, method_name, _make_tag_method(definition))
            cls._element_tags[definition.name] = method_name

    def __getattr__(self, name: str) -> Any:
        """Reject unknown tag names with InvocationError."""
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        raise InvocationError(
            f"Call to undefined method {type(self).__name__}.{name}()", name
        )

    @abstractmethod
    def element(
        self, name: str, content: Any = '', attributes: Attributes = None, /, **attrs: Any
    ) -> Any:
        """Emit a complete element."""

    @hybridmethod
    def tag(self, name: str, /, *args: Any, **kwargs: Any) -> Any:
        """Call the tag method for a tag name known only at runtime.

        Args:
            name: Tag name, case-insensitive.
            *args: Positional arguments of the tag method.
            **kwargs: Attributes of the tag method.

        Raises:
            InvocationError: If name is not a known HTML tag.
        """
        definition = get_tag(name)
        if definition is None:
            raise InvocationError(
                f"Call to undefined method {type(self).__name__}.{name.strip()}()",
                name.strip(),
            )
        method: Callable[..., Any] = getattr(self, self._element_tags[definition.name])
        return method(*args, **kwargs)
