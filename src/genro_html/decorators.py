# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Decorators for builder methods with a stateless class-level form."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable


class hybridmethod:
    """Method usable both on an instance and on the class.

    On an instance it behaves like a normal method and returns whatever the
    method returns (the builder, for chaining). On the class it creates a
    fresh instance, calls the method on it and returns the rendered string.

    Example:
        >>> class Builder(HtmlBuilder):
        ...     @hybridmethod
        ...     def banner(self, text):
        ...         return self.div(text, class_='banner')
        ...
        >>> Builder().banner('Hi').render()
        '<div class="banner">Hi</div>'
        >>> Builder.banner('Hi')
        '<div class="banner">Hi</div>'
    """

    def __init__(self, func: Callable[..., Any]) -> None:
        self.func = func
        self.__doc__ = func.__doc__
        self.__name__ = func.__name__
        self.__wrapped__ = func

    def __set_name__(self, owner: type, name: str) -> None:
        self.__name__ = name

    def __get__(self, instance: Any, owner: type | None = None) -> Callable[..., Any]:
        func = self.func

        if instance is not None:
            return func.__get__(instance, owner)

        @wraps(func)
        def stateless(*args: Any, **kwargs: Any) -> str:
            return func(owner(), *args, **kwargs).render()

        return stateless
