# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Condition evaluation for conditional emission.

A builder holds at most one pending condition, set by ``condition()`` and
consumed by the very next emitting call. When that call opens an element,
the outcome is pushed on a scope stack so every descendant inherits it
until the matching close.

Example:
    >>> ev = ConditionEvaluator()
    >>> ev.push(False)
    >>> ev.evaluate(Depth.OPENING)   # suppressed <div>
    False
    >>> ev.evaluate()                # child inherits the suppression
    False
    >>> ev.evaluate(Depth.CLOSING)   # suppressed </div>, scope popped
    False
    >>> ev.evaluate()                # sibling after the close
    True
"""

from __future__ import annotations

from enum import Enum


class Depth(Enum):
    """Position of an emitting call relative to element nesting."""

    CLOSING = -1
    NORMAL = 0
    OPENING = 1


class ConditionEvaluator:
    """One-shot pending condition plus inherited scope conditions."""

    __slots__ = ('_pending', '_scope')

    def __init__(self) -> None:
        self._pending: bool | None = None
        self._scope: list[bool] = []

    def __repr__(self) -> str:
        return f"ConditionEvaluator(pending={self._pending!r}, scope={self._scope!r})"

    @property
    def pending(self) -> bool | None:
        """The condition waiting for the next emitting call, if any."""
        return self._pending

    @property
    def scope(self) -> tuple[bool, ...]:
        """Inherited conditions, outermost first."""
        return tuple(self._scope)

    @property
    def is_idle(self) -> bool:
        """True when no condition is pending and no scope is active."""
        return self._pending is None and not self._scope

    def push(self, value: object) -> None:
        """Set the pending condition, replacing any unconsumed one."""
        self._pending = bool(value)

    def evaluate(self, depth: Depth = Depth.NORMAL) -> bool:
        """Decide whether the current call emits, and update the scopes.

        Args:
            depth: OPENING pushes the outcome as a new scope, CLOSING pops
                the innermost scope, NORMAL leaves scopes alone.

        Returns:
            True if the call should write to the buffer.
        """
        if self.is_idle:
            return True

        inherited = self._scope[-1] if self._scope else True
        local = self._pending if self._pending is not None else True
        effective = inherited and local

        if depth is Depth.OPENING:
            self._scope.append(effective)
        elif depth is Depth.CLOSING and self._scope:
            self._scope.pop()

        # consumed even inside a suppressed scope
        self._pending = None

        return effective

    def reset(self) -> None:
        """Drop the pending condition and all scopes."""
        self._pending = None
        self._scope.clear()
