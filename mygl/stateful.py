"""Cached render state that only reports changes since it was last applied."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class StatefulState(Generic[T]):
    """Holds the wanted value of a piece of state and the hooks that push it."""

    def __init__(self, current: T) -> None:
        self.current = current
        self.previous: Optional[T] = None
        self.force_count = 0

    def apply_cb(self, active: T) -> None:
        """Called with the previously applied value when ``current`` differs from it."""
        self.previous = active

    def force_cb(self) -> None:
        """Called to push ``current`` unconditionally."""
        self.force_count += 1


@dataclass
class _Shared:
    first_time: bool = True
    internal: Optional[Any] = None


_SHARED: Dict[type, _Shared] = {}


class Stateful(Generic[T]):
    """Tracks the last applied value, shared by every instance of the same value type."""

    def __init__(self, initial: StatefulState[T]) -> None:
        self._state = initial
        self._shared = _SHARED.setdefault(type(initial.current), _Shared())
        if self._shared.first_time:
            self.force()
            self._shared.first_time = False

    def force(self) -> None:
        """Push the current value and remember it as applied."""
        self._state.force_cb()
        self._shared.internal = copy.deepcopy(self._state.current)

    def apply(self) -> None:
        """Push the current value if it differs from the last applied one."""
        if self._state.current != self._shared.internal:
            self._state.apply_cb(self._shared.internal)
            self._shared.internal = copy.deepcopy(self._state.current)

    def current(self) -> T:
        """The wanted value; mutate it and call ``apply``."""
        return self._state.current