"""A small JSON document with typed getters and setters.

Getters return ``None`` when a key is missing or holds a value of another
type; an empty key addresses the whole document.
"""

from __future__ import annotations

import copy
import json
from typing import Any, Callable, List, Optional, Sequence, Union

Scalar = Union[int, bool, float, str]
Settable = Union[int, bool, float, str, "Json"]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal: {name}")


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _is_bool(v: Any) -> bool:
    return isinstance(v, bool)


def _is_float(v: Any) -> bool:
    return isinstance(v, float)


def _is_str(v: Any) -> bool:
    return isinstance(v, str)


def _is_object(v: Any) -> bool:
    return isinstance(v, dict)


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _read_int(v: Any) -> int:
    if not _is_number(v):
        raise TypeError(f"cannot read {v!r} as an integer")
    return int(v)


def _read_float(v: Any) -> float:
    if not _is_number(v):
        raise TypeError(f"cannot read {v!r} as a number")
    return float(v)


def _read_bool(v: Any) -> bool:
    if not _is_bool(v):
        raise TypeError(f"cannot read {v!r} as a boolean")
    return v


def _read_str(v: Any) -> str:
    if not _is_str(v):
        raise TypeError(f"cannot read {v!r} as a string")
    return v


def _read_object(v: Any) -> "Json":
    return Json._wrap(copy.deepcopy(v))


class Json:
    """A JSON value, an empty object by default."""

    def __init__(self, content: Optional[str] = None) -> None:
        if content is None:
            self._value: Any = {}
        else:
            self._value = json.loads(content, parse_constant=_reject_constant)

    @classmethod
    def _wrap(cls, value: Any) -> Json:
        doc = cls()
        doc._value = value
        return doc

    @property
    def value(self) -> Any:
        """A deep copy of the underlying Python value."""
        return copy.deepcopy(self._value)

    def copy(self) -> Json:
        return Json._wrap(copy.deepcopy(self._value))

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Json:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Json):
            return NotImplemented
        return self._value == other._value

    def __repr__(self) -> str:
        return f"Json({self.serialize()!r})"

    # -- lookup ---------------------------------------------------------

    _MISSING = object()

    def _find(self, key: str) -> Any:
        if not key:
            return self._value
        if isinstance(self._value, dict) and key in self._value:
            return self._value[key]
        return Json._MISSING

    def _get(self, key: str, check: Callable[[Any], bool], read: Callable[[Any], Any]) -> Any:
        v = self._find(key)
        if v is Json._MISSING or v is None or not check(v):
            return None
        return read(v)

    def _get_array(self, key: str, check: Callable[[Any], bool], read: Callable[[Any], Any]) -> Optional[list]:
        v = self._find(key)
        if not isinstance(v, list) or not v or not check(v[0]):
            return None
        return [read(item) for item in v]

    # -- scalar getters -------------------------------------------------

    def get_int(self, key: str) -> Optional[int]:
        """Integer at ``key``; floats and booleans do not count."""
        return self._get(key, _is_int, _read_int)

    def get_bool(self, key: str) -> Optional[bool]:
        """Boolean at ``key``."""
        return self._get(key, _is_bool, _read_bool)

    def get_float(self, key: str) -> Optional[float]:
        """Floating-point number at ``key``; integers do not count."""
        return self._get(key, _is_float, _read_float)

    def get_string(self, key: str) -> Optional[str]:
        """String at ``key``."""
        return self._get(key, _is_str, _read_str)

    def get_object(self, key: str) -> Optional[Json]:
        """Copy of the object at ``key``."""
        return self._get(key, _is_object, _read_object)

    def get_int_or(self, key: str, other: int) -> int:
        v = self.get_int(key)
        return other if v is None else v

    def get_bool_or(self, key: str, other: bool) -> bool:
        v = self.get_bool(key)
        return other if v is None else v

    def get_float_or(self, key: str, other: float) -> float:
        v = self.get_float(key)
        return other if v is None else v

    def get_string_or(self, key: str, other: str) -> str:
        v = self.get_string(key)
        return other if v is None else v

    def get_object_or(self, key: str, other: Json) -> Json:
        v = self.get_object(key)
        return other.copy() if v is None else v

    # -- array getters --------------------------------------------------

    def get_int_array(self, key: str) -> Optional[List[int]]:
        """Non-empty array whose first element is an integer."""
        return self._get_array(key, _is_int, _read_int)

    def get_bool_array(self, key: str) -> Optional[List[bool]]:
        """Non-empty array whose first element is a boolean."""
        return self._get_array(key, _is_bool, _read_bool)

    def get_float_array(self, key: str) -> Optional[List[float]]:
        """Non-empty array whose first element is a floating-point number."""
        return self._get_array(key, _is_float, _read_float)

    def get_string_array(self, key: str) -> Optional[List[str]]:
        """Non-empty array whose first element is a string."""
        return self._get_array(key, _is_str, _read_str)

    def get_object_array(self, key: str) -> Optional[List[Json]]:
        """Non-empty array whose first element is an object."""
        return self._get_array(key, _is_object, _read_object)

    # -- setters --------------------------------------------------------

    @staticmethod
    def _plain(value: Settable) -> Any:
        if isinstance(value, Json):
            return copy.deepcopy(value._value)
        if isinstance(value, (bool, int, float, str)):
            return value
        raise TypeError(f"unsupported JSON value: {value!r}")

    def _store(self, key: str, plain: Any) -> None:
        if not key:
            self._value = plain
            return
        if self._value is None:
            self._value = {}
        if not isinstance(self._value, dict):
            raise TypeError("cannot set a key on a JSON value that is not an object")
        self._value[key] = plain

    def set(self, key: str, value: Settable) -> None:
        """Store ``value`` at ``key``, or replace the whole document if ``key`` is empty."""
        self._store(key, self._plain(value))

    def set_array(self, key: str, values: Sequence[Settable]) -> None:
        """Store ``values`` as an array at ``key`` (the whole document if empty)."""
        self._store(key, [self._plain(v) for v in values])

    # -- output ---------------------------------------------------------

    @staticmethod
    def _dump(value: Any) -> str:
        return json.dumps(
            value,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        )

    def serialize(self, key: Optional[str] = None) -> str:
        """Compact text of the document, or of the value at ``key`` ("" if absent or null)."""
        if key is None:
            return self._dump(self._value)
        if self._value is None:
            return ""
        if not isinstance(self._value, dict):
            raise TypeError("cannot look up a key in a JSON value that is not an object")
        v = self._value.get(key)
        if v is None:
            return ""
        return self._dump(v)