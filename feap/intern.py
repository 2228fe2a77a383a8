"""Interning of immutable values, compared and hashed by identity."""

from __future__ import annotations

import threading
from typing import Any

_MISSING = object()


class Interned:
    """A handle to an interned value.

    Two handles are equal only if they refer to the very same stored object,
    so equality and hashing are as cheap as comparing integers.  Attribute
    access is forwarded to the wrapped value.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        object.__setattr__(self, "value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Interned handles are immutable")

    def __getattr__(self, name: str) -> Any:
        if name == "value":
            raise AttributeError(name)
        return getattr(self.value, name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interned):
            return NotImplemented
        return self.value is other.value

    def __hash__(self) -> int:
        return hash(id(self.value))

    def __repr__(self) -> str:
        return repr(self.value)


class Interner:
    """A thread-safe store that hands out one :class:`Interned` per distinct value."""

    def __init__(self) -> None:
        self._values: dict[Any, Any] = {}
        self._lock = threading.Lock()

    def intern(self, value: Any) -> Interned:
        """Return the handle for ``value``, storing it on first sight."""
        if isinstance(value, Interned):
            return value
        stored = self._values.get(value, _MISSING)
        if stored is not _MISSING:
            return Interned(stored)
        with self._lock:
            stored = self._values.setdefault(value, value)
        return Interned(stored)

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)