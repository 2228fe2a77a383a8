"""Borrow wrappers that record when their data is mutated."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from feap.tick import Tick

T = TypeVar("T")


@dataclass
class TicksMut:
    """The change ticks of a value together with the running system's ticks.

    ``added`` and ``changed`` are the ticks stored alongside the value and are
    updated in place.
    """

    added: Tick
    changed: Tick
    last_run: Tick
    this_run: Tick


def _is_newer_than(tick: Tick, last_run: Tick, this_run: Tick) -> bool:
    since_insert = min(this_run.relative_to(tick).tick, Tick.MAX.tick)
    since_system = min(this_run.relative_to(last_run).tick, Tick.MAX.tick)
    return since_system > since_insert


@dataclass(frozen=True)
class Res(Generic[T]):
    """Shared borrow of a resource."""

    value: T


class Mut(Generic[T]):
    """Unique mutable borrow of a component or resource with change tracking."""

    __slots__ = ("_value", "ticks")

    def __init__(self, value: T, ticks: TicksMut) -> None:
        self._value = value
        self.ticks = ticks

    @property
    def value(self) -> T:
        """The borrowed value, read without marking it changed."""
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self.set_changed()
        self._value = new_value

    def as_mut(self) -> T:
        """Return the value for mutation, marking it changed."""
        self.set_changed()
        return self._value

    def set_changed(self) -> None:
        """Flag the value as changed by the running system."""
        self.ticks.changed.tick = self.ticks.this_run.tick

    def is_changed(self) -> bool:
        """Return whether the value changed since the system last ran."""
        return _is_newer_than(self.ticks.changed, self.ticks.last_run, self.ticks.this_run)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class ResMut(Mut[T]):
    """Unique mutable borrow of a resource."""

    __slots__ = ()

    def set_changed(self) -> None:
        """Flag the resource as changed by the running system."""
        super().set_changed()


def _unused(_: Any) -> None:  # pragma: no cover
    pass