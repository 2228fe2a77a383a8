"""Change ticks that record when systems ran relative to each other."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import ClassVar

_U32_MASK = (1 << 32) - 1

CHECK_TICK_THRESHOLD = 518_400_000
"""Minimum number of world tick increments between ``check_tick`` scans."""

MAX_CHANGE_AGE = _U32_MASK - (2 * CHECK_TICK_THRESHOLD - 1)
"""The largest tick difference that cannot overflow before the next scan."""


@dataclass
class Tick:
    """A wrapping 32-bit counter used for change detection."""

    tick: int = 0

    MAX: ClassVar[Tick]

    def __post_init__(self) -> None:
        if not 0 <= self.tick <= _U32_MASK:
            raise ValueError(f"tick {self.tick} does not fit in 32 bits")

    def relative_to(self, other: Tick) -> Tick:
        """Return the wrapping difference ``self - other``."""
        return Tick((self.tick - other.tick) & _U32_MASK)

    def check_tick(self, check: CheckChangeTicks) -> bool:
        """Clamp this tick if it is older than :attr:`Tick.MAX`.

        Returns ``True`` when the tick was clamped.
        """
        present = check.present_tick()
        age = present.relative_to(self)
        if age.tick > Tick.MAX.tick:
            self.tick = present.relative_to(Tick.MAX).tick
            return True
        return False


Tick.MAX = Tick(MAX_CHANGE_AGE)


@dataclass(frozen=True)
class CheckChangeTicks:
    """Request to clamp stored ticks against the present tick."""

    tick: Tick

    def present_tick(self) -> Tick:
        """Return a copy of the present tick that others are compared to."""
        return dataclasses.replace(self.tick)


@dataclass
class ComponentTicks:
    """When a component or resource was added and last changed."""

    added: Tick
    changed: Tick