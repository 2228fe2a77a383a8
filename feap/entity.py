"""Lightweight generational entity identifiers."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import ClassVar

_U32_MAX = 0xFFFF_FFFF


@dataclass(frozen=True, order=True)
class EntityRow:
    """The row, or index, of an entity within the entity table.

    The index may take any 32-bit value except the largest one.
    """

    index: int

    PLACEHOLDER: ClassVar[EntityRow]

    def __post_init__(self) -> None:
        if not 0 <= self.index < _U32_MAX:
            raise ValueError(f"entity row {self.index} is out of range")

    def to_bits(self) -> int:
        """Return the stored bit pattern, which never equals zero."""
        return self.index ^ _U32_MAX

    def __str__(self) -> str:
        return str(self.index)


EntityRow.PLACEHOLDER = EntityRow(_U32_MAX - 1)


@dataclass(frozen=True)
class EntityGeneration:
    """The generation of an entity row; it may wrap and is not unique."""

    value: int = 0

    FIRST: ClassVar[EntityGeneration]

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _U32_MAX:
            raise ValueError(f"entity generation {self.value} does not fit in 32 bits")

    def to_bits(self) -> int:
        """Return the generation as a 32-bit value."""
        return self.value

    def __str__(self) -> str:
        return str(self.value)


EntityGeneration.FIRST = EntityGeneration(0)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Entity:
    """Identifier of an entity: a row combined with its generation.

    Entities compare, order and hash by their 64-bit representation.
    """

    row: EntityRow
    generation: EntityGeneration = EntityGeneration.FIRST

    PLACEHOLDER: ClassVar[Entity]

    @staticmethod
    def from_row_and_generation(row: EntityRow, generation: EntityGeneration) -> Entity:
        """Create an entity from a row and a generation."""
        return Entity(row, generation)

    @staticmethod
    def from_row(row: EntityRow) -> Entity:
        """Create an entity for ``row`` with the first generation."""
        return Entity(row, EntityGeneration.FIRST)

    def to_bits(self) -> int:
        """Pack the entity into a 64-bit integer: row low, generation high."""
        return self.row.to_bits() | (self.generation.to_bits() << 32)

    def index(self) -> int:
        """Return the index of the entity's row."""
        return self.row.index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.to_bits() == other.to_bits()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.to_bits() < other.to_bits()

    def __hash__(self) -> int:
        return hash(self.to_bits())

    def __str__(self) -> str:
        if self == Entity.PLACEHOLDER:
            return "PLACEHOLDER"
        return f"{self.index()}v{self.generation}"

    __repr__ = __str__


Entity.PLACEHOLDER = Entity.from_row(EntityRow.PLACEHOLDER)