"""Hashers used by the engine's collections."""

from __future__ import annotations

_U64_MASK = (1 << 64) - 1


def _check_u64(value: int) -> int:
    if not 0 <= value <= _U64_MASK:
        raise ValueError(f"{value} does not fit in an unsigned 64-bit integer")
    return value


class NoOpHasher:
    """Hasher for values that already carry a high-quality 64-bit hash.

    ``write_u64`` stores the given hash unchanged.  ``write`` exists only as a
    fallback and mixes bytes by rotating the state left by eight bits and
    adding each byte, wrapping at 64 bits.
    """

    __slots__ = ("_state",)

    def __init__(self) -> None:
        self._state = 0

    def write(self, data) -> None:
        """Mix a bytes-like object into the state."""
        state = self._state
        for byte in memoryview(data).tobytes():
            rotated = ((state << 8) | (state >> 56)) & _U64_MASK
            state = (rotated + byte) & _U64_MASK
        self._state = state

    def write_u64(self, value: int) -> None:
        """Replace the state with an already computed 64-bit hash."""
        self._state = _check_u64(value)

    def finish(self) -> int:
        """Return the current hash value."""
        return self._state