"""Small deterministic pseudo-random number generator (Lehmer / MINSTD)."""

from __future__ import annotations

_MULTIPLIER = 48271
_MODULUS = 0x7FFFFFFF


class SeededRandom:
    """Deterministic generator of floats in [0, 1)."""

    def __init__(self, seed: int = 2) -> None:
        self._state = seed & 0xFFFFFFFF

    def random_number(self) -> float:
        """Advance the state and return the next value in [0, 1)."""
        self._state = self._state * _MULTIPLIER % _MODULUS
        return (self._state >> 8) / (1 << 23)

    def set_seed(self, seed: int) -> None:
        """Restart the sequence from ``seed``."""
        self._state = seed & 0xFFFFFFFF