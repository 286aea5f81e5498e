"""
Sources of randomness for the generator.

The generator never reaches for a module-level RNG: every call is handed a
RandomSource, so tests can pass a seeded one and production code a
system-entropy one. See quantum_engine.QuantumRandomSource for a source
fed by a simulated quantum circuit.
"""

from __future__ import annotations

import random
import secrets
from typing import Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """
    Uniform integers in a half-open range, and uniform picks from a
    non-empty sequence.

    Subclasses implement randrange(); choice() is built on top of it.
    """

    def randrange(self, start: int, stop: int) -> int:
        raise NotImplementedError

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.randrange(0, len(seq))]


class _StdlibRandomSource(RandomSource):
    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def randrange(self, start: int, stop: int) -> int:
        return self._rng.randrange(start, stop)


class SystemRandomSource(_StdlibRandomSource):
    """Backed by the operating system's entropy pool."""

    def __init__(self) -> None:
        super().__init__(secrets.SystemRandom())


class SeededRandomSource(_StdlibRandomSource):
    """
    Deterministic source for tests: the same seed and the same sequence
    of calls always give the same numbers.
    """

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed
        super().__init__(random.Random(seed))
