"""
Configuration for the password maker.

A password is described by a PasswordSpec: a length, two pool-level
switches and a set of Classifiers (named character pools, each with a
minimum number of occurrences).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .text import graphemes


UPPERCASE_CANDIDATES = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE_CANDIDATES = "abcdefghijklmnopqrstuvwxyz"
NUMBER_CANDIDATES = "0123456789"
SYMBOL_CANDIDATES = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"

DEFAULT_LENGTH = 16
DEFAULT_MINIMUM_COUNT = 1


@dataclass
class Classifier:
    # Each entry is one grapheme cluster, e.g. "a", "🇯🇵" or "👨‍👩‍👦".
    candidates: list[str] = field(default_factory=list)

    # How many positions of the password must come from this pool.
    minimum_count: int = 0

    @classmethod
    def from_text(cls, text: str, minimum_count: int = 0) -> "Classifier":
        """
        Build a classifier by splitting `text` into grapheme clusters.
        """
        return cls(candidates=graphemes(text), minimum_count=minimum_count)


def _default(text: str) -> Classifier:
    return Classifier.from_text(text, DEFAULT_MINIMUM_COUNT)


@dataclass
class PasswordSpec:
    # Number of grapheme clusters in the generated password.
    length: int = DEFAULT_LENGTH

    # Drop 'i', 'l', '1', 'o', '0' and 'O' from every pool.
    exclude_similar: bool = False

    # Add a single space to the merged candidate pool.
    include_whitespace: bool = False

    uppercase: Classifier = field(default_factory=lambda: _default(UPPERCASE_CANDIDATES))
    lowercase: Classifier = field(default_factory=lambda: _default(LOWERCASE_CANDIDATES))
    number: Classifier = field(default_factory=lambda: _default(NUMBER_CANDIDATES))
    symbol: Classifier = field(default_factory=lambda: _default(SYMBOL_CANDIDATES))

    # Any number of extra pools, e.g. emoji or kana.
    others: list[Classifier] = field(default_factory=list)

    def classifiers(self) -> Iterator[tuple[str, int | None, Classifier]]:
        """
        Yield (display name, index in `others` or None, classifier).

        The order is fixed: uppercase, lowercase, number, symbol, then the
        other classifiers in declaration order. The validator reports in
        this order and the overwrite phase hands out positions in it.
        """
        yield "Uppercases", None, self.uppercase
        yield "Lowercases", None, self.lowercase
        yield "Numbers", None, self.number
        yield "Symbols", None, self.symbol
        for index, classifier in enumerate(self.others):
            yield f"Other characters at index {index}", index, classifier

    @property
    def total_minimum_count(self) -> int:
        return sum(c.minimum_count for _name, _index, c in self.classifiers())


@dataclass
class QuantumSourceConfig:
    # Number of qubits prepared per circuit run.
    # Each qubit gives one raw bit.
    # NOTE: Keep this <= backend limit (often 20-29 for local simulators).
    num_qubits: int = 20

    # Rounds of SHA-256 mixing applied to each refill. 0 keeps raw bits.
    entropy_rounds: int = 2

    # Independent circuit runs XOR-combined per refill.
    quantum_streams: int = 2


DEFAULT_QUANTUM_CONFIG = QuantumSourceConfig()
