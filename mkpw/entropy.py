"""
Bit-level helpers for turning raw random bits into uniform integers.

- amplify_entropy mixes a bitstream with repeated SHA-256.
- BitPool buffers bits from a refill callback and hands out uniform
  integers below a bound by rejection sampling.
"""

from __future__ import annotations

import hashlib
from typing import Callable

# Size of one SHA-256 digest.
DIGEST_BITS = 256


def bits_to_bytes(bits: list[int]) -> bytes:
    """
    Pack bits (MSB first) into bytes, zero-padding the last byte.
    """
    if not bits:
        return b""
    padded = bits + [0] * (-len(bits) % 8)
    return bits_to_int(padded).to_bytes(len(padded) // 8, "big")


def bytes_to_bits(data: bytes) -> list[int]:
    return [(byte >> shift) & 1 for byte in data for shift in range(7, -1, -1)]


def bits_to_int(bits: list[int]) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def amplify_entropy(bits: list[int], rounds: int = 1) -> list[int]:
    """
    Hash the packed bits with SHA-256 `rounds` times and unpack the final
    digest (always 256 bits). With rounds <= 0 the input is returned as is.
    """
    if rounds <= 0:
        return bits

    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()
    return bytes_to_bits(data)


class BitPool:
    """
    FIFO buffer of random bits.

    `refill` is called whenever the buffer runs dry and must return a
    non-empty list of 0/1 values.
    """

    def __init__(self, refill: Callable[[], list[int]]) -> None:
        self._refill = refill
        self._bits: list[int] = []
        self.refills = 0

    def take(self, count: int) -> int:
        """Consume `count` bits and return them as an unsigned integer."""
        while len(self._bits) < count:
            fresh = self._refill()
            if not fresh:
                raise RuntimeError("Entropy refill returned no bits")
            self._bits.extend(fresh)
            self.refills += 1

        chunk, self._bits = self._bits[:count], self._bits[count:]
        return bits_to_int(chunk)

    def below(self, bound: int) -> int:
        """
        Uniform integer in [0, bound).

        Draws the minimal number of bits that can express bound - 1 and
        retries on values >= bound, so no value is favoured.
        """
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        width = (bound - 1).bit_length()
        while True:
            value = self.take(width)
            if value < bound:
                return value
