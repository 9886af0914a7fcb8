"""Random Source — injectable provider of uniformly distributed 32-bit words.

Invariants:
    - next_uint32() returns an int in [0, 2**32)
    - uniform_index(source, n) returns an int in [0, n) with no modulo bias
    - SystemRandomSource draws from the OS CSPRNG via secrets (never a seeded PRNG)

Design Decisions:
    - Protocol over ABC: any object with next_uint32() works, tests pass scripted sequences
      (ADR: structural subtyping, no inheritance hierarchy)
    - Rejection sampling instead of plain `word % n`: words at or above the largest multiple
      of n below 2**32 are redrawn, so every index is exactly equally likely
"""

import secrets
from typing import Protocol


UINT32_RANGE: int = 2 ** 32


class RandomSource(Protocol):
    """Contract for the generator's randomness — implemented by callers or SystemRandomSource."""
    def next_uint32(self) -> int: ...


class SystemRandomSource:
    """Cryptographically strong source backed by the secrets module."""

    def next_uint32(self) -> int:
        return secrets.randbits(32)


def uniform_index(source: RandomSource, n: int) -> int:
    """Uniform integer in [0, n) drawn from 32-bit words."""
    if n <= 0:
        raise ValueError(f"cannot draw an index from an empty range (n={n})")
    limit = UINT32_RANGE - (UINT32_RANGE % n)
    while True:
        word = source.next_uint32()
        if word < limit:
            return word % n
