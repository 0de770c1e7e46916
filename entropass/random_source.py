"""
Randomness providers.

Every draw in the generator goes through a `RandomSource`, so production
code can use the OS CSPRNG (or the quantum engine) and tests can pin a seed
without touching the generation algorithm.
"""

from __future__ import annotations

import random
import secrets
from typing import MutableSequence, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def randbelow(self, n: int) -> int:
        """Uniform integer in [0, n). Raises ValueError for n <= 0."""
        ...


class SystemRandomSource:
    """
    OS-backed source (`secrets`). Stateless and safe to share across threads.
    """

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randbelow() needs a positive bound, got {n}")
        return secrets.randbelow(n)


class SeededRandomSource:
    """
    Deterministic source for tests and reproducible demos. Not for real
    passwords: the seed fully determines the output.
    """

    def __init__(self, seed: int | str | bytes | None = None) -> None:
        self._rng = random.Random(seed)

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randbelow() needs a positive bound, got {n}")
        return self._rng.randrange(n)


DEFAULT_SOURCE: RandomSource = SystemRandomSource()


def choice(seq: Sequence[T], source: RandomSource | None = None) -> T:
    """Pick one element of a non-empty sequence uniformly."""
    if not seq:
        raise IndexError("cannot choose from an empty sequence")
    src = source or DEFAULT_SOURCE
    return seq[src.randbelow(len(seq))]


def shuffle(items: MutableSequence[T], source: RandomSource | None = None) -> None:
    """
    In-place Fisher-Yates shuffle: walk from the last index down, swapping
    each slot with a uniformly chosen slot at or before it. Every
    permutation is equally likely given a uniform source.
    """
    src = source or DEFAULT_SOURCE
    for i in range(len(items) - 1, 0, -1):
        j = src.randbelow(i + 1)
        items[i], items[j] = items[j], items[i]
