"""
Sources of uniformly distributed random integers.

The generator only needs ``next_int(bound)``: a uniform integer in
``[0, bound)``. Production code uses the operating system CSPRNG through
:mod:`secrets`; tests and reproducible runs use a seeded
:class:`random.Random`.
"""

import random
import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can produce a uniform random integer below a bound."""

    def next_int(self, bound: int) -> int:
        ...


class SecureRandomSource:
    """Cryptographically secure source backed by ``secrets.randbelow``.

    Draws come from ``os.urandom`` and may be shared between threads.
    """

    def next_int(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return secrets.randbelow(bound)

    def __repr__(self) -> str:
        return "SecureRandomSource()"


class SeededRandomSource:
    """Deterministic source for tests and reproducible output.

    The seed is mandatory. Not suitable for real passwords: anyone who
    knows the seed can reproduce every draw.
    """

    def __init__(self, seed: int):
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"seed must be an int, got {type(seed).__name__}")
        self.seed = seed
        self._rng = random.Random(seed)

    def next_int(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return self._rng.randrange(bound)

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self.seed!r})"


def default_random_source() -> RandomSource:
    """Return the production random source."""
    return SecureRandomSource()
