"""
strongpass.rand
Cryptographically secure random primitives.

Everything random in the generator (length, character picks, shuffle order,
fallback class choice) goes through RandomSource.randint.
"""

from random import SystemRandom
from typing import List, Optional, Sequence, TypeVar

from .errors import EmptyCharacterSet

T = TypeVar("T")


class RandomSource:
    def __init__(self, rng: Optional[SystemRandom] = None):
        self._rng = rng or SystemRandom()

    def randint(self, low: int, high: int) -> int:
        """Return an integer in [low, high], both ends inclusive."""
        if low > high:
            raise ValueError(f"empty range [{low}, {high}]")
        return self._rng.randint(low, high)

    def pick(self, chars: Sequence[T]) -> T:
        if not chars:
            raise EmptyCharacterSet()
        return chars[self.randint(0, len(chars) - 1)]

    def shuffle(self, items: List[T]) -> None:
        """In-place Fisher-Yates shuffle."""
        for i in range(len(items) - 1, 0, -1):
            j = self.randint(0, i)
            items[i], items[j] = items[j], items[i]


_default = RandomSource()


def default_source() -> RandomSource:
    return _default


def random_int(low: int, high: int) -> int:
    return _default.randint(low, high)
