"""Integer sources used by the number commands.

Two generators share the same bounds validation:

    UniformNumberGenerator  independent draws over [min, max)
    CyclicNumberGenerator   min, min + 1, ..., max, min, ...  over [min, max]

The uniform generator treats ``max`` as exclusive while the cyclic one
treats it as inclusive.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from .errors import ArgumentError

# Platform clients parse integers as IEEE-754 doubles.
MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -(2**53 - 1)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class NumberGenerator(ABC):
    def __init__(self, min: int = 0, max: int | None = None) -> None:
        if max is None and _is_int(min):
            max = min + 6
        if not _is_int(min) or not _is_int(max):
            raise ArgumentError("min and max must be integers")
        if min >= max:
            raise ArgumentError("min must be less than the max")
        if max > MAX_SAFE_INTEGER:
            raise ArgumentError(f"max must be at most {MAX_SAFE_INTEGER}")
        if min < MIN_SAFE_INTEGER:
            raise ArgumentError(f"min must be at least {MIN_SAFE_INTEGER}")
        self._min = min
        self._max = max

    @property
    def min(self) -> int:
        return self._min

    @property
    def max(self) -> int:
        return self._max

    @abstractmethod
    def next_number(self) -> int:
        """Return the next number from the generator."""


class UniformNumberGenerator(NumberGenerator):
    def __init__(self, min: int = 0, max: int | None = None, *, rng: random.Random | None = None) -> None:
        super().__init__(min, max)
        self._rng = rng or random

    def next_number(self) -> int:
        return self._rng.randrange(self._min, self._max)


class CyclicNumberGenerator(NumberGenerator):
    def __init__(self, min: int = 0, max: int | None = None) -> None:
        super().__init__(min, max)
        self._current = self._min

    def next_number(self) -> int:
        value = self._current
        self._current = self._min if self._current == self._max else self._current + 1
        return value


def generate_numbers(count: int, generator: NumberGenerator) -> list[int]:
    if not _is_int(count) or count <= 0:
        raise ArgumentError("count must be a positive integer")
    return [generator.next_number() for _ in range(count)]
