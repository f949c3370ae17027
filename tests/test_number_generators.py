from __future__ import annotations

import random

import pytest

from slashbot.commands.errors import ArgumentError
from slashbot.commands.numbers import (
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    CyclicNumberGenerator,
    UniformNumberGenerator,
    generate_numbers,
)


def test_cyclic_generator_cycles_through_all_integers():
    gen = CyclicNumberGenerator(0, 6)
    assert [gen.next_number() for _ in range(12)] == [i % 7 for i in range(12)]


@pytest.mark.parametrize("lo,hi", [(-3, 2), (10, 11), (5, 9)])
def test_cyclic_sequence_wraps_inclusive_max(lo: int, hi: int):
    gen = CyclicNumberGenerator(lo, hi)
    width = hi - lo + 1
    assert [gen.next_number() for _ in range(3 * width + 1)] == [lo + (i % width) for i in range(3 * width + 1)]


def test_default_max_is_min_plus_six():
    gen = CyclicNumberGenerator(4)
    assert (gen.min, gen.max) == (4, 10)
    assert (UniformNumberGenerator().min, UniformNumberGenerator().max) == (0, 6)


@pytest.mark.parametrize("cls", [CyclicNumberGenerator, UniformNumberGenerator])
def test_invalid_ranges_are_rejected(cls):
    with pytest.raises(ArgumentError):
        cls(6, 1)
    with pytest.raises(ArgumentError):
        cls(6, 6)
    with pytest.raises(ArgumentError):
        cls(1.2, 7)
    with pytest.raises(ArgumentError):
        cls(1, 7.4)
    with pytest.raises(ArgumentError):
        cls(True, 7)
    with pytest.raises(ArgumentError):
        cls("1", 7)


def test_integer_boundaries():
    with pytest.raises(ArgumentError):
        CyclicNumberGenerator(MAX_SAFE_INTEGER, MAX_SAFE_INTEGER + 1)
    with pytest.raises(ArgumentError):
        CyclicNumberGenerator(MIN_SAFE_INTEGER - 1, MIN_SAFE_INTEGER)
    with pytest.raises(ArgumentError):
        CyclicNumberGenerator(MAX_SAFE_INTEGER - 1)

    start = MAX_SAFE_INTEGER - 2
    gen = CyclicNumberGenerator(start, MAX_SAFE_INTEGER)
    assert gen.next_number() == start
    assert gen.next_number() == start + 1
    assert gen.next_number() == start + 2
    assert gen.next_number() == start

    assert CyclicNumberGenerator(MIN_SAFE_INTEGER, MIN_SAFE_INTEGER + 1).next_number() == MIN_SAFE_INTEGER


def test_uniform_generator_stays_in_exclusive_range_and_covers_it():
    gen = UniformNumberGenerator(0, 6, rng=random.Random(1234))
    values = generate_numbers(100, gen)
    assert all(0 <= v < 6 for v in values)

    seen = set(generate_numbers(5000, gen))
    assert seen == {0, 1, 2, 3, 4, 5}


def test_uniform_generator_without_rng_uses_module_random():
    gen = UniformNumberGenerator(-2, 3)
    assert all(-2 <= gen.next_number() < 3 for _ in range(200))


def test_generate_numbers_returns_draws_in_order():
    arr = generate_numbers(50, CyclicNumberGenerator(0, 6))
    assert len(arr) == 50
    assert arr == [i % 7 for i in range(50)]


@pytest.mark.parametrize("count", [0, -1, 1.2, True, "3"])
def test_generate_numbers_rejects_bad_count(count):
    with pytest.raises(ArgumentError):
        generate_numbers(count, CyclicNumberGenerator(0, 6))
