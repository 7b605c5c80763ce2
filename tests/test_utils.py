import pytest

from virtualrig.utils import (
    MAX_PRIME,
    PRIMES,
    max2,
    max3,
    max4,
    mid3,
    min2,
    min3,
    min4,
    next_largest_prime,
    square,
)


def test_next_largest_prime_small_values():
    assert next_largest_prime(0) == 11
    assert next_largest_prime(11) == 11
    assert next_largest_prime(12) == 37


def test_next_largest_prime_exact_table_entries():
    for p in PRIMES:
        assert next_largest_prime(p) == p


def test_next_largest_prime_is_at_least_request_and_in_table():
    for x in (1, 100, 500, 9999, 123456, 50000000):
        p = next_largest_prime(x)
        assert p >= x
        assert p in PRIMES
        smaller = [q for q in PRIMES if q < p]
        assert all(q < x for q in smaller)


def test_next_largest_prime_max():
    assert next_largest_prime(MAX_PRIME) == MAX_PRIME


def test_next_largest_prime_too_large():
    with pytest.raises(ValueError):
        next_largest_prime(MAX_PRIME + 1)


def test_next_largest_prime_negative():
    with pytest.raises(ValueError):
        next_largest_prime(-1)


@pytest.mark.parametrize(
    "args, expected",
    [
        ((2, 1, 3), 2),
        ((3, 1, 2), 2),
        ((1, 2, 3), 2),
        ((3, 2, 1), 2),
        ((1, 3, 2), 2),
        ((5, 5, 9), 9),
    ],
)
def test_mid3(args, expected):
    assert mid3(*args) == expected


def test_mid3_matches_median_for_distinct():
    for triple in [(4, 9, 1), (-3, 0, 7), (0.5, 0.25, 0.75)]:
        assert mid3(*triple) == sorted(triple)[1]


def test_min_max_helpers_agree_with_builtins():
    values = [(3, 8), (8, 3), (-1, -1)]
    for x, y in values:
        assert max2(x, y) == max(x, y)
        assert min2(x, y) == min(x, y)
    triple = (4, -2, 9)
    assert max3(*triple) == max(triple)
    assert min3(*triple) == min(triple)
    quad = (4, -2, 9, 0)
    assert max4(*quad) == max(quad)
    assert min4(*quad) == min(quad)


def test_square():
    assert square(-7) == 49