"""Small numeric helpers and the prime table used to size hash tables."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")

# Primes used for hashing; they are not among the table sizes below.
LARGE_PRIME_A = 10007
LARGE_PRIME_B = 11003
LARGE_PRIME_C = 12007
LARGE_PRIME_D = 13001

# Hash table sizes, each roughly twice the previous one.
PRIMES = (
    11,
    37,
    79,
    127,
    239,
    421,
    1021,
    2383,
    5749,
    7127,
    10079,
    13627,
    16007,
    21163,
    46307,
    78191,
    100459,
    213977,
    453137,
    1299827,
    2599829,
    5399833,
    11099833,
    24099857,
    52099877,
    100000000,
)

MAX_PRIME = 100000000


def square(x):
    """Return ``x * x``."""
    return x * x


def max2(x, y):
    """The larger of two values; ``x`` on ties."""
    return x if x >= y else y


def min2(x, y):
    """The smaller of two values; ``y`` on ties."""
    return y if x >= y else x


def max3(x, y, z):
    """The largest of three values."""
    if x >= y and x >= z:
        return x
    if y >= x and y >= z:
        return y
    return z


def min3(x, y, z):
    """The smallest of three values."""
    if x <= y and x <= z:
        return x
    if y <= x and y <= z:
        return y
    return z


def max4(x, y, z, w):
    """The largest of four values."""
    return max2(max2(x, y), max2(z, w))


def min4(x, y, z, w):
    """The smallest of four values."""
    return min2(min2(x, y), min2(z, w))


def mid3(x, y, z):
    """The value strictly between the other two; ``z`` when there is none."""
    if y < x < z or z < x < y:
        return x
    if x < y < z or z < y < x:
        return y
    return z


def next_largest_prime(x: int) -> int:
    """Smallest table size in PRIMES that is at least ``x``.

    Raises ValueError when ``x`` is negative or larger than MAX_PRIME.
    """
    if x < 0 or x > MAX_PRIME:
        raise ValueError(
            f"requested size ({x}) for hash table is out of range (max {MAX_PRIME})"
        )
    return next(p for p in PRIMES if x <= p)