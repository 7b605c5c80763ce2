"""A growable array with unordered removal, and a hashed bag of elements."""

from __future__ import annotations

import random
from typing import Callable, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")

Key = Tuple[int, int, int]


class Array(Generic[T]):
    """A growable array; removal moves the last element into the gap."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: List[T] = []

    @property
    def capacity(self) -> int:
        """Current reserved size; doubles when the array is full."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, elem: object) -> bool:
        return elem in self._items

    def __getitem__(self, i: int) -> T:
        self._check_index(i)
        return self._items[i]

    def _check_index(self, i: int) -> None:
        if not 0 <= i < len(self._items):
            raise IndexError(f"index {i} out of range for array of {len(self._items)}")

    def add(self, elem: T) -> None:
        """Append an element, doubling the capacity when full."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(elem)

    def add_no_duplicates(self, elem: T) -> None:
        """Append an element unless an equal one is already present."""
        if elem not in self._items:
            self.add(elem)

    def replace(self, i: int, elem: T) -> T:
        """Put ``elem`` at position ``i`` and return what was there."""
        self._check_index(i)
        previous = self._items[i]
        self._items[i] = elem
        return previous

    def remove(self, elem: T) -> None:
        """Remove the first equal element; the last element takes its place."""
        try:
            index = self._items.index(elem)
        except ValueError:
            raise ValueError(f"{elem!r} is not in the array") from None
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def __repr__(self) -> str:
        return f"Array({self._items!r})"


def extract_int(e: int) -> Key:
    """Key function for bags of integers."""
    return (e, 0, 0)


class Bag(Generic[T]):
    """An unordered collection indexed by a three-integer key.

    ``extract`` maps each element to its key ``(a, b, c)``.  Several elements
    may share a key; equal elements may not be added twice.
    """

    def __init__(self, extract: Callable[[T], Key] = extract_int) -> None:
        self._extract = extract
        self._buckets: Dict[Key, List[T]] = {}
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        for bucket in self._buckets.values():
            yield from bucket

    def __contains__(self, elem: object) -> bool:
        if elem is None:
            return False
        bucket = self._buckets.get(self._key(elem))  # type: ignore[arg-type]
        return bucket is not None and elem in bucket

    def _key(self, elem: T) -> Key:
        a, b, c = self._extract(elem)
        return (a, b, c)

    def add(self, elem: T) -> None:
        """Insert an element; raises ValueError if an equal one is present."""
        if elem is None:
            raise ValueError("cannot add None to a bag")
        if elem in self:
            raise ValueError(f"{elem!r} is already in the bag")
        self._buckets.setdefault(self._key(elem), []).append(elem)
        self._count += 1

    def add_no_duplicates(self, elem: T) -> None:
        """Insert an element unless an equal one is present."""
        if elem not in self:
            self.add(elem)

    def remove(self, elem: T) -> None:
        """Remove an element; raises KeyError if it is not present."""
        if elem is None:
            raise KeyError(elem)
        key = self._key(elem)
        bucket = self._buckets.get(key)
        if bucket is None or elem not in bucket:
            raise KeyError(elem)
        bucket.remove(elem)
        if not bucket:
            del self._buckets[key]
        self._count -= 1

    def _lookup(self, key: Key) -> Optional[T]:
        bucket = self._buckets.get(key)
        return bucket[0] if bucket else None

    def get(self, a: int, b: int) -> Optional[T]:
        """The element keyed ``(a, b, 0)``, or None."""
        if a == b:
            raise ValueError("the two indices must differ")
        return self._lookup((a, b, 0))

    def get_reorder(self, *args: int) -> Optional[T]:
        """Look up by two or three distinct indices given in any rotation.

        Two indices are put in increasing order; three are rotated so that
        the smallest comes first.
        """
        if len(args) == 2:
            a, b = args
            if a == b:
                raise ValueError("the indices must be distinct")
            return self.get(a, b) if a < b else self.get(b, a)
        if len(args) == 3:
            a, b, c = args
            if a == b or b == c or a == c:
                raise ValueError("the indices must be distinct")
            if a < b and a < c:
                return self._lookup((a, b, c))
            if b < a and b < c:
                return self._lookup((b, c, a))
            return self._lookup((c, a, b))
        raise TypeError(f"get_reorder takes 2 or 3 indices, got {len(args)}")

    def choose_random(self, rng: random.Random) -> T:
        """A uniformly chosen element; raises ValueError if the bag is empty."""
        if not self._count:
            raise ValueError("cannot choose from an empty bag")
        return rng.choice(list(self))

    def clear(self) -> None:
        """Remove every element."""
        self._buckets.clear()
        self._count = 0

    def __repr__(self) -> str:
        return f"Bag({list(self)!r})"