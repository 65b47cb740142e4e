"""Slice-style helpers: growable int slices, filtering, reversal and sums."""

from __future__ import annotations

import itertools
import re
import sys
from collections.abc import Iterable, Iterator

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")


class IntSlice:
    """A view of the first len items of a shared backing array of ints.

    Appending within capacity writes into the shared array, so slices
    made from the same origin can see each other's writes. Appending
    beyond capacity copies into a new array at least twice as large.
    """

    __slots__ = ("_array", "_len")

    def __init__(self, values: Iterable[int] = (), cap: int | None = None) -> None:
        items = list(values)
        if cap is None:
            cap = len(items)
        if cap < len(items):
            raise ValueError("capacity smaller than length")
        self._array = items + [0] * (cap - len(items))
        self._len = len(items)

    @classmethod
    def _view(cls, array: list[int], length: int) -> IntSlice:
        view = cls.__new__(cls)
        view._array = array
        view._len = length
        return view

    @property
    def cap(self) -> int:
        """Capacity of the backing array."""
        return len(self._array)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[int]:
        return iter(self._array[: self._len])

    def __getitem__(self, index):
        return list(self)[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IntSlice):
            return list(self) == list(other)
        if isinstance(other, list):
            return list(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + " ".join(str(v) for v in self) + "]"

    def __repr__(self) -> str:
        return f"IntSlice({list(self)!r}, cap={self.cap})"

    def append(self, *args: int) -> IntSlice:
        """Return a slice holding this slice's items followed by args."""
        zlen = self._len + len(args)
        if zlen <= self.cap:
            array = self._array
        else:
            zcap = max(zlen, 2 * self._len)
            array = self._array[: self._len] + [0] * (zcap - self._len)
        array[self._len:zlen] = args
        return IntSlice._view(array, zlen)


def growth_table(n: int) -> list[tuple[int, int, list[int]]]:
    """Append 0..n-1 one at a time and record (value, capacity, items)."""
    rows = []
    x = IntSlice()
    for i in range(n):
        x = x.append(i)
        rows.append((i, x.cap, list(x)))
    return rows


def nonempty(strings: Iterable[str]) -> list[str]:
    """Return only the non-empty strings, in order."""
    return [s for s in strings if s]


def reverse(s: list) -> None:
    """Reverse a list in place."""
    s.reverse()


def rotate_left(s: list, n: int) -> None:
    """Rotate a list left by n positions in place, using three reversals."""
    if not 0 <= n <= len(s):
        raise IndexError(f"rotation {n} out of range for length {len(s)}")
    s[:n] = s[:n][::-1]
    s[n:] = s[n:][::-1]
    s.reverse()


def sum_ints(*args: int) -> int:
    """Return the sum of the arguments; zero when there are none."""
    return sum(args)


def squares() -> Iterator[int]:
    """Yield the square numbers 1, 4, 9, ... one after another."""
    return (x * x for x in itertools.count(1))


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f'parsing "{text}": invalid syntax')
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f'parsing "{text}": value out of range')
    return value


def _format(values: Iterable[int]) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def rev_main(argv: list[str] | None = None) -> int:
    """Show reversal and rotation, then reverse each line of ints from stdin."""
    a = [0, 1, 2, 3, 4, 5]
    reverse(a)
    print(_format(a))
    s = [0, 1, 2, 3, 4, 5]
    rotate_left(s, 2)
    print(_format(s))
    for line in sys.stdin:
        try:
            ints = [_parse_int(field) for field in line.split()]
        except ValueError as err:
            print(err, file=sys.stderr)
            continue
        reverse(ints)
        print(_format(ints))
    return 0