"""Small string helpers: base names, digit grouping and list formatting."""

from __future__ import annotations

import sys
from collections.abc import Iterable


def basename(s: str) -> str:
    """Remove directory components and a trailing .suffix."""
    s = s[s.rfind("/") + 1:]
    dot = s.rfind(".")
    return s[:dot] if dot >= 0 else s


def basename_scan(s: str) -> str:
    """Remove directory components and a trailing .suffix, by partitioning."""
    s = s.rpartition("/")[2]
    head, sep, tail = s.rpartition(".")
    return head if sep else tail


def comma(s: str) -> str:
    """Insert commas in a non-negative decimal integer string."""
    if len(s) <= 3:
        return s
    return comma(s[:-3]) + "," + s[-3:]


def ints_to_string(values: Iterable[int]) -> str:
    """Format integers as a bracketed, comma-separated list."""
    return "[" + ", ".join(str(v) for v in values) + "]"


def basename_main(argv: list[str] | None = None) -> int:
    """Print the base name of each line read from stdin."""
    for line in sys.stdin:
        print(basename(line.removesuffix("\n").removesuffix("\r")))
    return 0


def comma_main(argv: list[str] | None = None) -> int:
    """Print each argument with commas at each power of 1000."""
    args = sys.argv[1:] if argv is None else argv
    for arg in args:
        print(f"  {comma(arg)}")
    return 0