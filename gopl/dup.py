"""Report lines that occur more than once in text or files."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Iterator


def _strip_line_end(line: str) -> str:
    """Drop one trailing newline and one carriage return before it."""
    return line.removesuffix("\n").removesuffix("\r")


def count_lines(lines: Iterable[str]) -> Counter[str]:
    """Count each line, ignoring its line terminator."""
    return Counter(_strip_line_end(line) for line in lines)


def count_text(text: str) -> Counter[str]:
    """Count the pieces of text split on newlines.

    A trailing newline yields a final empty piece, which is counted too.
    """
    return Counter(text.split("\n"))


def duplicates(counts: Counter[str]) -> Iterator[tuple[str, int]]:
    """Yield (line, count) for every line counted more than once."""
    for line, n in counts.items():
        if n > 1:
            yield line, n


def main(argv: list[str] | None = None) -> int:
    """Print duplicated lines from stdin or from the named files."""
    files = sys.argv[1:] if argv is None else argv
    counts: Counter[str] = Counter()
    if not files:
        counts.update(count_lines(sys.stdin))
    else:
        for name in files:
            try:
                with open(name, encoding="utf-8", errors="replace") as f:
                    counts.update(count_lines(f))
            except OSError as err:
                print(f"dup2: {err}", file=sys.stderr)
    for line, n in duplicates(counts):
        print(f"{n}\t{line}")
    return 0