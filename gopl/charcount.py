"""Count Unicode characters in UTF-8 input, and drop repeated lines."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

UTF_MAX = 4

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    "'": "\\'",
}


@dataclass
class CharCounts:
    """Per-character counts, counts by encoded length, and invalid bytes."""

    counts: Counter[str] = field(default_factory=Counter)
    utflen: list[int] = field(default_factory=lambda: [0] * (UTF_MAX + 1))
    invalid: int = 0


def _lead_length(b: int) -> int:
    if b < 0x80:
        return 1
    if 0xC2 <= b <= 0xDF:
        return 2
    if 0xE0 <= b <= 0xEF:
        return 3
    if 0xF0 <= b <= 0xF4:
        return 4
    return 0


def _runes(data: bytes) -> Iterator[tuple[str | None, int]]:
    """Yield (character, byte length), or (None, 1) for each invalid byte."""
    i = 0
    while i < len(data):
        n = _lead_length(data[i])
        ch = None
        if n:
            try:
                ch = data[i:i + n].decode("utf-8")
            except UnicodeDecodeError:
                ch = None
        if ch is None or len(ch) != 1:
            yield None, 1
            i += 1
        else:
            yield ch, n
            i += n


def count_chars(data: bytes) -> CharCounts:
    """Count the characters of UTF-8 data."""
    result = CharCounts()
    for ch, n in _runes(data):
        if ch is None:
            result.invalid += 1
            continue
        result.counts[ch] += 1
        result.utflen[n] += 1
    return result


def _quote_rune(c: str) -> str:
    if c in _ESCAPES:
        body = _ESCAPES[c]
    elif c.isprintable():
        body = c
    else:
        o = ord(c)
        if o < 0x20 or o == 0x7F:
            body = f"\\x{o:02x}"
        elif o < 0x10000:
            body = f"\\u{o:04x}"
        else:
            body = f"\\U{o:08x}"
    return f"'{body}'"


def _report(cc: CharCounts) -> str:
    lines = ["rune\tcount"]
    lines.extend(f"{_quote_rune(c)}\t{n}" for c, n in cc.counts.items())
    lines.append("")
    lines.append("len\tcount")
    lines.extend(f"{i}\t{n}" for i, n in enumerate(cc.utflen) if i > 0)
    if cc.invalid > 0:
        lines.append("")
        lines.append(f"{cc.invalid} invalid UTF-8 characters")
    return "\n".join(lines) + "\n"


def dedup(lines: Iterable[str]) -> Iterator[str]:
    """Yield each line the first time it appears."""
    seen: set[str] = set()
    for line in lines:
        if line not in seen:
            seen.add(line)
            yield line


def charcount_main(argv: list[str] | None = None) -> int:
    """Print character counts for the bytes on stdin."""
    sys.stdout.write(_report(count_chars(sys.stdin.buffer.read())))
    return 0


def dedup_main(argv: list[str] | None = None) -> int:
    """Print each line of stdin once, dropping later duplicates."""
    stripped = (line.removesuffix("\n").removesuffix("\r") for line in sys.stdin)
    for line in dedup(stripped):
        print(line)
    return 0