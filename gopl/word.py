"""Palindrome checks for word games."""

from __future__ import annotations

from itertools import accumulate


def naive_is_palindrome(s: str) -> bool:
    """Compare the UTF-8 bytes of s at each character start with their mirror.

    Case and punctuation matter, and multi-byte characters are not
    handled as units.
    """
    data = s.encode("utf-8", "surrogatepass")
    starts = accumulate((len(c.encode("utf-8", "surrogatepass")) for c in s), initial=0)
    return all(data[i] == data[-1 - i] for i in starts if i < len(data))


def _lower(c: str) -> str:
    lowered = c.lower()
    return lowered if len(lowered) == 1 else c


def is_palindrome(s: str) -> bool:
    """Report whether s reads the same both ways, ignoring case and non-letters."""
    letters = [_lower(c) for c in s if c.isalpha()]
    return letters == letters[::-1]