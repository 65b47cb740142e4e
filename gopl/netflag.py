"""Network interface flags used as a bit field."""

from __future__ import annotations

import enum


class Flags(enum.IntFlag):
    """Interface flags."""

    UP = 1
    BROADCAST = 2
    LOOPBACK = 4
    POINT_TO_POINT = 8
    MULTICAST = 16
    RUNNING = 32


def is_up(v: int) -> bool:
    """Report whether the up flag is set."""
    return v & Flags.UP == Flags.UP


def turn_down(v: int) -> Flags:
    """Return v with the up flag cleared."""
    return Flags(int(v) & ~Flags.UP.value)


def set_broadcast(v: int) -> Flags:
    """Return v with the broadcast flag set."""
    return Flags(int(v) | Flags.BROADCAST.value)


def is_cast(v: int) -> bool:
    """Report whether broadcast or multicast is set."""
    return v & (Flags.BROADCAST | Flags.MULTICAST) != 0


def _line(v: int, flag: bool) -> str:
    return f"{int(v):b} {str(flag).lower()}"


def main(argv: list[str] | None = None) -> int:
    """Show the flags in binary as they are switched."""
    v = Flags.MULTICAST | Flags.UP
    print(_line(v, is_up(v)))
    v = turn_down(v)
    print(_line(v, is_up(v)))
    v = set_broadcast(v)
    print(_line(v, is_up(v)))
    print(_line(v, is_cast(v)))
    return 0