"""Print command-line arguments joined by a separator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO


def echo(newline: bool, sep: str, args: Sequence[str], out: TextIO | None = None) -> None:
    """Write args joined by sep to out, followed by a newline if asked."""
    stream = sys.stdout if out is None else out
    stream.write(sep.join(args))
    if newline:
        stream.write("\n")


def main(argv: list[str] | None = None) -> int:
    """Parse -n and -s, then echo the remaining arguments."""
    parser = argparse.ArgumentParser(prog="echo", description="Print its arguments.")
    parser.add_argument("-n", action="store_true", help="omit trailing newline")
    parser.add_argument("-s", default=" ", help="separator")
    parser.add_argument("args", nargs=argparse.REMAINDER)
    ns = parser.parse_args(argv)
    echo(not ns.n, ns.s, ns.args)
    return 0