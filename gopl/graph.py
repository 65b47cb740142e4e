"""Directed graphs as maps of sets, topological order and breadth-first walks."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Mapping, Sequence

PREREQS: dict[str, list[str]] = {
    "algorithms": ["data structures"],
    "calculus": ["linear algebra"],
    "compilers": [
        "data structures",
        "formal languages",
        "computer organization",
    ],
    "data structures": ["discrete math"],
    "databases": ["data structures"],
    "discrete math": ["intro to programming"],
    "formal languages": ["discrete math"],
    "networks": ["operating systems"],
    "operating systems": ["data structures", "computer organization"],
    "programming languages": ["data structures", "computer organization"],
}


class Graph:
    """A directed graph keyed by node name."""

    def __init__(self) -> None:
        self._edges: dict[str, set[str]] = {}

    def add_edge(self, src: str, dst: str) -> None:
        """Add an edge from src to dst."""
        self._edges.setdefault(src, set()).add(dst)

    def has_edge(self, src: str, dst: str) -> bool:
        """Report whether there is an edge from src to dst."""
        return dst in self._edges.get(src, ())

    def __contains__(self, node: object) -> bool:
        return node in self._edges


def topo_sort(m: Mapping[str, Sequence[str]]) -> list[str]:
    """Order the nodes so that each comes after everything it depends on."""
    order: list[str] = []
    seen: set[str] = set()

    def visit_all(items: Iterable[str]) -> None:
        for item in items:
            if item not in seen:
                seen.add(item)
                visit_all(m.get(item, ()))
                order.append(item)

    visit_all(sorted(m))
    return order


def breadth_first(
    f: Callable[[str], Iterable[str] | None], worklist: Iterable[str]
) -> list[str]:
    """Call f at most once for each item, adding what it returns to the work.

    Returns the items in the order f was called on them.
    """
    seen: set[str] = set()
    visited: list[str] = []
    pending = list(worklist)
    while pending:
        items, pending = pending, []
        for item in items:
            if item not in seen:
                seen.add(item)
                visited.append(item)
                pending.extend(f(item) or ())
    return visited


def main(argv: list[str] | None = None) -> int:
    """Print the course prerequisites in topological order."""
    for i, course in enumerate(topo_sort(PREREQS), start=1):
        print(f"{i}:\t{course}")
    return 0