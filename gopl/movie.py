"""Movies encoded to and decoded from JSON."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class Movie:
    """A film, its release year, whether it is in colour, and its actors."""

    title: str
    year: int
    color: bool = False
    actors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return the JSON object form; colour is left out when false."""
        d: dict = {"Title": self.title, "released": self.year}
        if self.color:
            d["color"] = True
        d["Actors"] = list(self.actors)
        return d


MOVIES = [
    Movie("Casablanca", 1942, False, ["Humphrey Bogart", "Ingrid Bergman"]),
    Movie("Cool Hand Luke", 1967, True, ["Paul Newman"]),
    Movie("Bullitt", 1968, True, ["Steve McQueen", "Jacqueline Bisset"]),
]

_HTML_SAFE = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def _escape(text: str) -> str:
    return text.translate(_HTML_SAFE)


def marshal(movies: Iterable[Movie]) -> str:
    """Encode movies as compact JSON."""
    data = [m.to_dict() for m in movies]
    return _escape(json.dumps(data, ensure_ascii=False, separators=(",", ":")))


def marshal_indent(movies: Iterable[Movie]) -> str:
    """Encode movies as JSON indented by four spaces per level."""
    data = [m.to_dict() for m in movies]
    return _escape(json.dumps(data, ensure_ascii=False, indent=4))


def titles(data: str | bytes) -> list[str]:
    """Decode a JSON array of objects and return each object's title.

    Keys match the title field without regard to case; the last match wins.
    """
    parsed = json.loads(data)
    if parsed is None:
        return []
    if not isinstance(parsed, list):
        raise ValueError("cannot decode JSON value into a list of titles")
    result = []
    for item in parsed:
        title = ""
        if item is not None:
            if not isinstance(item, dict):
                raise ValueError("cannot decode JSON value into a movie")
            for key, value in item.items():
                if key.casefold() == "title":
                    if value is None:
                        continue
                    if not isinstance(value, str):
                        raise ValueError("cannot decode non-string into Title")
                    title = value
        result.append(title)
    return result


def main(argv: list[str] | None = None) -> int:
    """Print the movies compactly, indented, and then just their titles."""
    print(marshal(MOVIES))
    data = marshal_indent(MOVIES)
    print(data)
    print("[" + " ".join("{" + t + "}" for t in titles(data)) + "]")
    return 0