"""An SVG rendering of the surface z = sin(r)/r."""

from __future__ import annotations

import math
import sys

from gopl.tempconv import _format_g

WIDTH, HEIGHT = 600, 320
CELLS = 100
XYRANGE = 30.0
XYSCALE = WIDTH / 2 / XYRANGE
ZSCALE = HEIGHT * 0.4
ANGLE = math.pi / 6

_SIN30, _COS30 = math.sin(ANGLE), math.cos(ANGLE)


def f(x: float, y: float) -> float:
    """Height of the surface at (x, y); NaN at the origin."""
    r = math.hypot(x, y)
    if r == 0:
        return math.nan
    return math.sin(r) / r


def corner(i: int, j: int) -> tuple[float, float]:
    """Project the corner of grid cell (i, j) onto the canvas."""
    x = XYRANGE * (i / CELLS - 0.5)
    y = XYRANGE * (j / CELLS - 0.5)
    z = f(x, y)
    sx = WIDTH / 2 + (x - y) * _COS30 * XYSCALE
    sy = HEIGHT / 2 + (x + y) * _SIN30 * XYSCALE - z * ZSCALE
    return sx, sy


def _point(p: tuple[float, float]) -> str:
    return f"{_format_g(p[0])},{_format_g(p[1])}"


def svg() -> str:
    """Return the whole SVG document, one polygon per grid cell."""
    parts = [
        "<svg xmlns='http://www.w3.org/2000/svg' "
        "style='stroke: grey; fill: white; stroke-width: 0.7' "
        f"width='{WIDTH}' height='{HEIGHT}'>"
    ]
    for i in range(CELLS):
        for j in range(CELLS):
            points = (corner(i + 1, j), corner(i, j), corner(i, j + 1), corner(i + 1, j + 1))
            parts.append("<polygon points='" + " ".join(map(_point, points)) + "'/>\n")
    parts.append("</svg>\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Write the SVG document to stdout."""
    sys.stdout.write(svg())
    return 0