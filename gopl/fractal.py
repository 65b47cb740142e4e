"""Fractal images as PNG, and conversion of images to JPEG."""

from __future__ import annotations

import argparse
import cmath
import io
import sys
from collections.abc import Callable
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

Color = tuple[int, int, int, int]

XMIN, YMIN, XMAX, YMAX = -2, -2, 2, 2
WIDTH, HEIGHT = 1024, 1024

BLACK: Color = (0, 0, 0, 255)


def _gray(y: int) -> Color:
    y &= 0xFF
    return (y, y, y, 255)


def _u8(x: float) -> int:
    return int(x) & 0xFF


def _channel(v: int) -> int:
    if 0 <= v < 1 << 24:
        return v >> 16
    return 0 if v < 0 else 255


def _ycbcr(y: int, cb: int, cr: int) -> Color:
    yy1 = y * 0x10101
    cb1 = cb - 128
    cr1 = cr - 128
    r = yy1 + 91881 * cr1
    g = yy1 - 22554 * cb1 - 46802 * cr1
    b = yy1 + 116130 * cb1
    return (_channel(r), _channel(g), _channel(b), 255)


def mandelbrot(z: complex) -> Color:
    """Shade z by how quickly it escapes the Mandelbrot iteration."""
    iterations = 200
    contrast = 15
    v = 0j
    for n in range(iterations):
        v = v * v + z
        if abs(v) > 2:
            return _gray(255 - contrast * n)
    return BLACK


def acos(z: complex) -> Color:
    """Color z by its complex arc cosine."""
    v = cmath.acos(z)
    blue = (_u8(v.real * 128) + 127) & 0xFF
    red = (_u8(v.imag * 128) + 127) & 0xFF
    return _ycbcr(192, blue, red)


def sqrt(z: complex) -> Color:
    """Color z by its complex square root."""
    v = cmath.sqrt(z)
    blue = (_u8(v.real * 128) + 127) & 0xFF
    red = (_u8(v.imag * 128) + 127) & 0xFF
    return _ycbcr(128, blue, red)


def newton(z: complex) -> Color:
    """Shade z by how fast Newton's method finds a root of z**4 - 1."""
    iterations = 37
    contrast = 7
    try:
        for i in range(iterations):
            z -= (z - 1 / (z * z * z)) / 4
            if abs(z * z * z * z - 1) < 1e-6:
                return _gray(255 - contrast * i)
    except (ZeroDivisionError, OverflowError):
        return BLACK
    return BLACK


def render(
    func: Callable[[complex], Color] = mandelbrot,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> Image.Image:
    """Render func over the square from -2-2i to 2+2i as an RGBA image."""
    img = Image.new("RGBA", (width, height))
    img.putdata(
        [
            func(
                complex(
                    px / width * (XMAX - XMIN) + XMIN,
                    py / height * (YMAX - YMIN) + YMIN,
                )
            )
            for py in range(height)
            for px in range(width)
        ]
    )
    return img


def to_jpeg(inp: BinaryIO, out: BinaryIO) -> str:
    """Decode an image from inp and write it to out as JPEG at quality 95.

    Reports the input format on stderr and returns it; raises ValueError
    when the input is not a recognised image.
    """
    data = io.BytesIO(inp.read())
    try:
        img = Image.open(data)
        img.load()
    except (UnidentifiedImageError, OSError) as err:
        raise ValueError("image: unknown format") from err
    kind = (img.format or "").lower()
    print("Input format =", kind, file=sys.stderr)
    if img.mode not in ("RGB", "L", "CMYK"):
        img = img.convert("RGB")
    img.save(out, format="JPEG", quality=95)
    return kind


_FUNCTIONS: dict[str, Callable[[complex], Color]] = {
    "mandelbrot": mandelbrot,
    "acos": acos,
    "sqrt": sqrt,
    "newton": newton,
}


def main(argv: list[str] | None = None) -> int:
    """Write a PNG image of a fractal to stdout."""
    parser = argparse.ArgumentParser(prog="mandelbrot", description="Emit a fractal PNG.")
    parser.add_argument("--func", choices=sorted(_FUNCTIONS), default="mandelbrot")
    parser.add_argument("--size", type=int, default=WIDTH)
    ns = parser.parse_args(argv)
    img = render(_FUNCTIONS[ns.func], ns.size, ns.size)
    img.save(sys.stdout.buffer, format="PNG")
    sys.stdout.buffer.flush()
    return 0


def jpeg_main(argv: list[str] | None = None) -> int:
    """Read an image from stdin and write it as JPEG to stdout."""
    try:
        to_jpeg(sys.stdin.buffer, sys.stdout.buffer)
    except (ValueError, OSError) as err:
        print(f"jpeg: {err}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    return 0