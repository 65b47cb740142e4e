"""GIF animations of random Lissajous figures."""

from __future__ import annotations

import io
import math
import random
import sys
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import BinaryIO

from PIL import Image

CYCLES = 5  # number of complete x oscillator revolutions
RES = 0.001  # angular resolution
SIZE = 100  # image canvas covers [-SIZE..+SIZE]
NFRAMES = 64  # number of animation frames
DELAY = 8  # delay between frames in 10ms units

PALETTE = [(255, 255, 255), (0, 0, 0)]
WHITE_INDEX = 0
BLACK_INDEX = 1


def _angles() -> list[float]:
    angles = []
    t = 0.0
    limit = CYCLES * 2 * math.pi
    while t < limit:
        angles.append(t)
        t += RES
    return angles


def _frame(columns: list[int], angles: list[float], freq: float, phase: float) -> Image.Image:
    side = 2 * SIZE + 1
    pixels = bytearray([WHITE_INDEX]) * (side * side)
    for px, t in zip(columns, angles):
        py = SIZE + int(math.sin(t * freq + phase) * SIZE + 0.5)
        if 0 <= px < side and 0 <= py < side:
            pixels[py * side + px] = BLACK_INDEX
    img = Image.frombytes("P", (side, side), bytes(pixels))
    img.putpalette([channel for color in PALETTE for channel in color])
    return img


def lissajous(out: BinaryIO, rng: random.Random | None = None) -> None:
    """Write an animated GIF of a Lissajous figure with a random frequency to out."""
    source = random.Random() if rng is None else rng
    freq = source.random() * 3.0  # relative frequency of y oscillator
    angles = _angles()
    columns = [SIZE + int(math.sin(t) * SIZE + 0.5) for t in angles]
    frames = []
    phase = 0.0
    for _ in range(NFRAMES):
        frames.append(_frame(columns, angles, freq, phase))
        phase += 0.1
    frames[0].save(
        out,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=DELAY * 10,
        loop=NFRAMES,
        optimize=False,
    )


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:  # noqa: N802
        buf = io.BytesIO()
        lissajous(buf)
        data = buf.getvalue()
        self.send_response(200)
        self.send_header("Content-Type", "image/gif")
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)


def main(argv: list[str] | None = None) -> int:
    """Write one animation to stdout, or serve animations with the "web" argument."""
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] == "web":
        try:
            with ThreadingHTTPServer(("localhost", 8000), _Handler) as server:
                server.serve_forever()
        except KeyboardInterrupt:
            return 0
        except OSError as err:
            print(f"lissajous: {err}", file=sys.stderr)
            return 1
        return 0
    lissajous(sys.stdout.buffer)
    sys.stdout.buffer.flush()
    return 0