import io
import random

import pytest
from PIL import Image, ImageSequence

from gopl.lissajous import DELAY, NFRAMES, PALETTE, SIZE, lissajous


def _render(seed):
    buf = io.BytesIO()
    lissajous(buf, random.Random(seed))
    return buf.getvalue()


@pytest.fixture(scope="module")
def gif_bytes():
    return _render(1)


def test_gif_signature(gif_bytes):
    assert gif_bytes[:6] == b"GIF89a"


def test_frame_count_and_loop(gif_bytes):
    with Image.open(io.BytesIO(gif_bytes)) as im:
        assert im.n_frames == NFRAMES
        assert im.info["loop"] == NFRAMES


def test_frame_size_and_delay(gif_bytes):
    with Image.open(io.BytesIO(gif_bytes)) as im:
        assert im.size == (2 * SIZE + 1, 2 * SIZE + 1)
        assert im.info["duration"] == DELAY * 10


def test_only_palette_colors_and_some_black(gif_bytes):
    allowed = set(PALETTE)
    with Image.open(io.BytesIO(gif_bytes)) as im:
        for frame in ImageSequence.Iterator(im):
            colors = {color for _, color in frame.convert("RGB").getcolors()}
            assert colors <= allowed
            assert PALETTE[1] in colors


def test_same_seed_is_deterministic(gif_bytes):
    assert _render(1) == gif_bytes


def test_different_seed_differs(gif_bytes):
    assert _render(2) != gif_bytes