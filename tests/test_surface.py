import math

import pytest

from gopl import surface
from gopl.surface import corner, f, svg


def test_f_is_nan_at_origin():
    assert str(f(0.0, 0.0)) == "nan"


def test_f_depends_only_on_distance():
    assert f(3.0, 4.0) == f(4.0, 3.0) == f(-3.0, -4.0)


def test_f_matches_sin_r_over_r():
    assert f(0.0, math.pi) == pytest.approx(0.0, abs=1e-12)


def test_centre_corner_has_nan_height():
    sx, sy = corner(surface.CELLS // 2, surface.CELLS // 2)
    assert sx == surface.WIDTH / 2
    assert str(sy) == "nan"


@pytest.mark.parametrize("i,j", [(0, 0), (10, 90), (3, 77), (100, 0)])
def test_corner_mirror_symmetry(i, j):
    ax, ay = corner(i, j)
    bx, by = corner(j, i)
    assert ax + bx == pytest.approx(surface.WIDTH)
    assert ay == pytest.approx(by)


def test_svg_structure():
    doc = svg()
    assert doc.startswith("<svg xmlns='http://www.w3.org/2000/svg' ")
    assert "width='600' height='320'>" in doc
    assert doc.endswith("</svg>\n")
    assert doc.count("<polygon points='") == surface.CELLS * surface.CELLS
    assert "NaN" in doc


def test_main_writes_svg(capsys):
    assert surface.main([]) == 0
    out = capsys.readouterr().out
    assert out == svg()