from __future__ import annotations

from dataclasses import dataclass

import pytest

from gopl.equal import equal


class MyStr(str):
    pass


@dataclass(eq=False)
class Ref:
    value: object = None


@dataclass(eq=False)
class Link:
    value: str
    tail: Link | None = None


def _self_ref() -> Ref:
    r = Ref()
    r.value = r
    return r


ONE = Ref(1)
ONE_AGAIN = Ref(1)
TWO = Ref(2)
CYCLE_PTR_1 = _self_ref()
CYCLE_PTR_2 = _self_ref()
CYCLE_SLICE: list = [None]
CYCLE_SLICE[0] = CYCLE_SLICE
FUNC = lambda: None  # noqa: E731
IFACE_1 = Ref(ONE)
IFACE_1_AGAIN = Ref(ONE_AGAIN)
IFACE_2 = Ref(TWO)


@pytest.mark.parametrize(
    "x, y, want",
    [
        (1, 1, True),
        (1, 2, False),
        (1, 1.0, False),
        ("foo", "foo", True),
        ("foo", "bar", False),
        (MyStr("foo"), "foo", False),
        (["foo"], ["foo"], True),
        (["foo"], ["bar"], False),
        ([], [], True),
        (CYCLE_SLICE, CYCLE_SLICE, True),
        ({"foo": [1, 2, 3]}, {"foo": [1, 2, 3]}, True),
        ({"foo": [1, 2, 3]}, {"foo": [1, 2, 3, 4]}, False),
        ({}, {}, True),
        ({"a": 1}, {"b": 1}, False),
        (ONE, ONE, True),
        (ONE, TWO, False),
        (ONE, ONE_AGAIN, True),
        (Ref(), Ref(), True),
        (CYCLE_PTR_1, CYCLE_PTR_1, True),
        (CYCLE_PTR_2, CYCLE_PTR_2, True),
        (CYCLE_PTR_1, CYCLE_PTR_2, True),
        (None, None, True),
        (None, FUNC, False),
        (lambda: None, lambda: None, False),
        (FUNC, FUNC, True),
        ((1, 2, 3), (1, 2, 3), True),
        ((1, 2, 3), (1, 2, 4), False),
        (IFACE_1, IFACE_1, True),
        (IFACE_1, IFACE_2, False),
        (IFACE_1_AGAIN, IFACE_1, True),
        (True, 1, False),
    ],
)
def test_equal(x, y, want):
    assert equal(x, y) is want


def test_equal_examples():
    assert equal([1, 2, 3], [1, 2, 3]) is True
    assert equal(["foo"], ["bar"]) is False
    assert equal([], []) is True
    assert equal({}, {}) is True


def test_equal_cycle():
    a, b, c = Link("a"), Link("b"), Link("c")
    a.tail, b.tail, c.tail = b, a, c
    assert equal(a, a) is True
    assert equal(b, b) is True
    assert equal(c, c) is True
    assert equal(a, b) is False
    assert equal(a, c) is False


def test_equal_is_symmetric_for_lists():
    x = [1, [2, {"k": (3, 4)}]]
    y = [1, [2, {"k": (3, 4)}]]
    assert equal(x, y) and equal(y, x)
    y[1][1]["k"] = (3, 5)
    assert not equal(x, y) and not equal(y, x)