"""Celsius and Fahrenheit temperatures and conversions between them."""

from __future__ import annotations

import math
import sys
from decimal import Decimal


def _format_g(x: float) -> str:
    """Format x with the shortest digits, switching to exponent form like %g."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"
    sign, digit_tuple, exp = Decimal(repr(x)).as_tuple()
    digits = "".join(map(str, digit_tuple))
    point = len(digits) + exp
    digits = digits.rstrip("0") or "0"
    prefix = "-" if sign else ""
    exp10 = point - 1
    if exp10 < -4 or exp10 >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        esign = "-" if exp10 < 0 else "+"
        return f"{prefix}{mantissa}e{esign}{abs(exp10):02d}"
    if point <= 0:
        body = "0." + "0" * -point + digits
    elif point >= len(digits):
        body = digits + "0" * (point - len(digits))
    else:
        body = digits[:point] + "." + digits[point:]
    return prefix + body


class _Temperature(float):
    """A float tagged with a temperature scale."""

    _unit = ""

    def _coerce(self, other: object) -> float | None:
        if isinstance(other, _Temperature) and type(other) is not type(self):
            raise TypeError(
                f"mismatched temperature scales: {type(self).__name__} "
                f"and {type(other).__name__}"
            )
        if isinstance(other, (int, float)):
            return float(other)
        return None

    def _wrap(self, value: float) -> _Temperature:
        return type(self)(value)

    def __add__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self._wrap(float(self) + o)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self._wrap(float(self) - o)

    def __rsub__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self._wrap(o - float(self))

    def __mul__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self._wrap(float(self) * o)

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self._wrap(float(self) / o)

    def __rtruediv__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self._wrap(o / float(self))

    def __neg__(self):
        return self._wrap(-float(self))

    def __str__(self) -> str:
        return f"{_format_g(float(self))}{self._unit}"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        if spec == "g":
            return _format_g(float(self))
        return format(float(self), spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self)!r})"


class Celsius(_Temperature):
    """A temperature in degrees Celsius."""

    _unit = "°C"


class Fahrenheit(_Temperature):
    """A temperature in degrees Fahrenheit."""

    _unit = "°F"


ABSOLUTE_ZERO_C = Celsius(-273.15)
FREEZING_C = Celsius(0)
BOILING_C = Celsius(100)


def c_to_f(c: float) -> Fahrenheit:
    """Convert a Celsius temperature to Fahrenheit."""
    return Fahrenheit(float(c) * 9 / 5 + 32)


def f_to_c(f: float) -> Celsius:
    """Convert a Fahrenheit temperature to Celsius."""
    return Celsius((float(f) - 32) * 5 / 9)


def _parse_float(text: str) -> float:
    if text != text.strip() or "_" in text:
        raise ValueError(f'parsing "{text}": invalid syntax')
    try:
        return float(text)
    except ValueError:
        raise ValueError(f'parsing "{text}": invalid syntax') from None


def main(argv: list[str] | None = None) -> int:
    """Show each numeric argument as both Fahrenheit and Celsius."""
    args = sys.argv[1:] if argv is None else argv
    for arg in args:
        try:
            t = _parse_float(arg)
        except ValueError as err:
            print(f"cf: {err}", file=sys.stderr)
            return 1
        f = Fahrenheit(t)
        c = Celsius(t)
        print(f"{f} = {f_to_c(f)}, {c} = {c_to_f(c)}")
    return 0