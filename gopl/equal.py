"""A deep equivalence relation for arbitrary values, safe on cyclic data."""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping

_SCALARS = (bool, int, float, complex, str, bytes, bytearray)
_FUNCTIONS = (types.FunctionType, types.BuiltinFunctionType, types.LambdaType)
_MISSING = object()


def _state(obj: object) -> dict[str, object] | None:
    """Return the fields of an object, or None if it has none to compare."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    state: dict[str, object] = {}
    found = False
    for klass in type(obj).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            found = True
            state[name] = getattr(obj, name, _MISSING)
    if hasattr(obj, "__dict__") and not isinstance(obj, type):
        found = True
        state.update(vars(obj))
    return state if found else None


def _equal_maps(x: Mapping, y: Mapping, seen: set[tuple[int, int]]) -> bool:
    if len(x) != len(y):
        return False
    return all(_equal(value, y.get(key, _MISSING), seen) for key, value in x.items())


def _equal(x: object, y: object, seen: set[tuple[int, int]]) -> bool:
    if x is None or y is None or x is _MISSING or y is _MISSING:
        return x is y
    if type(x) is not type(y):
        return False
    if isinstance(x, _SCALARS):
        return x == y
    if isinstance(x, _FUNCTIONS):
        return x is y
    if isinstance(x, types.MethodType):
        # bound methods compare equal when they share function and receiver
        return x == y

    if x is y:
        return True  # identical references
    key = (id(x), id(y))
    if key in seen:
        return True  # already being compared
    seen.add(key)

    if isinstance(x, (list, tuple)):
        return len(x) == len(y) and all(_equal(a, b, seen) for a, b in zip(x, y))
    if isinstance(x, Mapping):
        return _equal_maps(x, y, seen)
    if isinstance(x, (set, frozenset)):
        return x == y
    sx, sy = _state(x), _state(y)
    if sx is None or sy is None:
        return x == y
    return _equal_maps(sx, sy, seen)


def equal(x: object, y: object) -> bool:
    """Report whether x and y are deeply equal.

    Values must have the same type. Sequences, mappings and object fields
    are compared element by element; functions by identity. Mapping keys
    are compared with ==, not deeply. Cycles are handled.
    """
    return _equal(x, y, set())