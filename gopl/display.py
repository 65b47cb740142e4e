"""Display the structure of any value, and format values without looking inside."""

from __future__ import annotations

import dataclasses
import sys
import types
from collections.abc import Mapping
from typing import Any, TextIO

from gopl.params import _quote

_REFERENCE_TYPES = (list, dict, set, bytearray)
_INTERFACE_NAMES = frozenset({"Any", "typing.Any", "object"})


def _type_name(x: object) -> str:
    return "None" if x is None else type(x).__qualname__


def format_any(value: object) -> str:
    """Format a value as a string without inspecting its internal structure."""
    if value is None:
        return "invalid"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, _REFERENCE_TYPES) or callable(value):
        return f"{_type_name(value)} 0x{id(value):x}"
    return f"{_type_name(value)} value"


def _is_interface(hint: object) -> bool:
    if hint is Any or hint is object:
        return True
    return isinstance(hint, str) and hint.strip() in _INTERFACE_NAMES


def _is_plain_object(v: object) -> bool:
    return (
        hasattr(v, "__dict__")
        and not callable(v)
        and not isinstance(v, types.ModuleType)
    )


def _walk(path: str, v: object, lines: list[str]) -> None:
    if v is None:
        lines.append(f"{path} = nil")
    elif isinstance(v, (list, tuple)):
        for i, item in enumerate(v):
            _walk(f"{path}[{i}]", item, lines)
    elif dataclasses.is_dataclass(v) and not isinstance(v, type):
        for f in dataclasses.fields(v):
            value = getattr(v, f.name)
            field_path = f"{path}.{f.name}"
            if value is not None and _is_interface(f.type):
                lines.append(f"{field_path}.type = {_type_name(value)}")
                _walk(field_path + ".value", value, lines)
            else:
                _walk(field_path, value, lines)
    elif isinstance(v, Mapping):
        for key, value in v.items():
            _walk(f"{path}[{format_any(key)}]", value, lines)
    elif _is_plain_object(v):
        for name, value in vars(v).items():
            _walk(f"{path}.{name}", value, lines)
    else:
        lines.append(f"{path} = {format_any(v)}")


def display(name: str, x: object, out: TextIO | None = None) -> None:
    """Write every leaf of x, each with the path that reaches it, to out."""
    stream = sys.stdout if out is None else out
    lines = [f"Display {name} ({_type_name(x)}):"]
    if x is None:
        lines.append(f"{name} = invalid")
    else:
        _walk(name, x, lines)
    stream.write("\n".join(lines) + "\n")