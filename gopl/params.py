"""Fill dataclass fields from HTTP request parameters."""

from __future__ import annotations

import dataclasses
import re
import typing
from collections.abc import Mapping
from urllib.parse import parse_qs

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")
_LIST_RE = re.compile(r"(?:typing\.)?(?:list|List)\[(.+)\]")
_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


class ParamError(ValueError):
    """A request parameter could not be stored in its field."""


def _quote(s: str) -> str:
    """Quote s in double quotes, escaping specials and non-printable characters."""
    out = []
    for c in s:
        if c in _ESCAPES:
            out.append(_ESCAPES[c])
        elif c.isprintable():
            out.append(c)
        else:
            o = ord(c)
            if o < 0x20 or o == 0x7F:
                out.append(f"\\x{o:02x}")
            elif o < 0x10000:
                out.append(f"\\u{o:04x}")
            else:
                out.append(f"\\U{o:08x}")
    return '"' + "".join(out) + '"'


def parse_bool(value: str) -> bool:
    """Parse 1, t, T, TRUE, true, True and their false counterparts."""
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ParamError(f"parsing {_quote(value)}: invalid syntax")


def _parse_int(value: str) -> int:
    if not _INT_RE.fullmatch(value):
        raise ParamError(f"parsing {_quote(value)}: invalid syntax")
    n = int(value)
    if not _INT64_MIN <= n <= _INT64_MAX:
        raise ParamError(f"parsing {_quote(value)}: value out of range")
    return n


def _name_of(text: str) -> str:
    text = text.strip()
    return text.removeprefix("builtins.")


def _field_kind(tp: object) -> tuple[bool, str]:
    """Return whether a field annotation is a list, and the name of its element type."""
    if isinstance(tp, str):
        text = tp.replace(" ", "")
        match = _LIST_RE.fullmatch(text)
        if match:
            return True, _name_of(match.group(1))
        if text in ("list", "List", "typing.List"):
            return True, "str"
        return False, _name_of(text)
    if tp is list:
        return True, "str"
    if typing.get_origin(tp) is list:
        args = typing.get_args(tp)
        return True, (_field_kind(args[0])[1] if args else "str")
    return False, getattr(tp, "__name__", str(tp))


def _populate(kind: str, value: str) -> object:
    if kind == "str":
        return value
    if kind == "bool":
        return parse_bool(value)
    if kind == "int":
        return _parse_int(value)
    raise ParamError(f"unsupported kind {kind}")


def _form_items(form: str | bytes | Mapping[str, object]) -> list[tuple[str, list[str]]]:
    if isinstance(form, bytes):
        form = form.decode("utf-8", errors="replace")
    if isinstance(form, str):
        return list(parse_qs(form, keep_blank_values=True).items())
    return [(k, [v] if isinstance(v, str) else list(v)) for k, v in form.items()]


def unpack(form: str | bytes | Mapping[str, object], target: object) -> object:
    """Store request parameters into the fields of a dataclass instance.

    form is a query string or a mapping from names to lists of values.
    A field is named by its "http" metadata, or else by its lower-cased
    name. str, int, bool and list fields of those are supported; list
    fields gather every value, others keep the last. Unknown parameters
    are ignored. Returns target.
    """
    if not dataclasses.is_dataclass(target) or isinstance(target, type):
        raise TypeError("unpack needs a dataclass instance")
    fields = {
        (f.metadata.get("http") or f.name.lower()): f
        for f in dataclasses.fields(target)
    }
    for name, values in _form_items(form):
        fld = fields.get(name)
        if fld is None:
            continue
        is_list, kind = _field_kind(fld.type)
        for value in values:
            try:
                parsed = _populate(kind, value)
            except ParamError as err:
                raise ParamError(f"{name}: {err}") from None
            if is_list:
                setattr(target, fld.name, [*getattr(target, fld.name), parsed])
            else:
                setattr(target, fld.name, parsed)
    return target