"""Parsing of text values into typed Python values.

A scanner is a callable taking a string and returning the parsed value.
Types are described with plain Python types and type hints:

* ``bool``, ``int`` (64-bit signed), ``float``, ``complex`` and ``str``;
* :class:`IntType` instances for sized integers such as ``INT8`` or ``UINT32``;
* ``list[T]`` and ``tuple[T, ...]`` for comma-separated lists;
* ``tuple[T1, T2, ...]`` for fixed-size arrays;
* ``T | None`` (or ``Optional[T]``) for optional values.
"""

from __future__ import annotations

import math
import re
import types
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from papi.iterate import iterate_chunks

Scanner = Callable[[str], Any]
CustomFactory = Callable[[Any], "Scanner | None"]

_SEP = ","

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"[0-9]+")
_DECIMAL_FLOAT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOAT = re.compile(r"[+-]?(?:inf|infinity)|nan", re.IGNORECASE)

_UNION_ORIGINS: tuple[Any, ...] = (typing.Union, types.UnionType)


@dataclass(frozen=True)
class IntType:
    """A fixed-width integer type, signed or unsigned."""

    bits: int = 64
    signed: bool = True

    def __post_init__(self) -> None:
        if self.bits not in (8, 16, 32, 64):
            raise ValueError(f"unsupported integer width: {self.bits}")

    @property
    def name(self) -> str:
        return f"{'int' if self.signed else 'uint'}{self.bits}"

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def parse(self, s: str) -> int:
        """Parse a base-10 integer, raising ``ValueError`` if invalid or out of range."""
        pattern = _SIGNED_INT if self.signed else _UNSIGNED_INT
        if pattern.fullmatch(s) is None:
            raise ValueError(f"parsing {s!r} as {self.name}: invalid syntax")
        value = int(s)
        if not self.min <= value <= self.max:
            raise ValueError(f"parsing {s!r} as {self.name}: value out of range")
        return value


INT8 = IntType(8, True)
INT16 = IntType(16, True)
INT32 = IntType(32, True)
INT64 = IntType(64, True)
UINT8 = IntType(8, False)
UINT16 = IntType(16, False)
UINT32 = IntType(32, False)
UINT64 = IntType(64, False)
INT = INT64
UINT = UINT64


def _scan_bool(s: str) -> bool:
    if s in ("1", "t", "T", "true", "TRUE", "True", "yes", "YES", "Yes"):
        return True
    if s in ("0", "f", "F", "false", "FALSE", "False", "no", "NO", "No"):
        return False
    raise ValueError(f"invalid boolean: '{s}'")


def _scan_float(s: str) -> float:
    if _SPECIAL_FLOAT.fullmatch(s):
        return float(s)
    if _DECIMAL_FLOAT.fullmatch(s):
        value = float(s)
    elif _HEX_FLOAT.fullmatch(s):
        value = float.fromhex(s)
    else:
        raise ValueError(f"parsing {s!r} as float: invalid syntax")
    if math.isinf(value):
        raise ValueError(f"parsing {s!r} as float: value out of range")
    return value


def _split_complex(body: str) -> tuple[str, str]:
    """Split ``body`` (without the trailing ``i``) into real and imaginary text."""
    for k in range(len(body) - 1, 0, -1):
        if body[k] in "+-" and body[k - 1] not in "eEpP":
            return body[:k], body[k:]
    return "", body


def _scan_complex(s: str) -> complex:
    text = s
    if len(text) >= 2 and text.startswith("(") and text.endswith(")"):
        text = text[1:-1]
    try:
        if not text.endswith("i"):
            return complex(_scan_float(text), 0.0)
        real_text, imag_text = _split_complex(text[:-1])
        real = _scan_float(real_text) if real_text else 0.0
        return complex(real, _scan_float(imag_text))
    except ValueError as exc:
        raise ValueError(f"parsing {s!r} as complex: invalid syntax") from exc


def _scan_str(s: str) -> str:
    return s


def _type_name(typ: Any) -> str:
    return getattr(typ, "__name__", None) or repr(typ)


def _tuple_args(typ: Any) -> tuple[Any, ...]:
    args = typing.get_args(typ)
    return () if args == ((),) else args


def _zero_value(typ: Any) -> Any:
    """The value an array element holds when the input does not reach it."""
    if typ is bool:
        return False
    if typ is int or isinstance(typ, IntType):
        return 0
    if typ is float:
        return 0.0
    if typ is complex:
        return 0j
    if typ is str:
        return ""
    origin = typing.get_origin(typ)
    if origin in _UNION_ORIGINS:
        return None
    if origin is list:
        return []
    if origin is tuple:
        args = _tuple_args(typ)
        if len(args) == 2 and args[1] is Ellipsis:
            return ()
        return tuple(_zero_value(arg) for arg in args)
    return None


class Creator:
    """Builds scanners for types, consulting an optional custom factory first.

    The custom factory receives the type and returns a scanner, or ``None``
    to fall back to the built-in scanners.
    """

    def __init__(self, custom: CustomFactory | None = None) -> None:
        self._custom = custom

    def create_scanner(self, typ: Any) -> Scanner:
        """Return a scanner for ``typ``; raises ``TypeError`` if unsupported."""
        if self._custom is not None:
            scanner = self._custom(typ)
            if scanner is not None:
                return scanner

        if typ is bool:
            return _scan_bool
        if typ is int:
            return INT.parse
        if isinstance(typ, IntType):
            return typ.parse
        if typ is float:
            return _scan_float
        if typ is complex:
            return _scan_complex
        if typ is str:
            return _scan_str

        origin = typing.get_origin(typ)
        if origin in _UNION_ORIGINS:
            return self._create_optional_scanner(typ)
        if origin is list:
            (elem,) = typing.get_args(typ)
            return self._create_list_scanner(elem, list)
        if origin is tuple:
            args = _tuple_args(typ)
            if len(args) == 2 and args[1] is Ellipsis:
                return self._create_list_scanner(args[0], tuple)
            return self._create_array_scanner(args)

        raise TypeError(f"cannot create a scanner for '{_type_name(typ)}'")

    def _create_optional_scanner(self, typ: Any) -> Scanner:
        inner = [arg for arg in typing.get_args(typ) if arg is not type(None)]
        if len(inner) != 1:
            raise TypeError(f"cannot create a scanner for '{_type_name(typ)}'")
        return self.create_scanner(inner[0])

    def _create_list_scanner(self, elem: Any, container: type) -> Scanner:
        elem_scan = self.create_scanner(elem)

        def scan(s: str) -> Any:
            return container(elem_scan(chunk) for chunk in iterate_chunks(s, _SEP))

        return scan

    def _create_array_scanner(self, elems: tuple[Any, ...]) -> Scanner:
        elem_scans = [self.create_scanner(elem) for elem in elems]
        zeros = [_zero_value(elem) for elem in elems]

        def scan(s: str) -> tuple[Any, ...]:
            values = list(zeros)
            for i, chunk in zip(range(len(values)), iterate_chunks(s, _SEP)):
                values[i] = elem_scans[i](chunk)
            return tuple(values)

        return scan


_DEFAULT_CREATOR = Creator()


def create_scanner(typ: Any) -> Scanner:
    """Return a scanner for ``typ`` using the built-in scanners."""
    return _DEFAULT_CREATOR.create_scanner(typ)


def scan_string(typ: Any, src: str) -> Any:
    """Parse ``src`` as a value of ``typ``."""
    return create_scanner(typ)(src)


def scan_bytes(typ: Any, src: bytes) -> Any:
    """Parse UTF-8 encoded ``src`` as a value of ``typ``."""
    return scan_string(typ, bytes(src).decode("utf-8"))