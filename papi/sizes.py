"""Parsing of human-readable byte sizes such as ``1.5GiB``."""

from __future__ import annotations

import re

_MAX_INT64 = (1 << 63) - 1
_MAX_UINT64_FLOAT = float((1 << 64) - 1)

_NUMERIC_PREFIX = re.compile(r"[+\-.0-9]*")

_UNITS = {
    "": 1,
    "b": 1,
    "k": 1 << 10,
    "kb": 1 << 10,
    "kib": 1 << 10,
    "m": 1 << 20,
    "mb": 1 << 20,
    "mib": 1 << 20,
    "g": 1 << 30,
    "gb": 1 << 30,
    "gib": 1 << 30,
    "t": 1 << 40,
    "tb": 1 << 40,
    "tib": 1 << 40,
    "p": 1 << 50,
    "pb": 1 << 50,
    "pib": 1 << 50,
}


def parse_bytes(s: str) -> int:
    """Parse a size like ``512``, ``2MB`` or ``1.5GiB`` into a byte count.

    Units are binary (powers of 1024). Raises ``ValueError`` on bad input.
    """
    text = s.lower().strip().replace("_", "").replace(",", "")
    if not text:
        raise ValueError("empty size")

    match = _NUMERIC_PREFIX.match(text)
    num = match.group()
    unit = text[match.end():].strip()
    if not num or num.startswith("-"):
        raise ValueError("invalid number")

    mul = _UNITS.get(unit)
    if mul is None:
        raise ValueError("unknown unit")

    if "." not in num and "e" not in num:
        try:
            value = int(num)
        except ValueError as exc:
            raise ValueError(f"invalid number: {num!r}") from exc
        if value > _MAX_INT64:
            raise ValueError(f"value out of range: {num!r}")
        if value > _MAX_INT64 // mul:
            raise ValueError("overflow")
        return value * mul

    try:
        fvalue = float(num)
    except ValueError as exc:
        raise ValueError("invalid number") from exc
    if fvalue < 0:
        raise ValueError("invalid number")

    scaled = fvalue * mul
    if scaled < 0 or scaled > _MAX_UINT64_FLOAT:
        raise ValueError("overflow")
    return int(scaled + 0.5)