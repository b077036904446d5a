"""64-bit XXH64 hashing of plain values, sequences and dataclasses."""

from __future__ import annotations

import dataclasses
import struct
from typing import Any, Protocol, runtime_checkable

_MASK64 = (1 << 64) - 1

_P1 = 11400714785074694791
_P2 = 14029467366897019727
_P3 = 1609587929392839161
_P4 = 9650029242155789863
_P5 = 2870177450012600261


@runtime_checkable
class Hashable(Protocol):
    """Anything that can produce a 64-bit hash of itself."""

    def hash(self) -> int: ...


def _rotl(x: int, r: int) -> int:
    return ((x << r) | (x >> (64 - r))) & _MASK64


def _round(acc: int, lane: int) -> int:
    acc = (acc + lane * _P2) & _MASK64
    return (_rotl(acc, 31) * _P1) & _MASK64


def _merge_round(acc: int, val: int) -> int:
    acc ^= _round(0, val)
    return (acc * _P1 + _P4) & _MASK64


def xxh64(data: bytes, seed: int = 0) -> int:
    """Compute the XXH64 digest of ``data``."""
    data = bytes(data)
    length = len(data)
    seed &= _MASK64
    stripes_end = length - length % 32

    if length >= 32:
        v1 = (seed + _P1 + _P2) & _MASK64
        v2 = (seed + _P2) & _MASK64
        v3 = seed
        v4 = (seed - _P1) & _MASK64
        for a, b, c, d in struct.iter_unpack("<4Q", data[:stripes_end]):
            v1 = _round(v1, a)
            v2 = _round(v2, b)
            v3 = _round(v3, c)
            v4 = _round(v4, d)
        h = (_rotl(v1, 1) + _rotl(v2, 7) + _rotl(v3, 12) + _rotl(v4, 18)) & _MASK64
        for v in (v1, v2, v3, v4):
            h = _merge_round(h, v)
    else:
        h = (seed + _P5) & _MASK64

    h = (h + length) & _MASK64

    tail = data[stripes_end:]
    words_end = len(tail) - len(tail) % 8
    for (lane,) in struct.iter_unpack("<Q", tail[:words_end]):
        h ^= _round(0, lane)
        h = (_rotl(h, 27) * _P1 + _P4) & _MASK64

    rest = tail[words_end:]
    if len(rest) >= 4:
        (word,) = struct.unpack("<I", rest[:4])
        h ^= (word * _P1) & _MASK64
        h = (_rotl(h, 23) * _P2 + _P3) & _MASK64
        rest = rest[4:]

    for byte in rest:
        h ^= (byte * _P5) & _MASK64
        h = (_rotl(h, 11) * _P1) & _MASK64

    h ^= h >> 33
    h = (h * _P2) & _MASK64
    h ^= h >> 29
    h = (h * _P3) & _MASK64
    h ^= h >> 32
    return h


def int_to_bytes(value: int, size: int) -> bytes:
    """Little-endian, two's complement bytes of ``value`` in ``size`` bytes."""
    return (value & ((1 << (8 * size)) - 1)).to_bytes(size, "little")


class Hasher:
    """Accumulates written bytes and hashes them with XXH64."""

    def __init__(self) -> None:
        self._data = bytearray()

    def reset(self) -> None:
        self._data.clear()

    def sum64(self) -> int:
        return xxh64(self._data)

    def write(self, data: bytes) -> int:
        self._data += data
        return len(data)

    def write_string(self, value: str) -> int:
        return self.write(value.encode("utf-8"))

    def write_int(self, value: int, size: int = 8) -> int:
        return self.write(int_to_bytes(value, size))

    def write_uint(self, value: int, size: int = 8) -> int:
        if value < 0:
            raise ValueError(f"unsigned value must not be negative: {value}")
        return self.write(int_to_bytes(value, size))

    def write_float(self, value: float, size: int = 8) -> int:
        formats = {4: "<f", 8: "<d"}
        if size not in formats:
            raise ValueError(f"unsupported float size: {size}")
        return self.write(struct.pack(formats[size], value))

    def write_bool(self, value: bool) -> int:
        return self.write(b"\x01" if value else b"\x00")

    def write_any(self, value: Any) -> int:
        """Write a value by its kind; returns the number of bytes written.

        Dataclass fields whose names start with an underscore are skipped,
        as are values of kinds that have no byte form (``None``, mappings).
        """
        if isinstance(value, bool):
            return self.write_bool(value)
        if isinstance(value, int):
            return self.write_int(value)
        if isinstance(value, float):
            return self.write_float(value)
        if isinstance(value, str):
            return self.write_string(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return self.write(bytes(value))
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return sum(
                self.write_any(getattr(value, f.name))
                for f in dataclasses.fields(value)
                if not f.name.startswith("_")
            )
        if isinstance(value, (list, tuple)):
            return sum(self.write_any(item) for item in value)
        return 0


def hash_value(value: Any) -> int:
    """Hash any value the way ``Hasher.write_any`` encodes it."""
    hasher = Hasher()
    hasher.write_any(value)
    return hasher.sum64()