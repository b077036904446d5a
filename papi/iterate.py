"""Small iteration helpers for comma lists, struct-style tags and mappings."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from typing import Any, TypeVar

K = TypeVar("K")
V = TypeVar("V")

# A tag entry: optional leading spaces, a name without spaces, quotes, colons
# or control characters, then a double-quoted value with backslash escapes.
_TAG_ENTRY = re.compile(r' *([^\x00-\x20:"\x7f]+):"((?:[^"\\]|\\.)*)"', re.DOTALL)


def iterate_chunks(s: str, sep: str) -> Iterator[str]:
    """Yield the non-empty pieces of ``s`` separated by ``sep``."""
    return (chunk for chunk in s.split(sep) if chunk)


def iterate_flags(flags: str) -> Iterator[str]:
    """Yield comma-separated flags.

    Empty flags are skipped, except that the part after the last comma is
    always yielded when ``flags`` is non-empty.
    """
    if not flags:
        return
    *head, last = flags.split(",")
    yield from (flag for flag in head if flag)
    yield last


def has_flag(flags: str, flag: str) -> bool:
    """Tell whether ``flag`` is one of the comma-separated ``flags``."""
    return any(f == flag for f in iterate_flags(flags))


def iterate_struct_tags(tag: str) -> Iterator[tuple[str, str]]:
    """Yield ``(name, value)`` pairs from a tag such as ``json:"foo" db:"bar"``.

    Values are returned as written between the quotes, without unescaping.
    Parsing stops at the first malformed entry.
    """
    pos = 0
    while (match := _TAG_ENTRY.match(tag, pos)) is not None:
        yield match.group(1), match.group(2)
        pos = match.end()


def sorted_items(mapping: Mapping[K, V]) -> Iterator[tuple[K, V]]:
    """Yield the items of ``mapping`` ordered by key."""
    items: list[tuple[Any, Any]] = sorted(mapping.items(), key=lambda kv: kv[0])
    yield from items