"""Derivation of human titles and operation ids from code names."""

from __future__ import annotations

import inspect
from pathlib import Path
from types import FrameType
from typing import Any


def _is_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _is_alphanumeric(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z" or "0" <= c <= "9"


def _lower(c: str) -> str:
    return c.lower() if _is_upper(c) else c


def parse_name(s: str) -> tuple[str, str]:
    """Split a CamelCase name into a title and a kebab-case operation id.

    ``"FooBarBazASD_haha"`` gives ``("Foo bar baz ASD haha", "foo-bar-baz-asd-haha")``.
    """
    title: list[str] = []
    op_id: list[str] = []
    previous = " " + s
    following = s[1:] + " "

    for i, (prev, c, nxt) in enumerate(zip(previous, s, following)):
        if i == 0:
            title.append(c)
            op_id.append(_lower(c))
        elif _is_upper(c) and not _is_upper(prev):
            title.append(" ")
            op_id.append("-")
            op_id.append(_lower(c))
            title.append(c if _is_upper(nxt) else _lower(c))
        elif _is_alphanumeric(c):
            title.append(c)
            op_id.append(_lower(c))
        else:
            title.append(" ")
            op_id.append("-")

    return "".join(title), "".join(op_id)


def calc_alloc(s: str) -> int:
    """Length of ``s`` plus one for every word boundary ``parse_name`` inserts."""
    boundaries = sum(
        1 for prev, c in zip(s, s[1:]) if _is_upper(c) and not _is_upper(prev)
    )
    return len(s) + boundaries


def _caller_frame(depth: int) -> FrameType | None:
    """Frame ``depth`` levels above the function that calls this helper."""
    current = inspect.currentframe()
    frame = current.f_back if current is not None else None
    for _ in range(depth):
        if frame is None:
            return None
        frame = frame.f_back
    return frame


def caller_name(skip: int = 0) -> str:
    """Name of the function that called this one, ``skip`` levels further up."""
    frame = _caller_frame(skip + 1)
    if frame is None:
        return ""
    try:
        return frame.f_code.co_name
    finally:
        del frame


def caller_type(skip: int = 0) -> str:
    """Owning class name of the calling function, or its source file's stem."""
    frame = _caller_frame(skip + 1)
    if frame is None:
        return ""
    try:
        local_vars = frame.f_locals
        if "self" in local_vars:
            return type(local_vars["self"]).__name__
        owner = local_vars.get("cls")
        if isinstance(owner, type):
            return owner.__name__
        return Path(frame.f_code.co_filename).stem
    finally:
        del frame


def is_public_type(typ: Any) -> bool:
    """Tell whether a type's name starts with an upper-case ASCII letter."""
    name = typ if isinstance(typ, str) else getattr(typ, "__name__", "")
    return bool(name) and _is_upper(name[0])