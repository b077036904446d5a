"""Structural comparison of dataclass types."""

from __future__ import annotations

import dataclasses
from typing import Any


def _field_types(cls: type) -> list[Any]:
    return [f.type for f in dataclasses.fields(cls)]


def _is_dataclass_type(obj: Any) -> bool:
    return isinstance(obj, type) and dataclasses.is_dataclass(obj)


def equal_structs(first: Any, second: Any) -> bool:
    """Tell whether two dataclass types have the same field types in order.

    Field names are not compared. Anything that is not a dataclass type
    compares unequal.
    """
    if not (_is_dataclass_type(first) and _is_dataclass_type(second)):
        return False
    return _field_types(first) == _field_types(second)