"""State collected while encoding an OpenAPI document: tags and references."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from papi.iterate import sorted_items
from papi.openapi.info import Tag

if TYPE_CHECKING:
    from papi.openapi.schema import Ref


class EncoderContext:
    """Collects the tags and named schema references met during encoding."""

    def __init__(self) -> None:
        self.tags: dict[str, Tag] = {}
        self.refs: dict[str, Ref] = {}

    def add_tag(self, tag: Tag) -> None:
        """Remember ``tag``; a later tag with the same name replaces it."""
        self.tags[tag.name] = tag

    def add_ref(self, ref: Ref) -> None:
        """Remember ``ref`` by name.

        A second reference with the same name is accepted only if its schema
        hashes the same; otherwise ``ValueError`` is raised.
        """
        current = self.refs.get(ref.name)
        if current is not None:
            if current.hash() != ref.hash():
                raise ValueError(f"reference name '{ref.name}' already exists")
            return
        self.refs[ref.name] = ref

    def all_refs(self) -> Iterator[tuple[int, Ref]]:
        """Yield ``(index, ref)`` for every reference, ordered by name.

        References added while iterating (for instance while encoding the
        schema of an earlier reference) are yielded too.
        """
        done: set[str] = set()
        index = 0
        while True:
            changed = False
            for name, ref in sorted_items(dict(self.refs)):
                if name in done:
                    continue
                yield index, ref
                done.add(name)
                changed = True
                index += 1
            if not changed:
                break