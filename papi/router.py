"""A segment tree router with ``{name}`` path parameters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

Handler = Callable[..., Any]


@dataclass
class Params:
    """Path parameter names and the values captured for them."""

    keys: list[str] = field(default_factory=list)
    vals: list[str] = field(default_factory=list)

    def reset(self) -> None:
        self.keys = []
        self.vals = []

    def value(self, idx: int) -> str:
        """Value at position ``idx``, or an empty string if there is none."""
        if 0 <= idx < len(self.vals):
            return self.vals[idx]
        return ""

    def get(self, key: str) -> str | None:
        """Value of the parameter named ``key``, or ``None``."""
        for name, val in zip(self.keys, self.vals):
            if name == key:
                return val
        return None

    def valid(self) -> bool:
        """Tell whether every parameter name has exactly one value."""
        return len(self.keys) == len(self.vals)


@dataclass
class Route:
    """A registered route: its parameter names and its handler."""

    params: list[str] = field(default_factory=list)
    handler: Handler | None = None


@dataclass
class _Node:
    value: str = ""
    nodes: list[_Node] = field(default_factory=list)
    route: Route | None = None

    @property
    def is_param(self) -> bool:
        return self.value.startswith("{")

    def child(self, part: str) -> _Node:
        """Find or create the child for ``part``; parameter children go last."""
        for node in self.nodes:
            if node.value == part:
                return node
        new = _Node(value=part)
        if not self.nodes or new.is_param:
            self.nodes.append(new)
        else:
            self.nodes.insert(0, new)
        return new

    def match(self, part: str, params: Params) -> _Node | None:
        """Child matching ``part``, capturing it if a parameter node comes first."""
        for node in self.nodes:
            if node.is_param:
                params.vals.append(part)
                return node
            if node.value == part:
                return node
        return None


class Router:
    """Routes a method and a path to a handler, capturing path parameters."""

    def __init__(self) -> None:
        self._tree = _Node()

    def clear(self) -> None:
        """Remove all routes."""
        self._tree.nodes.clear()

    def add(self, method: str, path: str, fn: Callable[[Route], Any]) -> Route:
        """Register ``method`` and ``path`` and let ``fn`` configure the route.

        ``fn`` receives the new :class:`Route`, typically to set its handler;
        anything it raises propagates.
        """
        params: list[str] = []
        node = self._tree
        for part in [method, *path.split("/")]:
            if not part:
                continue
            if part.startswith("{"):
                params.append(part[1:-1])
            node = node.child(part)

        node.route = Route(params=params)
        fn(node.route)
        return node.route

    def lookup(self, method: str, path: str) -> tuple[Handler | None, Params] | None:
        """Find the handler and parameters for a request, or ``None``."""
        params = Params()
        if path.startswith("/"):
            path = path[1:]

        node: _Node | None = self._tree
        for part in [method, *path.split("/")]:
            if not part:
                continue
            node = node.match(part, params)
            if node is None:
                return None

        if node.route is None:
            return None

        params.keys = list(node.route.params)
        return node.route.handler, params