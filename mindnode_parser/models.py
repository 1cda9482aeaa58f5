"""Data models for MindNode JSON exports and their normalized form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


def _point(value: Optional[dict]) -> tuple[float, float]:
    value = value or {}
    return value.get("x", 0), value.get("y", 0)


def _rich(value: Optional[dict]) -> Optional[str]:
    """Pull the markup out of a ``{"text": ...}`` rich-text field."""
    if not value:
        return None
    return value.get("text")


@dataclass
class RawNode:
    """A single node of a MindNode document, as exported.

    Nodes form a tree via the `children` list. Titles and notes are kept
    as the original rich-text markup.
    """
    id: str = ""
    title: str = ""
    note: Optional[str] = None
    x: float = 0
    y: float = 0
    color: Optional[str] = None  # border stroke color, if styled
    children: list[RawNode] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> RawNode:
        style = (data.get("shapeStyle") or {}).get("borderStrokeStyle") or {}
        x, y = _point(data.get("location"))
        return cls(
            id=str(data.get("id", "")),
            title=_rich(data.get("title")) or "",
            note=_rich(data.get("note")),
            x=x,
            y=y,
            color=style.get("color"),
            children=[cls.from_dict(child) for child in data.get("nodes") or []],
        )

    def walk(self) -> Iterator[RawNode]:
        """Yield this node and all descendants depth-first, pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def count(self) -> int:
        """Total number of descendants (including self)."""
        return sum(1 for _ in self.walk())

    def __repr__(self) -> str:
        child_count = len(self.children)
        suffix = f" ({child_count} children)" if child_count else ""
        return f"RawNode({self.id!r}{suffix})"


@dataclass
class RawConnection:
    """A cross-link between two nodes of the same document."""
    start_id: str = ""
    end_id: str = ""
    title: Optional[str] = None
    offset_x: float = 0
    offset_y: float = 0

    @classmethod
    def from_dict(cls, data: dict) -> RawConnection:
        x, y = _point(data.get("wayPointOffset"))
        return cls(
            start_id=str(data.get("startNodeID", "")),
            end_id=str(data.get("endNodeID", "")),
            title=_rich(data.get("title")),
            offset_x=x,
            offset_y=y,
        )


@dataclass
class RawDocument:
    """A complete MindNode document: top-level nodes plus connections."""
    token: str = ""
    title: str = ""
    nodes: list[RawNode] = field(default_factory=list)
    connections: list[RawConnection] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> RawDocument:
        return cls(
            token=data.get("token", ""),
            title=data.get("title", ""),
            nodes=[RawNode.from_dict(n) for n in data.get("nodes") or []],
            connections=[RawConnection.from_dict(c) for c in data.get("connections") or []],
        )

    @property
    def subnode_count(self) -> int:
        """Number of nodes below the top level."""
        return sum(node.count() - 1 for node in self.nodes)

    def walk(self) -> Iterator[RawNode]:
        """Iterate all nodes depth-first."""
        for node in self.nodes:
            yield from node.walk()

    def __repr__(self) -> str:
        return f"RawDocument({self.title!r}, {len(self.nodes)} nodes)"


def _compact(items: list[tuple[str, Any]]) -> dict:
    # None plays the role of "undefined": the key is left out.
    return {key: value for key, value in items if value is not None}


@dataclass(frozen=True)
class Node:
    """A normalized node: plain text, resolved url, position and category."""
    text: str = ""
    url: Optional[str] = ""
    note: Optional[str] = None
    fx: float = 0
    fy: float = 0
    category: Optional[str] = None

    def _items(self) -> list[tuple[str, Any]]:
        return [
            ("text", self.text),
            ("url", self.url),
            ("note", self.note),
            ("fx", self.fx),
            ("fy", self.fy),
            ("category", self.category),
        ]

    def to_dict(self) -> dict:
        return _compact(self._items())


@dataclass(frozen=True)
class Subnode(Node):
    """A normalized non-top-level node, tagged with its parent's text."""
    color: Optional[str] = None
    parent: str = ""

    def _items(self) -> list[tuple[str, Any]]:
        return super()._items() + [("color", self.color), ("parent", self.parent)]


@dataclass(frozen=True)
class Connection:
    """A normalized connection referencing nodes by their text."""
    source: Optional[str] = None
    target: Optional[str] = None
    curve: tuple[float, float] = (0, 0)
    text: Optional[str] = None

    def to_dict(self) -> dict:
        x, y = self.curve
        return _compact([
            ("text", self.text),
            ("source", self.source),
            ("target", self.target),
            ("curve", {"x": x, "y": y}),
        ])


@dataclass(frozen=True)
class Document:
    """A normalized document, ready to be serialized."""
    title: str = ""
    nodes: tuple[Node, ...] = ()
    subnodes: tuple[Subnode, ...] = ()
    connections: tuple[Connection, ...] = ()

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "nodes": [n.to_dict() for n in self.nodes],
            "subnodes": [s.to_dict() for s in self.subnodes],
            "connections": [c.to_dict() for c in self.connections],
        }

    def __repr__(self) -> str:
        return (
            f"Document({self.title!r}, {len(self.nodes)} nodes, "
            f"{len(self.subnodes)} subnodes, {len(self.connections)} connections)"
        )
