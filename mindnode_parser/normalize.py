"""Turn raw MindNode structures into plain-text, path-referencing records."""

from __future__ import annotations

from typing import Mapping, Optional

from .emojis import find_category, strip_emojis
from .links import LinkTable
from .models import (
    Connection,
    Document,
    Node,
    RawConnection,
    RawDocument,
    RawNode,
    Subnode,
)
from .richtext import get_text, get_url, trim_note


def _node_fields(raw: RawNode, links: LinkTable) -> dict:
    text = get_text(raw.title)
    note = trim_note(get_text(raw.note)) if raw.note is not None else None
    url = links.rewrite(get_url(raw.title))

    category = find_category(text) or None
    if category is not None:
        text = strip_emojis(text)

    return dict(text=text, url=url, note=note, fx=raw.x, fy=raw.y, category=category)


def normalize_node(raw: RawNode, links: LinkTable) -> Node:
    """Normalize one raw node.

    Markup is stripped from title and note, internal links are rewritten
    through `links`, and a leading category emoji becomes `category`.
    """
    return Node(**_node_fields(raw, links))


def normalize_subnode(raw: RawNode, parent: str, links: LinkTable) -> Subnode:
    return Subnode(**_node_fields(raw, links), color=raw.color, parent=parent)


def flatten_subnodes(
    children: list[RawNode], parent: str, links: LinkTable
) -> list[Subnode]:
    """Flatten a node's descendants depth-first, pre-order.

    Each record's `parent` is the normalized text of its immediate
    enclosing node. Uses an explicit stack so deep trees do not hit the
    recursion limit.
    """
    result = []
    stack = [(child, parent) for child in reversed(children)]
    while stack:
        raw, parent_text = stack.pop()
        subnode = normalize_subnode(raw, parent_text, links)
        result.append(subnode)
        stack.extend((child, subnode.text) for child in reversed(raw.children))
    return result


def normalize_connection(
    raw: RawConnection, lookup: Mapping[str, str]
) -> Connection:
    """Normalize a connection, naming its ends by node text.

    `lookup` maps top-level node ids to their normalized text; ids not in
    it (subnodes, dangling ids) resolve to None.
    """
    text: Optional[str] = get_text(raw.title) if raw.title else None
    return Connection(
        source=lookup.get(raw.start_id),
        target=lookup.get(raw.end_id),
        curve=(raw.offset_x, raw.offset_y),
        text=text,
    )


def normalize_document(raw: RawDocument, links: LinkTable) -> Document:
    """Normalize a whole document against a fully built link table."""
    lookup = {}
    nodes = []
    for raw_node in raw.nodes:
        node = normalize_node(raw_node, links)
        lookup[raw_node.id] = node.text
        nodes.append(node)

    subnodes = []
    for raw_node, node in zip(raw.nodes, nodes):
        subnodes.extend(flatten_subnodes(raw_node.children, node.text, links))

    connections = [normalize_connection(c, lookup) for c in raw.connections]

    return Document(
        title=raw.title,
        nodes=tuple(nodes),
        subnodes=tuple(subnodes),
        connections=tuple(connections),
    )
