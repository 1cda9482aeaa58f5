"""mindnode-parser: Convert MindNode JSON exports into normalized JSON.

Nested node trees are flattened into nodes, subnodes and connections;
emoji markers become categories; internal ``/id/<token>`` links become
paths within the collection; rich text becomes plain text.

Usage:
    import mindnode_parser

    # Convert a whole collection (both passes)
    mindnode_parser.convert_dirs("maps/", "out/")

    # Or one document at a time
    links = mindnode_parser.LinkTable.build(
        mindnode_parser.iter_documents("maps/"), "maps/"
    )
    raw = mindnode_parser.read("maps/learn-anything/physics.json")
    doc = mindnode_parser.normalize_document(raw, links)
    print(doc)  # Document('physics', 12 nodes, 40 subnodes, 3 connections)
"""

__version__ = "0.1.0"

from .reader import read, iter_documents
from .writer import write, dumps
from .links import LinkTable, relative_path
from .richtext import get_text, get_url, trim_note
from .emojis import emoji_to_category, emoji_to_html, find_category, MATCH_EMOJIS
from .normalize import (
    normalize_node,
    normalize_subnode,
    flatten_subnodes,
    normalize_connection,
    normalize_document,
)
from .pipeline import convert, convert_dirs
from .config import Settings, ConfigError
from .models import (
    RawDocument,
    RawNode,
    RawConnection,
    Document,
    Node,
    Subnode,
    Connection,
)

__all__ = [
    "read",
    "iter_documents",
    "write",
    "dumps",
    "LinkTable",
    "relative_path",
    "get_text",
    "get_url",
    "trim_note",
    "emoji_to_category",
    "emoji_to_html",
    "find_category",
    "MATCH_EMOJIS",
    "normalize_node",
    "normalize_subnode",
    "flatten_subnodes",
    "normalize_connection",
    "normalize_document",
    "convert",
    "convert_dirs",
    "Settings",
    "ConfigError",
    "RawDocument",
    "RawNode",
    "RawConnection",
    "Document",
    "Node",
    "Subnode",
    "Connection",
]
