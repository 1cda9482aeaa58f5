"""Builders for MindNode-shaped dictionaries."""

import json

import pytest


def make_node(title, node_id="", children=(), note=None, x=0, y=0, color=None):
    node = {
        "id": node_id,
        "title": {"text": f"<p>{title}</p>"},
        "location": {"x": x, "y": y},
        "nodes": list(children),
    }
    if note is not None:
        node["note"] = {"text": f"<p>{note}</p>"}
    if color is not None:
        node["shapeStyle"] = {"borderStrokeStyle": {"color": color}}
    return node


def make_doc(token, title="Map", nodes=(), connections=()):
    return {
        "token": token,
        "title": title,
        "nodes": list(nodes),
        "connections": list(connections),
    }


@pytest.fixture
def collection(tmp_path):
    """Write documents into a temporary input directory."""
    root = tmp_path / "maps"

    def add(relative, document):
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
        return path

    add.root = root
    return add
