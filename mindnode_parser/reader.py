"""Read MindNode JSON exports into Python objects."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator, Union

from .models import RawDocument


def read(path: Union[str, Path]) -> RawDocument:
    """Read a MindNode .json export and return a RawDocument.

    Args:
        path: Path to the .json file.

    Returns:
        A RawDocument with the full node tree and connections.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        json.JSONDecodeError: If the file isn't valid JSON.
        ValueError: If the JSON isn't an object.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")

    return RawDocument.from_dict(data)


def iter_documents(directory: Union[str, Path]) -> Iterator[tuple[RawDocument, Path]]:
    """Yield ``(document, path)`` for every .json file below `directory`.

    Sub-directories are searched recursively; each file is visited once.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Directory not found: {directory}")

    for path in sorted(directory.rglob("*.json")):
        if path.is_file():
            yield read(path), path
