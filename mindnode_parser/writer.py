"""Write normalized documents to disk as JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from .models import Document

logger = logging.getLogger(__name__)


def dumps(document: Document, *, indent: int = 2) -> str:
    """Serialize a Document, leaving out undefined (None) fields."""
    return json.dumps(document.to_dict(), indent=indent, ensure_ascii=False)


def write(document: Document, path: Union[str, Path], *, indent: int = 2) -> Path:
    """Write a Document to `path`, creating parent directories as needed.

    Args:
        document: The normalized document to write.
        path: Output path for the .json file.
        indent: JSON indentation.

    Returns:
        The path written to.

    Raises:
        OSError: If the directory or file can't be written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps(document, indent=indent), encoding="utf-8")
    logger.debug("Wrote %s", path)
    return path
