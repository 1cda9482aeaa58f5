"""Convert a whole collection of MindNode exports in two passes.

Pass 1 indexes every document's token so that internal links can point
anywhere in the collection; pass 2 normalizes and writes each document.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .config import Settings
from .links import LinkTable
from .normalize import normalize_document
from .reader import iter_documents
from .writer import write

logger = logging.getLogger(__name__)


def output_path(origin: Path, input_dir: Path, output_dir: Path) -> Path:
    """Mirror `origin`'s place under `input_dir` beneath `output_dir`."""
    return output_dir / origin.relative_to(input_dir)


def build_links(settings: Settings) -> LinkTable:
    input_dir = settings.input_dir.resolve()
    return LinkTable.build(
        iter_documents(input_dir), input_dir, root_segment=settings.root_segment
    )


def convert(settings: Settings) -> list[Path]:
    """Run both passes and return the paths written.

    Raises:
        ConfigError: If the settings are incomplete.
        OSError: If an output file can't be written.
    """
    settings.validate()
    input_dir = settings.input_dir.resolve()
    output_dir = settings.output_dir

    links = build_links(settings)

    written = []
    for raw, origin in iter_documents(input_dir):
        document = normalize_document(raw, links)
        target = output_path(origin, input_dir, output_dir)
        written.append(write(document, target, indent=settings.indent))

    logger.info("Wrote %d documents to %s", len(written), output_dir)
    return written


def convert_dirs(input_dir: Union[str, Path], output_dir: Union[str, Path], **kwargs) -> list[Path]:
    """Shortcut for ``convert(Settings(...))`` with explicit directories."""
    return convert(Settings(input_dir=Path(input_dir), output_dir=Path(output_dir), **kwargs))
