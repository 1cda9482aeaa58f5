"""Resolve internal ``/id/<token>`` links to paths within the collection."""

from __future__ import annotations

import logging
import re
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from .models import RawDocument

logger = logging.getLogger(__name__)

INTERNAL_LINK = re.compile(r"/id/(\S{40})")
ROOT_SEGMENT = "learn-anything"


def relative_path(
    origin: Union[str, Path],
    base: Union[str, Path],
    *,
    root_segment: str = ROOT_SEGMENT,
) -> str:
    """Path of a document relative to the collection, without ``.json``.

    The root segment is dropped everywhere except for the root document
    itself, so ``/learn-anything/physics.json`` becomes ``/physics``
    while ``/learn-anything.json`` stays ``/learn-anything``.
    """
    rel = PurePosixPath(Path(origin).relative_to(base).as_posix())
    path = "/" + str(rel.with_suffix("") if rel.suffix == ".json" else rel)
    root = f"/{root_segment}"
    if path != root:
        path = path.replace(root, "", 1)
    return path


class LinkTable:
    """Read-only mapping from document token to relative path.

    Built once over the whole collection before any document is
    normalized.
    """

    def __init__(self, paths: Optional[Mapping[str, str]] = None):
        self._paths = MappingProxyType(dict(paths or {}))

    @classmethod
    def build(
        cls,
        documents: Iterable[tuple[RawDocument, Union[str, Path]]],
        base: Union[str, Path],
        *,
        root_segment: str = ROOT_SEGMENT,
    ) -> LinkTable:
        paths = {}
        for document, origin in documents:
            paths[document.token] = relative_path(origin, base, root_segment=root_segment)
        logger.info("Indexed %d documents", len(paths))
        return cls(paths)

    @property
    def paths(self) -> Mapping[str, str]:
        return self._paths

    def resolve(self, token: str) -> Optional[str]:
        """Return the path for `token`, or None if no document has it."""
        path = self._paths.get(token)
        if path is None:
            logger.debug("Unresolved internal link token %s", token)
        return path

    def rewrite(self, url: str) -> Optional[str]:
        """Replace an internal link with its path; other URLs pass through."""
        match = INTERNAL_LINK.search(url)
        if match is None:
            return url
        return self.resolve(match.group(1))

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, token: object) -> bool:
        return token in self._paths

    def __repr__(self) -> str:
        return f"LinkTable({len(self._paths)} documents)"
