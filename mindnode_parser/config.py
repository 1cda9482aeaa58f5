"""Conversion settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .links import ROOT_SEGMENT

INPUT_ENV = "MINDNODE_INPUT"
OUTPUT_ENV = "MINDNODE_OUTPUT"

USAGE = (
    "No files were parsed due to insufficient arguments\n"
    "Please run the parser with the following command: "
    'mindnode-parser convert "path/to/mindmap/json/folder" "path/to/output/folder"'
)


class ConfigError(ValueError):
    """Raised when the input or output location is missing or unusable."""


@dataclass
class Settings:
    input_dir: Optional[Path] = None
    output_dir: Optional[Path] = None
    root_segment: str = ROOT_SEGMENT
    indent: int = 2

    @classmethod
    def from_values(
        cls,
        input_dir: Optional[str] = None,
        output_dir: Optional[str] = None,
        **kwargs,
    ) -> Settings:
        """Build settings, falling back to the environment for locations."""
        input_dir = input_dir or os.environ.get(INPUT_ENV)
        output_dir = output_dir or os.environ.get(OUTPUT_ENV)
        return cls(
            input_dir=Path(input_dir) if input_dir else None,
            output_dir=Path(output_dir) if output_dir else None,
            **kwargs,
        )

    def validate(self) -> Settings:
        if self.input_dir is None or self.output_dir is None:
            raise ConfigError(USAGE)
        if not self.input_dir.is_dir():
            raise ConfigError(f"Input directory not found: {self.input_dir}")
        if self.output_dir.exists() and not self.output_dir.is_dir():
            raise ConfigError(f"Output location is not a directory: {self.output_dir}")
        return self
