#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for reading markup documents."""

from __future__ import annotations

from dataclasses import dataclass, field

from apidocs2html.constants import DEFAULT_SOURCE_ENCODING, DEFAULT_SOURCE_EXTENSION
from apidocs2html.options.base import CloneFrozenMixin


# src/apidocs2html/options/markup.py
@dataclass(frozen=True)
class MarkupParserOptions(CloneFrozenMixin):
    """Configuration options for the markup parser.

    Parameters
    ----------
    encoding : str, default "utf-8"
        Encoding used when reading source files.
    source_extension : str, default ".txt"
        Extension appended to a document name when it does not refer to a
        directory.

    """

    encoding: str = field(
        default=DEFAULT_SOURCE_ENCODING,
        metadata={"help": "Encoding of markup source files"},
    )
    source_extension: str = field(
        default=DEFAULT_SOURCE_EXTENSION,
        metadata={"help": "Extension of single-file documents"},
    )

    def __post_init__(self) -> None:
        """Validate the extension format.

        Raises
        ------
        ValueError
            If the extension does not start with a dot.

        """
        if not self.source_extension.startswith("."):
            raise ValueError(f"source_extension must start with '.', got {self.source_extension!r}")
