#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML export.

This module defines the options that control how a parsed document is turned
into static HTML pages.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from apidocs2html.constants import DEFAULT_CSS_FILENAME, DEFAULT_OUTPUT_ENCODING, DEFAULT_PAGE_EXTENSION
from apidocs2html.highlight import CodeStyle
from apidocs2html.options.base import CloneFrozenMixin


# src/apidocs2html/options/html.py
@dataclass(frozen=True)
class HtmlExportOptions(CloneFrozenMixin):
    """Configuration options for exporting categories to HTML pages.

    Parameters
    ----------
    highlight_code : bool, default True
        Run elements whose class is ``"Code"`` through the code highlighter.
    extra_code_styles : tuple[CodeStyle, ...], default ()
        Additional highlighting rules applied after the built-in ones, in the
        given order.
    css_filename : str, default "style.css"
        Name of the stylesheet written next to the pages.
    page_extension : str, default ".html"
        Extension of every generated page.
    encoding : str, default "utf-8"
        Encoding of the written files.

    """

    highlight_code: bool = field(
        default=True,
        metadata={"help": "Apply regex highlighting to Code elements"},
    )
    extra_code_styles: tuple[CodeStyle, ...] = field(
        default=(),
        metadata={"help": "Caller-supplied code styles applied after the built-ins"},
    )
    css_filename: str = field(
        default=DEFAULT_CSS_FILENAME,
        metadata={"help": "File name of the exported stylesheet"},
    )
    page_extension: str = field(
        default=DEFAULT_PAGE_EXTENSION,
        metadata={"help": "Extension of generated pages"},
    )
    encoding: str = field(
        default=DEFAULT_OUTPUT_ENCODING,
        metadata={"help": "Encoding of generated files"},
    )

    def __post_init__(self) -> None:
        """Normalize and validate option values.

        Raises
        ------
        ValueError
            If the page extension is malformed or the stylesheet name is empty.

        """
        # Lists coming from config files are frozen into tuples
        if not isinstance(self.extra_code_styles, tuple):
            object.__setattr__(self, "extra_code_styles", tuple(self.extra_code_styles))
        if not self.page_extension.startswith("."):
            raise ValueError(f"page_extension must start with '.', got {self.page_extension!r}")
        if not self.css_filename.strip():
            raise ValueError("css_filename must not be empty")
