"""apidocs2html - static HTML API reference pages from a plain-text markup.

apidocs2html reads documents written in a small line-oriented markup of
*categories* and *elements* and exports one HTML page per category, built from
a user-supplied HTML template and stylesheet. ``Code`` elements can be
highlighted with a regex-driven style table, extendable with custom styles.

Key Features
------------
- State-machine markup parser with read-only headings and newline-joined regions
- Category attributes for sidebar nesting (``|Parent``) and visual breaks (``|Space``)
- Priority groups ordered by a leading digit on the base category title
- C#/Unity code highlighting out of the box
- TOML, YAML, JSON and legacy text build recipes

Requirements
------------
- Python 3.10+
- PyYAML for YAML recipes, rich for formatted CLI output

Examples
--------
Load a document and export it:

    >>> from apidocs2html import load_document, export_to_html
    >>> result = load_document("docs", "MyDocument")
    >>> status = export_to_html(result.categories, "My API", "out", template_lines, css_text)

Export from a build recipe:

    >>> from apidocs2html import export_document, load_build_config
    >>> summary = export_document(load_build_config("apidocs.toml"))
    >>> summary.file_count
    12

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "apidocs2html requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from apidocs2html.api import ExportResult, export_document, export_to_html, load_document
from apidocs2html.config import BuildConfig, load_build_config
from apidocs2html.document import Category, Element, ParseResult
from apidocs2html.exceptions import (
    ApiDocsError,
    FileError,
    ParsingError,
    RenderingError,
    TemplateMacroError,
    ValidationError,
)
from apidocs2html.highlight import BUILTIN_CODE_STYLES, CodeStyle, highlight_code
from apidocs2html.options import HtmlExportOptions, MarkupParserOptions
from apidocs2html.parsers import MarkupParser, parse_markup
from apidocs2html.project import DocumentProject
from apidocs2html.renderers import ExportSummary, HtmlExporter
from apidocs2html.resolver import resolve_categories

__all__ = [
    "__version__",
    # API
    "load_document",
    "export_document",
    "export_to_html",
    "ExportResult",
    "ExportSummary",
    # Model
    "Category",
    "Element",
    "ParseResult",
    # Components
    "MarkupParser",
    "parse_markup",
    "resolve_categories",
    "HtmlExporter",
    "DocumentProject",
    "CodeStyle",
    "BUILTIN_CODE_STYLES",
    "highlight_code",
    # Configuration
    "BuildConfig",
    "load_build_config",
    "MarkupParserOptions",
    "HtmlExportOptions",
    # Exceptions
    "ApiDocsError",
    "ValidationError",
    "FileError",
    "ParsingError",
    "RenderingError",
    "TemplateMacroError",
]
