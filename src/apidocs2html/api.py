#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidocs2html/api.py
"""High-level entry points.

:func:`load_document` and :func:`export_document` raise the typed exceptions
from :mod:`apidocs2html.exceptions`. :func:`export_to_html` is the facade for
callers that prefer a status value: it never raises an
:class:`~apidocs2html.exceptions.ApiDocsError` and reports failures in an
:class:`ExportResult` instead.

Examples
--------
    >>> from apidocs2html import load_document, export_to_html
    >>> result = load_document("docs", "MyDocument")
    >>> status = export_to_html(result.categories, "My API", "out", template_lines, css_text)
    >>> status.ok
    True

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Union

from apidocs2html.config import BuildConfig
from apidocs2html.document import Category, ParseResult
from apidocs2html.exceptions import ApiDocsError, OutputWriteError
from apidocs2html.highlight import CodeStyle
from apidocs2html.options.html import HtmlExportOptions
from apidocs2html.options.markup import MarkupParserOptions
from apidocs2html.project import DocumentProject
from apidocs2html.renderers.html import ExportSummary, HtmlExporter

logger = logging.getLogger(__name__)

EXPORT_SUCCESS_MESSAGE = "Export successful!"


@dataclass(frozen=True)
class ExportResult:
    """Outcome of :func:`export_to_html`.

    Parameters
    ----------
    ok : bool
        True when every file was written
    message : str
        Success message, or the error text on failure
    summary : ExportSummary or None
        Written files; None on failure

    """

    ok: bool
    message: str
    summary: ExportSummary | None = None

    def __bool__(self) -> bool:
        return self.ok


def load_document(
    project_root: Union[str, Path],
    name: str,
    options: MarkupParserOptions | None = None,
) -> ParseResult:
    """Parse a document from a project directory.

    Parameters
    ----------
    project_root : str or Path
        Project directory
    name : str
        Document name; ``<root>/<name>/`` or ``<root>/<name>.txt``
    options : MarkupParserOptions, optional
        Parser options

    Returns
    -------
    ParseResult
        Categories in declaration order; ``warning`` is set when there are none

    Raises
    ------
    ValidationError
        If the project directory doesn't exist
    FileNotFoundError
        If the document doesn't exist
    ParsingError
        If the document directory is empty

    """
    return DocumentProject(project_root, options).load_document(name)


def export_document(config: BuildConfig) -> ExportSummary:
    """Export the document described by a build recipe.

    Creates the output directory first when ``config.create_output`` is set.

    Raises
    ------
    ApiDocsError
        Any subclass raised while loading or exporting

    """
    if config.create_output and not config.output.is_dir():
        try:
            config.output.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(str(config.output), message=f"Cannot create output directory: {e}") from e
        logger.info("Created output directory %s", config.output)

    project = DocumentProject(config.project)
    return project.export_document(
        config.document,
        config.title,
        config.output,
        config.html_template,
        config.css_template,
        options=config.export_options(),
    )


def export_to_html(
    categories: Sequence[Category],
    document_title: str,
    target_dir: Union[str, Path],
    html_template_lines: Sequence[str],
    css_template_text: str,
    highlight_enabled: bool = True,
    extra_styles: Sequence[CodeStyle] = (),
) -> ExportResult:
    """Export categories to HTML, reporting failures as a result value.

    Parameters
    ----------
    categories : sequence of Category
        Parsed categories in declaration order
    document_title : str
        Title substituted for ``|DOCS_TITLE|``
    target_dir : str or Path
        Existing output directory
    html_template_lines : sequence of str
        HTML template lines
    css_template_text : str
        Stylesheet contents, written verbatim as ``style.css``
    highlight_enabled : bool, default True
        Highlight ``Code`` elements
    extra_styles : sequence of CodeStyle, default ()
        Styles applied after the built-in table

    Returns
    -------
    ExportResult
        ``ok`` with a success message, or ``not ok`` with the error text.
        Files written before a failure are left in place.

    """
    try:
        options = HtmlExportOptions(highlight_code=highlight_enabled, extra_code_styles=tuple(extra_styles))
        summary = HtmlExporter(options).export(
            categories, document_title, target_dir, html_template_lines, css_template_text
        )
    except ApiDocsError as e:
        logger.error("Export failed: %s", e)
        return ExportResult(ok=False, message=str(e))

    return ExportResult(ok=True, message=EXPORT_SUCCESS_MESSAGE, summary=summary)


__all__ = ["EXPORT_SUCCESS_MESSAGE", "ExportResult", "export_document", "export_to_html", "load_document"]
