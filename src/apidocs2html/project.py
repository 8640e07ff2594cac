#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidocs2html/project.py
"""Documentation projects on disk.

A project is a directory holding markup documents. A document is either a
single ``<name>.txt`` file containing many categories, or a ``<name>/``
directory whose files each contribute categories.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from apidocs2html.document import ParseResult
from apidocs2html.exceptions import FileNotFoundError, ValidationError
from apidocs2html.options.html import HtmlExportOptions
from apidocs2html.options.markup import MarkupParserOptions
from apidocs2html.parsers.markup import MarkupParser
from apidocs2html.renderers.html import ExportSummary, HtmlExporter
from apidocs2html.utils.io_utils import read_lines, read_text

logger = logging.getLogger(__name__)


class DocumentProject:
    """A directory of markup documents.

    Parameters
    ----------
    root : str or Path
        Existing project directory
    parser_options : MarkupParserOptions, optional
        Options for reading documents

    Raises
    ------
    ValidationError
        If ``root`` is not an existing directory

    """

    def __init__(self, root: Union[str, Path], parser_options: MarkupParserOptions | None = None):
        """Initialize the project and check that its root exists."""
        self.root = Path(root)
        if not self.root.is_dir():
            raise ValidationError(
                f"Project directory '{self.root}' doesn't exist", parameter_name="root", parameter_value=str(root)
            )
        self.parser_options = parser_options or MarkupParserOptions()

    def list_documents(self) -> list[Path]:
        """Return every file and directory in the project root, files first."""
        entries = sorted(self.root.iterdir(), key=lambda p: p.name)
        return [p for p in entries if p.is_file()] + [p for p in entries if p.is_dir()]

    def document_path(self, name: str) -> Path:
        """Resolve a document name to its directory or source file.

        Raises
        ------
        FileNotFoundError
            If neither ``root/name`` nor ``root/name.txt`` exists

        """
        directory = self.root / name
        if directory.is_dir():
            return directory
        source = self.root / f"{name}{self.parser_options.source_extension}"
        if source.is_file():
            return source
        raise FileNotFoundError(
            str(source),
            message=f"Document '{name}' doesn't exist in '{self.root}' (looked for {directory} and {source})",
        )

    def load_document(self, name: str) -> ParseResult:
        """Parse a document by name.

        Returns
        -------
        ParseResult
            Categories in declaration order; carries a warning when empty

        Raises
        ------
        FileNotFoundError
            If the document doesn't exist
        ParsingError
            If the document directory is empty

        """
        path = self.document_path(name)
        logger.debug("Loading document %s", path)
        return MarkupParser(self.parser_options).parse_path(path)

    def export_document(
        self,
        name: str,
        document_title: str,
        output_dir: Union[str, Path],
        html_template: Union[str, Path],
        css_template: Union[str, Path],
        options: HtmlExportOptions | None = None,
    ) -> ExportSummary:
        """Load a document and export it to HTML.

        Template and output paths are taken as given; relative paths are
        relative to the working directory, not the project root.

        Raises
        ------
        ValidationError
            If the document has no categories
        FileNotFoundError
            If a template or the output directory doesn't exist

        """
        result = self.load_document(name)
        if result.is_empty:
            raise ValidationError(f"There is no data to be exported in document '{name}'")

        template_lines = read_lines(html_template)
        css_text = read_text(css_template)

        exporter = HtmlExporter(options)
        return exporter.export(
            result.categories,
            document_title,
            output_dir,
            template_lines,
            css_text,
            template_name=str(html_template),
        )


__all__ = ["DocumentProject"]
