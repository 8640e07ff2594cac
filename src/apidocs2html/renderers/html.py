#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidocs2html/renderers/html.py
"""HTML page export from parsed categories.

This module provides the :class:`HtmlExporter`, which turns a list of
categories into one static HTML page per category plus a stylesheet. Pages are
built from a user-supplied template that must contain four macros:

- ``|PAGE_HEAD|`` - replaced with the category title (usually in ``<title>``)
- ``|DOCS_TITLE|`` - replaced with the document title
- ``<!--CATEGORIES-->`` - a line of its own; sidebar entries go below it
- ``<!--CONTAINER-->`` - a line of its own; element blocks go below it

Rendering is split from writing: :meth:`HtmlExporter.render_pages` builds all
pages in memory, :meth:`HtmlExporter.export` writes them. Pages are written one
by one, so a write failure leaves the pages written before it on disk.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Union

from apidocs2html.constants import (
    CATEGORIES_MARKER,
    CODE_STYLE_CLASS,
    CONTAINER_MARKER,
    DOCUMENT_TITLE_MACRO,
    HEAD_TITLE_MACRO,
    HTML_INDENT,
    HTML_LINE_BREAK,
)
from apidocs2html.document import Category, Element
from apidocs2html.exceptions import FileNotFoundError, RenderingError, TemplateMacroError
from apidocs2html.highlight import BUILTIN_CODE_STYLES, convert_style_macros, highlight_code
from apidocs2html.options.html import HtmlExportOptions
from apidocs2html.resolver import NavigationEntry, ResolvedDocument, resolve_categories
from apidocs2html.utils.io_utils import write_lines, write_text
from apidocs2html.utils.text import make_html_friendly, page_slug

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemplateLayout:
    """Line positions of the template macros.

    Parameters
    ----------
    head_index : int
        Line containing ``|PAGE_HEAD|``
    title_index : int
        Line containing ``|DOCS_TITLE|``
    categories_index : int
        Line right after the ``<!--CATEGORIES-->`` marker
    container_index : int
        Line right after the ``<!--CONTAINER-->`` marker

    """

    head_index: int
    title_index: int
    categories_index: int
    container_index: int


def scan_template(lines: Sequence[str], template_name: str | None = None) -> TemplateLayout:
    """Locate the four required macros in a template.

    The head and title macros may appear anywhere in a line; the categories
    and container markers must be the whole line once trimmed. The first
    occurrence of each wins.

    Parameters
    ----------
    lines : sequence of str
        Template lines
    template_name : str, optional
        Used in the error message

    Returns
    -------
    TemplateLayout
        Positions of the macros

    Raises
    ------
    TemplateMacroError
        If any macro is missing; every missing macro is named

    """
    head_index = title_index = categories_index = container_index = -1

    for index, raw_line in enumerate(lines):
        line = raw_line.strip()
        if head_index == -1 and HEAD_TITLE_MACRO in line:
            head_index = index
        if title_index == -1 and DOCUMENT_TITLE_MACRO in line:
            title_index = index
        if categories_index == -1 and line == CATEGORIES_MARKER:
            categories_index = index + 1
        if container_index == -1 and line == CONTAINER_MARKER:
            container_index = index + 1

    missing = [
        macro
        for macro, position in (
            (HEAD_TITLE_MACRO, head_index),
            (DOCUMENT_TITLE_MACRO, title_index),
            (CATEGORIES_MARKER, categories_index),
            (CONTAINER_MARKER, container_index),
        )
        if position == -1
    ]
    if missing:
        raise TemplateMacroError(missing, template_name=template_name)

    return TemplateLayout(
        head_index=head_index,
        title_index=title_index,
        categories_index=categories_index,
        container_index=container_index,
    )


@dataclass(frozen=True)
class ExportSummary:
    """Files produced by an export."""

    pages: tuple[Path, ...]
    stylesheet: Path

    @property
    def file_count(self) -> int:
        return len(self.pages) + 1


class HtmlExporter:
    """Export categories to static HTML pages.

    Parameters
    ----------
    options : HtmlExportOptions or None, default None
        Export options

    Examples
    --------
        >>> exporter = HtmlExporter()
        >>> pages = exporter.render_pages(categories, "My API", template_lines)
        >>> summary = exporter.export(categories, "My API", "out", template_lines, css_text)

    """

    def __init__(self, options: HtmlExportOptions | None = None):
        """Initialize the exporter with options."""
        self.options: HtmlExportOptions = options or HtmlExportOptions()
        self._macro_styles = (*BUILTIN_CODE_STYLES, *self.options.extra_code_styles)

    def page_filename(self, category: Category) -> str:
        return f"{page_slug(category.title)}{self.options.page_extension}"

    def render_sidebar(self, navigation: Sequence[NavigationEntry]) -> list[str]:
        """Render one sidebar line per navigation entry.

        Read-only categories are plain text; the others are list items linking
        to their page. ``Space`` categories get a leading line break and
        nested categories are indented once per nesting level.
        """
        sidebar = []
        for entry in navigation:
            category = entry.category
            prefix = HTML_LINE_BREAK if entry.is_break else ""
            indent = HTML_INDENT * entry.depth
            if category.is_read_only:
                sidebar.append(f"{prefix}{indent}{category.title}")
            else:
                href = self.page_filename(category)
                sidebar.append(f'{prefix}<li>{indent}<a href="{href}">{category.title}</a></li>')
        return sidebar

    def render_element(self, element: Element) -> str:
        """Render an element as a ``<div>`` block."""
        body = element.text
        if element.style_class == CODE_STYLE_CLASS and self.options.highlight_code:
            body = highlight_code(body, self.options.extra_code_styles)
        body = make_html_friendly(convert_style_macros(body, self._macro_styles))
        return f'<div class="{element.style_class}">{body}</div>'

    def render_page(
        self,
        category: Category,
        document_title: str,
        template_lines: Sequence[str],
        layout: TemplateLayout,
        sidebar: Sequence[str],
    ) -> list[str]:
        """Render a single category page.

        Raises
        ------
        RenderingError
            If an element would be inserted past the end of the page

        """
        lines = list(template_lines)
        lines[layout.head_index] = lines[layout.head_index].replace(HEAD_TITLE_MACRO, category.title)
        lines[layout.title_index] = lines[layout.title_index].replace(DOCUMENT_TITLE_MACRO, document_title)

        lines[layout.categories_index : layout.categories_index] = sidebar

        if category.is_read_only:
            return lines

        container_index = layout.container_index
        if layout.categories_index <= layout.container_index:
            container_index += len(sidebar)

        for offset, element in enumerate(category.elements):
            index = container_index + offset
            if index >= len(lines):
                raise RenderingError(
                    f"Index of element insertion in '{category.title}' category is higher than expected "
                    f"({index} vs {len(lines)}). Please fix your source!",
                    rendering_stage="element_insertion",
                )
            lines.insert(index, self.render_element(element))
        return lines

    def render_pages(
        self,
        categories: Sequence[Category],
        document_title: str,
        template_lines: Sequence[str],
        template_name: str | None = None,
    ) -> dict[str, list[str]]:
        """Render every category page in memory.

        Parameters
        ----------
        categories : sequence of Category
            Categories in declaration order
        document_title : str
            Title substituted for ``|DOCS_TITLE|``
        template_lines : sequence of str
            HTML template lines
        template_name : str, optional
            Used in error messages

        Returns
        -------
        dict[str, list[str]]
            Page file name to page lines, in declaration order

        Raises
        ------
        TemplateMacroError
            If the template lacks a required macro
        RenderingError
            If element insertion overflows a page

        """
        layout = scan_template(template_lines, template_name)
        resolved = resolve_categories(categories)
        return self._render_resolved(resolved, document_title, template_lines, layout)

    def _render_resolved(
        self,
        resolved: ResolvedDocument,
        document_title: str,
        template_lines: Sequence[str],
        layout: TemplateLayout,
    ) -> dict[str, list[str]]:
        sidebar = self.render_sidebar(resolved.navigation)
        pages: dict[str, list[str]] = {}
        for category in resolved.categories:
            filename = self.page_filename(category)
            if filename in pages:
                logger.warning("Category '%s' overwrites page %s", category.title, filename)
            pages[filename] = self.render_page(category, document_title, template_lines, layout, sidebar)
        return pages

    def export(
        self,
        categories: Sequence[Category],
        document_title: str,
        target_dir: Union[str, Path],
        template_lines: Sequence[str],
        css_text: str,
        template_name: str | None = None,
    ) -> ExportSummary:
        """Render and write every page plus the stylesheet.

        Parameters
        ----------
        categories : sequence of Category
            Categories in declaration order
        document_title : str
            Title substituted for ``|DOCS_TITLE|``
        target_dir : str or Path
            Existing output directory
        template_lines : sequence of str
            HTML template lines
        css_text : str
            Stylesheet contents, written verbatim
        template_name : str, optional
            Used in error messages

        Returns
        -------
        ExportSummary
            Paths of the written files

        Raises
        ------
        FileNotFoundError
            If the target directory does not exist
        TemplateMacroError
            If the template lacks a required macro
        RenderingError
            If element insertion overflows a page; nothing is written
        OutputWriteError
            If a file cannot be written; earlier files are kept

        """
        target = Path(target_dir)
        if not target.is_dir():
            raise FileNotFoundError(str(target), message=f"Target directory '{target}' doesn't exist")

        layout = scan_template(template_lines, template_name)
        pages = self._render_resolved(resolve_categories(categories), document_title, template_lines, layout)

        written: list[Path] = []
        for filename, page in pages.items():
            page_path = target / filename
            write_lines(page_path, page, encoding=self.options.encoding)
            written.append(page_path)
            logger.info("Wrote %s", page_path)

        stylesheet = target / self.options.css_filename
        write_text(stylesheet, css_text, encoding=self.options.encoding)
        logger.info("Wrote %s", stylesheet)

        return ExportSummary(pages=tuple(written), stylesheet=stylesheet)


__all__ = ["ExportSummary", "HtmlExporter", "TemplateLayout", "scan_template"]
