#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidocs2html/parsers/markup.py
"""Markup source to category/element tree parser.

The source format is line oriented. Everything before the
``> DOCUMENT DATA <`` line is ignored; after it, ``|>`` lines open categories
and ``|#Class=content`` lines open elements inside the current category. All
remaining lines are appended to the open element.

Parsing is driven by an explicit state machine. Each input line is first
classified into a :class:`LineKind`, then the ``(state, kind)`` pair is looked
up in a transition table whose handlers perform the side effect and return
the next state. Pairs missing from the table leave the state unchanged and
drop the line.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from apidocs2html.constants import (
    CATEGORY_MARKER,
    DOCUMENT_DATA_MARKER,
    ELEMENT_MARKER,
    ELEMENT_SEPARATOR,
    EMPTY_DOCUMENT_WARNING,
    NEW_LINE_IGNORE_END,
    NEW_LINE_IGNORE_START,
    READ_ONLY_END_MARKER,
)
from apidocs2html.document import Category, Element, ParseResult
from apidocs2html.exceptions import ParsingError
from apidocs2html.options.markup import MarkupParserOptions
from apidocs2html.utils.io_utils import read_lines

logger = logging.getLogger(__name__)


class ParserState(Enum):
    """States of the markup parser."""

    SKIPPING = auto()
    AWAITING_CATEGORY = auto()
    IN_CATEGORY = auto()
    IN_ELEMENT = auto()


class LineKind(Enum):
    """Classification of a single source line."""

    DATA_MARKER = auto()
    CATEGORY = auto()
    ELEMENT = auto()
    IGNORE_START = auto()
    IGNORE_END = auto()
    TEXT = auto()


def classify_line(line: str) -> LineKind:
    """Classify a raw source line.

    Parameters
    ----------
    line : str
        Line without its terminator

    Returns
    -------
    LineKind
        The directive the line represents, or ``TEXT``

    """
    stripped = line.strip()
    if stripped == DOCUMENT_DATA_MARKER:
        return LineKind.DATA_MARKER
    if stripped.startswith(CATEGORY_MARKER):
        return LineKind.CATEGORY
    if stripped.startswith(ELEMENT_MARKER):
        return LineKind.ELEMENT
    if stripped == NEW_LINE_IGNORE_START:
        return LineKind.IGNORE_START
    if stripped == NEW_LINE_IGNORE_END:
        return LineKind.IGNORE_END
    return LineKind.TEXT


def split_element_directive(line: str) -> Optional[tuple[str, str]]:
    """Split an element directive into its class and first line of content.

    Parameters
    ----------
    line : str
        A line whose left-trimmed form starts with ``|#``

    Returns
    -------
    tuple[str, str] or None
        ``(style_class, content)``, or None when the directive has no ``=``
        or an empty class

    Examples
    --------
        >>> split_element_directive("|#Code=int x = 1;")
        ('Code', 'int x = 1;')
        >>> split_element_directive("|#Code") is None
        True

    """
    directive = line.lstrip()[len(ELEMENT_MARKER) :]
    style_class, separator, content = directive.partition(ELEMENT_SEPARATOR)
    style_class = style_class.strip()
    if not separator or not style_class:
        return None
    return style_class, content


@dataclass
class _OpenElement:
    style_class: str
    chunks: list[str] = field(default_factory=list)

    def close(self) -> Element:
        return Element(style_class=self.style_class, text="".join(self.chunks))


@dataclass
class _OpenCategory:
    header: Category
    elements: list[Element] = field(default_factory=list)

    def close(self) -> Category:
        return Category(
            title=self.header.title,
            parent_attribute=self.header.parent_attribute,
            is_read_only=False,
            elements=tuple(self.elements),
            source_path=self.header.source_path,
        )


class _ParseSession:
    """Mutable state for one pass over one source."""

    def __init__(self, source_path: Optional[str] = None):
        self.source_path = source_path
        self.state = ParserState.SKIPPING
        self.categories: list[Category] = []
        self.category: Optional[_OpenCategory] = None
        self.element: Optional[_OpenElement] = None
        self.joining = False
        self.line_number = 0

        reading = (ParserState.AWAITING_CATEGORY, ParserState.IN_CATEGORY, ParserState.IN_ELEMENT)
        in_category = (ParserState.IN_CATEGORY, ParserState.IN_ELEMENT)

        self.transitions: dict[tuple[ParserState, LineKind], Callable[[str], ParserState]] = {
            (ParserState.SKIPPING, LineKind.DATA_MARKER): self._enter_data,
        }
        for state in reading:
            self.transitions[(state, LineKind.CATEGORY)] = self._start_category
        for state in in_category:
            self.transitions[(state, LineKind.ELEMENT)] = self._start_element
        # A repeated data marker inside an element is ordinary content
        self.transitions[(ParserState.IN_ELEMENT, LineKind.DATA_MARKER)] = self._append_text
        self.transitions[(ParserState.IN_ELEMENT, LineKind.TEXT)] = self._append_text
        self.transitions[(ParserState.IN_ELEMENT, LineKind.IGNORE_START)] = self._begin_join
        self.transitions[(ParserState.IN_ELEMENT, LineKind.IGNORE_END)] = self._end_join

    def feed(self, line: str) -> None:
        self.line_number += 1
        handler = self.transitions.get((self.state, classify_line(line)))
        if handler is not None:
            self.state = handler(line)

    def finish(self) -> list[Category]:
        self._close_element()
        self._close_category()
        self.state = ParserState.SKIPPING
        return self.categories

    # -- handlers -----------------------------------------------------------

    def _enter_data(self, line: str) -> ParserState:
        return ParserState.AWAITING_CATEGORY

    def _start_category(self, line: str) -> ParserState:
        self._close_element()
        self._close_category()

        is_read_only = line.rstrip().endswith(READ_ONLY_END_MARKER)
        directive = line.strip()[len(CATEGORY_MARKER) :]
        if is_read_only:
            directive = directive[: -len(READ_ONLY_END_MARKER)]
        header = Category.from_directive(directive.rstrip(), is_read_only=is_read_only, source_path=self.source_path)

        if is_read_only:
            self.categories.append(header)
            return ParserState.AWAITING_CATEGORY

        self.category = _OpenCategory(header=header)
        return ParserState.IN_CATEGORY

    def _start_element(self, line: str) -> ParserState:
        self._close_element()
        parts = split_element_directive(line)
        if parts is None:
            logger.debug("Discarding malformed element directive at line %d: %r", self.line_number, line)
            return ParserState.IN_CATEGORY
        style_class, content = parts
        self.element = _OpenElement(style_class=style_class, chunks=[content])
        return ParserState.IN_ELEMENT

    def _append_text(self, line: str) -> ParserState:
        assert self.element is not None
        if self.joining:
            self.element.chunks.append(line)
        else:
            self.element.chunks.append("\n" + line)
        return ParserState.IN_ELEMENT

    def _begin_join(self, line: str) -> ParserState:
        self.joining = True
        return ParserState.IN_ELEMENT

    def _end_join(self, line: str) -> ParserState:
        self.joining = False
        return ParserState.IN_ELEMENT

    # -- flushing -----------------------------------------------------------

    def _close_element(self) -> None:
        if self.element is not None and self.category is not None:
            self.category.elements.append(self.element.close())
        self.element = None
        self.joining = False

    def _close_category(self) -> None:
        if self.category is not None:
            self.categories.append(self.category.close())
        self.category = None


class MarkupParser:
    """Parse markup sources into categories and elements.

    Parameters
    ----------
    options : MarkupParserOptions or None, default None
        Parser options; defaults are used when omitted

    Examples
    --------
        >>> parser = MarkupParser()
        >>> result = parser.parse_lines([
        ...     "> DOCUMENT DATA <",
        ...     "|>Intro",
        ...     "|#Description=Hello",
        ...     "world",
        ... ])
        >>> result.categories[0].elements[0].text
        'Hello\\nworld'

    """

    def __init__(self, options: MarkupParserOptions | None = None):
        """Initialize the parser with options."""
        self.options: MarkupParserOptions = options or MarkupParserOptions()

    def parse_lines(self, lines: Iterable[str], source_path: Optional[str] = None) -> ParseResult:
        """Parse already-read lines.

        Parameters
        ----------
        lines : iterable of str
            Source lines without terminators
        source_path : str, optional
            Origin of the lines, recorded on each category

        Returns
        -------
        ParseResult
            Categories in declaration order, with a warning when empty

        """
        categories = self._parse_categories(lines, source_path)
        return self._result(categories)

    def parse_file(self, path: Union[str, Path]) -> ParseResult:
        """Parse a single markup file.

        Raises
        ------
        FileNotFoundError
            If the file does not exist
        FileAccessError
            If the file cannot be read

        """
        return self._result(self._parse_file_categories(Path(path)))

    def parse_directory(self, path: Union[str, Path]) -> ParseResult:
        """Parse every file of a directory as one document.

        Each file is parsed independently and the categories are concatenated
        in file-name order.

        Raises
        ------
        ParsingError
            If the directory contains no files

        """
        directory = Path(path)
        files = sorted((entry for entry in directory.iterdir() if entry.is_file()), key=lambda p: p.name)
        if not files:
            raise ParsingError(
                f"The document directory '{directory}' has no data inside.", parsing_stage="directory_scan"
            )

        categories: list[Category] = []
        for file_path in files:
            parsed = self._parse_file_categories(file_path)
            logger.debug("Read %d categories from %s", len(parsed), file_path)
            categories.extend(parsed)
        return self._result(categories)

    def parse_path(self, path: Union[str, Path]) -> ParseResult:
        """Parse a file or a directory of files."""
        source = Path(path)
        if source.is_dir():
            return self.parse_directory(source)
        return self.parse_file(source)

    def _parse_file_categories(self, path: Path) -> list[Category]:
        lines = read_lines(path, encoding=self.options.encoding)
        return self._parse_categories(lines, str(path))

    @staticmethod
    def _parse_categories(lines: Iterable[str], source_path: Optional[str]) -> list[Category]:
        session = _ParseSession(source_path)
        for line in lines:
            session.feed(line)
        return session.finish()

    @staticmethod
    def _result(categories: list[Category]) -> ParseResult:
        if not categories:
            logger.warning(EMPTY_DOCUMENT_WARNING)
            return ParseResult(categories=(), warning=EMPTY_DOCUMENT_WARNING)
        return ParseResult(categories=tuple(categories))


def parse_markup(lines: Iterable[str]) -> ParseResult:
    """Parse markup lines with default options."""
    return MarkupParser().parse_lines(lines)


__all__ = ["LineKind", "MarkupParser", "ParserState", "classify_line", "parse_markup", "split_element_directive"]
