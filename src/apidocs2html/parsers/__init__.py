#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidocs2html/parsers/__init__.py
"""Parsers turning markup sources into the document model."""

from apidocs2html.parsers.markup import LineKind, MarkupParser, ParserState, classify_line, parse_markup

__all__ = ["LineKind", "MarkupParser", "ParserState", "classify_line", "parse_markup"]
