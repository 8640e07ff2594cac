#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidocs2html/utils/__init__.py
"""Utility modules for the apidocs2html package.

This package contains the string helpers and file I/O wrappers used by the
parser, the highlighter and the HTML exporter.
"""

from apidocs2html.utils.text import escape_angle_brackets, make_html_friendly, page_slug, parse_leading_digit

__all__ = [
    "escape_angle_brackets",
    "make_html_friendly",
    "page_slug",
    "parse_leading_digit",
]
