#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidocs2html/utils/text.py
"""Text processing utilities shared by the parser, highlighter and exporter.

Functions
---------
escape_angle_brackets : Replace literal ``<`` and ``>`` with HTML entities
page_slug : Turn a category title into its page file stem
parse_leading_digit : Read a single leading priority digit from a title
make_html_friendly : Convert newlines and indentation to HTML markup

Examples
--------
    >>> page_slug(" Getting Started ")
    'Getting_Started'
    >>> parse_leading_digit("1Group")
    (1, 'Group')

"""

from __future__ import annotations

import os

from apidocs2html.constants import HTML_INDENT, HTML_LINE_BREAK


def escape_angle_brackets(text: str) -> str:
    """Escape ``<`` and ``>`` so code symbols never collide with markup."""
    return text.replace("<", "&lt;").replace(">", "&gt;")


def page_slug(title: str) -> str:
    """Create the file stem used for a category page.

    Spaces are replaced with underscores and the result is trimmed; no other
    characters are touched, so links stay readable.

    Parameters
    ----------
    title : str
        Category title

    Returns
    -------
    str
        File stem, e.g. ``"Getting_Started"``

    """
    return title.replace(" ", "_").strip()


def parse_leading_digit(title: str) -> tuple[int, str] | None:
    """Split a single leading decimal digit off a title.

    Parameters
    ----------
    title : str
        Category title, e.g. ``"1Group"``

    Returns
    -------
    tuple[int, str] or None
        ``(digit, remainder)`` when the title starts with a digit 0-9 and has
        at least one more character, otherwise None. One-character titles are
        never treated as prefixed, even when they are a digit.

    """
    if len(title) <= 1:
        return None
    first = title[0]
    if first not in "0123456789":
        return None
    return int(first), title[1:]


def make_html_friendly(text: str) -> str:
    """Convert line separators and indentation to HTML markup.

    Newlines (platform and ``\\n``) become ``<br>``; tabs and runs of four
    spaces become ``&emsp;``.
    """
    if os.linesep != "\n":
        text = text.replace(os.linesep, HTML_LINE_BREAK)
    return text.replace("\n", HTML_LINE_BREAK).replace("\t", HTML_INDENT).replace("    ", HTML_INDENT)


__all__ = [
    "escape_angle_brackets",
    "page_slug",
    "parse_leading_digit",
    "make_html_friendly",
]
