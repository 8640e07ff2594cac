#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidocs2html/highlight.py
"""Regex-driven highlighting for code elements.

Highlighting happens in two passes. :func:`highlight_code` wraps tokens in
short *macros* such as ``<ck>int</c>``; :func:`convert_style_macros` later
turns every macro into a ``<span>`` carrying the style's CSS class. Literal
``<`` and ``>`` in the code are escaped before any macro is inserted, so the
macros are the only angle brackets left in highlighted text.

The built-in style table targets C# and Unity sources. Callers extend it with
their own :class:`CodeStyle` rules, which are applied after the built-ins in
the order given.

"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, Optional, Sequence

from apidocs2html.constants import CODE_COMMENT_MARKER, CODE_END_MACRO
from apidocs2html.exceptions import ValidationError
from apidocs2html.utils.text import escape_angle_brackets

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CodeStyle:
    """A named highlighting rule.

    Parameters
    ----------
    name : str
        CSS class emitted for matched tokens, e.g. ``"CodeKeyword"``
    start_macro : str
        Macro inserted before each match, e.g. ``"<ck>"``
    patterns : tuple[str, ...], default ()
        Regular expressions applied in order
    is_comment : bool, default False
        Marks the style used for ``//`` comments
    end_macro : str, default "</c>"
        Macro inserted after each match; shared by all styles

    Raises
    ------
    ValidationError
        If a pattern is not a valid regular expression or the macro is empty

    """

    name: str
    start_macro: str
    patterns: tuple[str, ...] = ()
    is_comment: bool = False
    end_macro: str = CODE_END_MACRO
    compiled: tuple[re.Pattern[str], ...] = field(default=(), init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Compile patterns and validate the macros."""
        if not self.name or not self.start_macro:
            raise ValidationError("Code style needs a name and a start macro", parameter_name="code_style")
        if not isinstance(self.patterns, tuple):
            object.__setattr__(self, "patterns", tuple(self.patterns))
        compiled = []
        for pattern in self.patterns:
            try:
                compiled.append(re.compile(pattern))
            except re.error as e:
                raise ValidationError(
                    f"Invalid pattern for code style '{self.name}': {e}",
                    parameter_name="patterns",
                    parameter_value=pattern,
                    original_error=e,
                ) from e
        object.__setattr__(self, "compiled", tuple(compiled))

    def wrap(self, text: str) -> str:
        return f"{self.start_macro}{text}{self.end_macro}"

    def apply(self, line: str, macros: Iterable[str] = ()) -> str:
        """Wrap every match of every pattern, one sweep per pattern.

        Macro tokens already in the line (this style's own plus ``macros``)
        are skipped, so a pattern never matches inside inserted macro text.
        """
        guard = _macro_alternation((self.start_macro, self.end_macro, *macros))
        for pattern in self.patterns:
            line = _guarded_pattern(pattern, guard).sub(self._replace, line)
        return line

    def _replace(self, match: re.Match[str]) -> str:
        text = match.group(0)
        if match.group(_MACRO_GROUP) is not None or not text:
            return text
        return self.wrap(text)


_MACRO_GROUP = "_macro"


def _macro_alternation(macros: Iterable[str]) -> str:
    # Longest first so a macro is never cut short by one of its prefixes
    distinct = sorted(set(macros), key=lambda macro: (-len(macro), macro))
    return "|".join(re.escape(macro) for macro in distinct)


@lru_cache(maxsize=256)
def _guarded_pattern(pattern: str, guard: str) -> re.Pattern[str]:
    return re.compile(f"(?P<{_MACRO_GROUP}>{guard})|(?:{pattern})")


BUILTIN_CODE_STYLES: tuple[CodeStyle, ...] = (
    CodeStyle(name="CodeComment", start_macro="<cc>", is_comment=True),
    CodeStyle(
        name="CodeType",
        start_macro="<ct>",
        patterns=(
            # Attributes
            r"(RequireComponent|CustomEditor|Range(?=(\(|\s+?\()))|(?<=\[)(Space|CanEditMultipleObjects|SerializeField)(?=\])",
            # Engine classes
            r"(?<!\w)(Camera|MonoBehaviour|MeshFilter|List|Mathf|Object|Collider|GameObject|Renderer|Mesh|AudioClip)(?!\w)",
            r"(?<!\w)(Input|KeyCode)(?!\w)",
            r"(?<!\w)(Ray|Physics|RaycastHit)(?!\w)",
            r"(?<!\w)(Debug|Time|Transform)(?!\w)",
        ),
    ),
    CodeStyle(
        name="CodeKeyword",
        start_macro="<ck>",
        patterns=(
            r"(?<!\w)(using|get|async|virtual|set|public|private|sealed|static|abstract|protected|override|base|new"
            r"|void|class|return|out|in|typeof|if|while|else|for|foreach|continue|null)(?!\w)",
            # Datatypes
            r"(?<!\w)(Vector3|Vector2|Quaternion|true|false|bool|int|float|string|var)(?!\w)",
        ),
    ),
    CodeStyle(
        name="CodeString",
        start_macro="<cs>",
        patterns=(
            # Quoted strings, then integers and floats with an optional f suffix
            r"(\"((\\[^\n]|[^\"\n])*)\")|((?<!\w)([-+]?[0-9]*\.?[0-9]+)f?)",
        ),
    ),
)


def find_comment_style(styles: Iterable[CodeStyle]) -> Optional[CodeStyle]:
    """Return the first style flagged as the comment style, if any."""
    for style in styles:
        if style.is_comment:
            return style
    return None


def highlight_line(line: str, styles: Sequence[CodeStyle], comment_style: Optional[CodeStyle] = None) -> str:
    """Highlight a single physical line.

    Parameters
    ----------
    line : str
        One line of code, without terminator
    styles : sequence of CodeStyle
        Token styles in application order
    comment_style : CodeStyle or None
        Style wrapping ``//`` comments; comments are left alone when None

    Returns
    -------
    str
        The line with macros inserted

    """
    line = escape_angle_brackets(line)

    comment = ""
    if comment_style is not None:
        marker_index = line.find(CODE_COMMENT_MARKER)
        if marker_index == 0:
            return comment_style.wrap(line)
        if marker_index > 0:
            comment = comment_style.wrap(line[marker_index:])
            line = line[:marker_index]

    macros = [macro for style in styles for macro in (style.start_macro, style.end_macro)]
    for style in styles:
        if not style.is_comment:
            line = style.apply(line, macros)

    return line + comment


def highlight_code(
    text: str,
    extra_styles: Sequence[CodeStyle] = (),
    styles: Sequence[CodeStyle] = BUILTIN_CODE_STYLES,
) -> str:
    """Insert highlighting macros into a block of code.

    The text is split on ``"\\n"``; each line is escaped, its ``//`` comment
    (if any) is wrapped, and the remaining tokens are matched against
    ``styles`` followed by ``extra_styles``. Lines are rejoined with the
    platform line separator, including a trailing separator after the last
    line.

    Parameters
    ----------
    text : str
        Code to highlight
    extra_styles : sequence of CodeStyle, default ()
        Caller-supplied styles applied after ``styles``
    styles : sequence of CodeStyle, default BUILTIN_CODE_STYLES
        Base style table; its comment style handles ``//`` comments

    Returns
    -------
    str
        Highlighted text containing style macros

    Examples
    --------
        >>> highlight_code("int x") == "<ck>int</c> x" + os.linesep
        True

    """
    comment_style = find_comment_style(styles)
    if comment_style is None:
        logger.debug("No comment style registered; '//' comments are not highlighted")

    active = [*styles, *extra_styles]
    lines = text.split("\n")
    return "".join(highlight_line(line, active, comment_style) + os.linesep for line in lines)


def convert_style_macros(text: str, styles: Sequence[CodeStyle] = BUILTIN_CODE_STYLES) -> str:
    """Replace style macros with ``<span>`` elements.

    Parameters
    ----------
    text : str
        Text possibly containing macros
    styles : sequence of CodeStyle
        Every style whose start macro should be converted

    Returns
    -------
    str
        Text where ``<ck>`` becomes ``<span class="CodeKeyword">`` and the
        shared end macro becomes ``</span>``

    """
    end_macros = set()
    for style in styles:
        text = text.replace(style.start_macro, f'<span class="{style.name}">')
        end_macros.add(style.end_macro)
    for end_macro in end_macros:
        text = text.replace(end_macro, "</span>")
    return text


__all__ = [
    "BUILTIN_CODE_STYLES",
    "CodeStyle",
    "convert_style_macros",
    "find_comment_style",
    "highlight_code",
    "highlight_line",
]
