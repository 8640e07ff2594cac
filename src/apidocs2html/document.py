#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidocs2html/document.py
"""Document model produced by the markup parser.

A document is an ordered sequence of :class:`Category` nodes, each owning an
ordered sequence of :class:`Element` nodes. All nodes are frozen dataclasses:
once the parser has closed a node it never changes, and later stages (the
attribute resolver in particular) derive new instances instead of mutating.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from apidocs2html.constants import ATTRIBUTE_SEPARATOR, SPACE_ATTRIBUTE


@dataclass(frozen=True)
class Element:
    """A single content block inside a category.

    Parameters
    ----------
    style_class : str
        Class of the wrapping HTML block, e.g. ``"Code"`` or ``"Description"``
    text : str
        Body text; continuation lines are joined with ``"\\n"``

    """

    style_class: str
    text: str = ""


@dataclass(frozen=True)
class Category:
    """A navigable documentation section.

    Parameters
    ----------
    title : str
        Display name without any ``|attribute`` suffix
    parent_attribute : str or None, default None
        ``"Space"`` for a visual break, or the title of the category this one
        nests under
    is_read_only : bool, default False
        Read-only categories show up as plain sidebar text and own no elements
    elements : tuple[Element, ...], default ()
        Content blocks in source order
    source_path : str or None, default None
        File the category was read from, for diagnostics only

    """

    title: str
    parent_attribute: Optional[str] = None
    is_read_only: bool = False
    elements: tuple[Element, ...] = ()
    source_path: Optional[str] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Enforce the read-only and title invariants."""
        if ATTRIBUTE_SEPARATOR in self.title:
            raise ValueError(f"Category title must not contain '{ATTRIBUTE_SEPARATOR}': {self.title!r}")
        if self.is_read_only and self.elements:
            raise ValueError(f"Read-only category '{self.title}' cannot own elements")

    @classmethod
    def from_directive(
        cls, directive: str, *, is_read_only: bool = False, source_path: Optional[str] = None
    ) -> Category:
        """Build a category from the directive text that follows the marker.

        ``"Name|Attribute"`` yields title ``"Name"`` and attribute
        ``"Attribute"``; the attribute is everything after the title with all
        separators removed.
        """
        if ATTRIBUTE_SEPARATOR not in directive:
            return cls(title=directive.strip(), is_read_only=is_read_only, source_path=source_path)

        title, _, rest = directive.partition(ATTRIBUTE_SEPARATOR)
        attribute = rest.replace(ATTRIBUTE_SEPARATOR, "").strip()
        return cls(
            title=title.strip(),
            parent_attribute=attribute or None,
            is_read_only=is_read_only,
            source_path=source_path,
        )

    @property
    def has_attribute(self) -> bool:
        return bool(self.parent_attribute)

    @property
    def is_space(self) -> bool:
        """Whether the category is preceded by a visual break in the sidebar."""
        return self.parent_attribute == SPACE_ATTRIBUTE

    @property
    def is_nested(self) -> bool:
        """Whether the category nests under another category."""
        return self.has_attribute and not self.is_space


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one document.

    Parameters
    ----------
    categories : tuple[Category, ...]
        Categories in source declaration order
    warning : str or None
        Advisory message, set when nothing could be read

    """

    categories: tuple[Category, ...] = ()
    warning: Optional[str] = None

    def __len__(self) -> int:
        return len(self.categories)

    def __iter__(self):
        return iter(self.categories)

    @property
    def is_empty(self) -> bool:
        return not self.categories


__all__ = ["Element", "Category", "ParseResult"]
