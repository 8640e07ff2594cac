#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidocs2html/resolver.py
"""Category attribute resolution and navigation ordering.

Categories may carry an attribute after a ``|`` in their directive line:

- ``|Space`` inserts a visual break above the category in the sidebar.
- ``|OtherTitle`` nests the category under the category titled ``OtherTitle``.

Every distinct non-``Space`` attribute name forms a *group*. A category whose
title is a single digit followed by exactly the group name (``1Group``) is the
group's declared base: the digit is the group's sort priority and is removed
from the displayed title. Groups without a declared base get priority 9.

Resolution is pure. The input categories are left untouched; renamed bases
are new :class:`~apidocs2html.document.Category` instances.

Examples
--------
    >>> from apidocs2html.document import Category
    >>> resolved = resolve_categories([
    ...     Category("1Group"),
    ...     Category("A", parent_attribute="Group"),
    ...     Category("B", parent_attribute="Group"),
    ...     Category("Other"),
    ... ])
    >>> [entry.category.title for entry in resolved.navigation]
    ['Group', 'A', 'B', 'Other']

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from apidocs2html.constants import DEFAULT_GROUP_PRIORITY, SPACE_ATTRIBUTE
from apidocs2html.document import Category
from apidocs2html.utils.text import parse_leading_digit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttributeGroup:
    """A named attribute group and its sort priority.

    Parameters
    ----------
    name : str
        Attribute name as written after ``|``
    priority : int
        0 sorts first; groups without a declared base use 9
    base_index : int or None
        Position of the declared base category, if any

    """

    name: str
    priority: int = DEFAULT_GROUP_PRIORITY
    base_index: Optional[int] = None


@dataclass(frozen=True)
class NavigationEntry:
    """One sidebar line."""

    category: Category
    depth: int = 0

    @property
    def is_break(self) -> bool:
        return self.category.is_space


@dataclass(frozen=True)
class ResolvedDocument:
    """Result of attribute resolution.

    Parameters
    ----------
    categories : tuple[Category, ...]
        Categories in declaration order, with declared bases renamed
    navigation : tuple[NavigationEntry, ...]
        Sidebar entries in render order
    groups : tuple[AttributeGroup, ...]
        Attribute groups in iteration (priority) order

    """

    categories: tuple[Category, ...]
    navigation: tuple[NavigationEntry, ...]
    groups: tuple[AttributeGroup, ...] = ()


def collect_attribute_names(categories: Sequence[Category]) -> list[str]:
    """Return distinct attribute names in first-reference order."""
    names: list[str] = []
    for category in categories:
        if category.has_attribute and category.parent_attribute not in names:
            names.append(category.parent_attribute)  # type: ignore[arg-type]
    return names


def find_attribute_groups(
    categories: Sequence[Category], names: Sequence[str]
) -> tuple[list[AttributeGroup], list[str]]:
    """Locate declared bases and compute group priorities.

    Parameters
    ----------
    categories : sequence of Category
        Categories in declaration order
    names : sequence of str
        Attribute names from :func:`collect_attribute_names`

    Returns
    -------
    tuple[list[AttributeGroup], list[str]]
        Groups in discovery order (unsorted) and the category titles after
        priority digits were stripped from declared bases

    """
    titles = [category.title for category in categories]
    groups: list[AttributeGroup] = []

    for name in names:
        if name == SPACE_ATTRIBUTE:
            groups.append(AttributeGroup(name=name))
            continue

        for index, title in enumerate(titles):
            parsed = parse_leading_digit(title)
            if parsed is not None and parsed[1] == name:
                titles[index] = name
                groups.append(AttributeGroup(name=name, priority=parsed[0], base_index=index))
                break
        else:
            groups.append(AttributeGroup(name=name))

    return groups, titles


class _Placement:
    """Ordered, duplicate-free list of category indices."""

    def __init__(self, categories: Sequence[Category]):
        self.categories = categories
        self.order: list[int] = []
        self.placed: set[int] = set()

    def __contains__(self, index: int) -> bool:
        return index in self.placed

    def append(self, index: int) -> None:
        self.order.append(index)
        self.placed.add(index)

    def append_with_children(self, index: int) -> None:
        self.append(index)
        self.insert_children(index, len(self.order))

    def insert_children(self, parent_index: int, position: int) -> int:
        """Place the unplaced children of a category at ``position``, depth first.

        Returns the position just past the inserted subtree.
        """
        parent_title = self.categories[parent_index].title
        for index, category in enumerate(self.categories):
            if index in self.placed or not category.is_nested or category.parent_attribute != parent_title:
                continue
            self.order.insert(position, index)
            self.placed.add(index)
            position = self.insert_children(index, position + 1)
        return position


def order_categories(categories: Sequence[Category], groups: Sequence[AttributeGroup]) -> list[int]:
    """Compute the navigation order as indices into ``categories``.

    ``categories`` must already carry the stripped base titles.

    Groups are visited in the given order. For each group, every unplaced
    category that is the group base, has no attribute, or has the ``Space``
    attribute is appended; a ``Space`` category that is itself the base of
    another group waits for that group's turn. The group's children are then
    placed directly after the base, or appended if the group has no base
    category at all.
    """
    if not groups:
        return list(range(len(categories)))

    referenced = {category.parent_attribute for category in categories if category.is_nested}
    titles = {category.title: index for index, category in reversed(list(enumerate(categories)))}
    placement = _Placement(categories)

    for group in groups:
        for index, category in enumerate(categories):
            if index in placement:
                continue
            if not (category.title == group.name or not category.has_attribute or category.is_space):
                continue
            if category.is_space and category.title != group.name and category.title in referenced:
                continue
            placement.append(index)

        if group.name == SPACE_ATTRIBUTE:
            continue

        base_index = titles.get(group.name)
        if base_index is None:
            for index, category in enumerate(categories):
                if index not in placement and category.parent_attribute == group.name:
                    placement.append_with_children(index)
        elif base_index in placement:
            placement.insert_children(base_index, placement.order.index(base_index) + 1)
        # Otherwise the base is placed later and brings its children along

    for index in range(len(categories)):
        if index not in placement:
            logger.debug("Category '%s' is not reachable from any group", categories[index].title)
            placement.append(index)

    return placement.order


def nesting_depth(category: Category, by_title: dict[str, Category]) -> int:
    """Count nesting ancestors reachable through attributes.

    A nested category whose parent does not exist still counts as depth 1.
    Cycles stop the walk.
    """
    depth = 0
    seen = {category.title}
    current = category
    while current.is_nested:
        depth += 1
        parent = by_title.get(current.parent_attribute)  # type: ignore[arg-type]
        if parent is None or parent.title in seen:
            break
        seen.add(parent.title)
        current = parent
    return depth


def resolve_categories(categories: Sequence[Category]) -> ResolvedDocument:
    """Resolve attributes into a render order and hierarchy depth.

    Parameters
    ----------
    categories : sequence of Category
        Categories in declaration order

    Returns
    -------
    ResolvedDocument
        Renamed categories in declaration order plus navigation entries

    """
    names = collect_attribute_names(categories)
    groups, titles = find_attribute_groups(categories, names)

    renamed = tuple(
        category if category.title == title else replace(category, title=title)
        for category, title in zip(categories, titles)
    )
    for group in groups:
        if group.base_index is not None:
            logger.debug("Group '%s' declared with priority %d", group.name, group.priority)

    sorted_groups = sorted(groups, key=lambda group: group.priority)
    order = order_categories(renamed, sorted_groups)

    by_title: dict[str, Category] = {}
    for category in renamed:
        by_title.setdefault(category.title, category)

    navigation = tuple(
        NavigationEntry(category=renamed[index], depth=nesting_depth(renamed[index], by_title)) for index in order
    )
    return ResolvedDocument(categories=renamed, navigation=navigation, groups=tuple(sorted_groups))


__all__ = [
    "AttributeGroup",
    "NavigationEntry",
    "ResolvedDocument",
    "collect_attribute_names",
    "find_attribute_groups",
    "nesting_depth",
    "order_categories",
    "resolve_categories",
]
