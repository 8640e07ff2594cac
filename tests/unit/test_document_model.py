"""Unit tests for the document model and options dataclasses."""

import pytest

from apidocs2html.document import Category, Element, ParseResult
from apidocs2html.options import HtmlExportOptions, MarkupParserOptions


@pytest.mark.unit
class TestCategory:
    """Test category construction and invariants."""

    def test_from_directive_plain(self):
        category = Category.from_directive("  Intro  ")

        assert category.title == "Intro"
        assert category.parent_attribute is None
        assert not category.has_attribute

    def test_from_directive_with_attribute(self):
        category = Category.from_directive("Transform|Core")

        assert category.title == "Transform"
        assert category.parent_attribute == "Core"
        assert category.is_nested
        assert not category.is_space

    def test_extra_separators_are_removed(self):
        assert Category.from_directive("A|B|C").parent_attribute == "BC"

    def test_empty_attribute_is_none(self):
        category = Category.from_directive("Intro| ")

        assert category.title == "Intro"
        assert category.parent_attribute is None

    def test_space_attribute(self):
        category = Category.from_directive("Changelog|Space")

        assert category.is_space
        assert not category.is_nested

    def test_title_cannot_contain_separator(self):
        with pytest.raises(ValueError):
            Category("A|B")

    def test_read_only_cannot_own_elements(self):
        with pytest.raises(ValueError):
            Category("Manual", is_read_only=True, elements=(Element("Note", "x"),))

    def test_source_path_not_compared(self):
        assert Category("A", source_path="a.txt") == Category("A", source_path="b.txt")

    def test_frozen(self):
        category = Category("A")

        with pytest.raises(AttributeError):
            category.title = "B"


@pytest.mark.unit
class TestParseResult:
    """Test parse result helpers."""

    def test_iteration_and_length(self):
        result = ParseResult(categories=(Category("A"), Category("B")))

        assert len(result) == 2
        assert [c.title for c in result] == ["A", "B"]
        assert not result.is_empty

    def test_empty(self):
        assert ParseResult().is_empty


@pytest.mark.unit
class TestOptions:
    """Test option validation and cloning."""

    def test_html_defaults(self):
        options = HtmlExportOptions()

        assert options.highlight_code is True
        assert options.extra_code_styles == ()
        assert options.css_filename == "style.css"
        assert options.page_extension == ".html"

    def test_create_updated(self):
        options = HtmlExportOptions()

        updated = options.create_updated(highlight_code=False)

        assert updated.highlight_code is False
        assert options.highlight_code is True

    def test_extra_styles_list_frozen(self):
        assert HtmlExportOptions(extra_code_styles=[]).extra_code_styles == ()

    def test_bad_page_extension(self):
        with pytest.raises(ValueError):
            HtmlExportOptions(page_extension="html")

    def test_empty_css_filename(self):
        with pytest.raises(ValueError):
            HtmlExportOptions(css_filename=" ")

    def test_markup_defaults(self):
        options = MarkupParserOptions()

        assert options.encoding == "utf-8"
        assert options.source_extension == ".txt"
