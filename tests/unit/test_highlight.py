"""Unit tests for the regex-driven code highlighter."""

import os

import pytest
from hypothesis import given
from hypothesis import strategies as st

from apidocs2html.exceptions import ValidationError
from apidocs2html.highlight import (
    BUILTIN_CODE_STYLES,
    CodeStyle,
    convert_style_macros,
    find_comment_style,
    highlight_code,
    highlight_line,
)

COMMENT_STYLE = find_comment_style(BUILTIN_CODE_STYLES)


def _highlight(line):
    return highlight_line(line, BUILTIN_CODE_STYLES, COMMENT_STYLE)


@pytest.mark.unit
class TestCodeStyle:
    """Test style construction and application."""

    def test_invalid_pattern_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            CodeStyle(name="Broken", start_macro="<cb>", patterns=("(unclosed",))

        assert exc_info.value.parameter_name == "patterns"
        assert exc_info.value.original_error is not None

    def test_empty_macro_raises(self):
        with pytest.raises(ValidationError):
            CodeStyle(name="NoMacro", start_macro="")

    def test_list_patterns_are_frozen(self):
        style = CodeStyle(name="CodeMethod", start_macro="<cm>", patterns=[r"\bRun\b"])

        assert style.patterns == (r"\bRun\b",)
        assert style.apply("Run()") == "<cm>Run</c>()"

    def test_each_pattern_is_one_sweep(self):
        """Test a match is wrapped once, not re-wrapped by the same pattern."""
        style = CodeStyle(name="CodeWord", start_macro="<cw>", patterns=(r"ab",))

        assert style.apply("abab") == "<cw>ab</c><cw>ab</c>"

    def test_apply_skips_given_macros(self):
        style = CodeStyle(name="CodeWord", start_macro="<cw>", patterns=(r"c+k?",))

        assert style.apply("<ck>c</c>", ["<ck>", "</c>"]) == "<ck><cw>c</c></c>"

    def test_apply_skips_own_macros(self):
        style = CodeStyle(name="CodeWord", start_macro="<cw>", patterns=(r"\w+",))

        assert style.apply("<cw>ab</c> cd") == "<cw><cw>ab</c></c> <cw>cd</c>"

    def test_builtin_comment_style(self):
        assert COMMENT_STYLE is not None
        assert COMMENT_STYLE.name == "CodeComment"


@pytest.mark.unit
class TestHighlightLine:
    """Test single-line highlighting."""

    def test_keywords_and_types(self):
        assert _highlight("public class Foo : MonoBehaviour") == (
            "<ck>public</c> <ck>class</c> Foo : <ct>MonoBehaviour</c>"
        )

    def test_keywords_need_word_boundaries(self):
        assert _highlight("publicity inside") == "publicity inside"

    def test_numbers_and_strings(self):
        assert _highlight('x = 2.5f;') == "x = <cs>2.5f</c>;"
        assert _highlight('s = "hi";') == 's = <cs>"hi"</c>;'

    def test_string_with_escaped_quote(self):
        assert _highlight(r'"a\"b"') == r'<cs>"a\"b"</c>'

    def test_attribute_type(self):
        assert _highlight("[SerializeField]") == "[<ct>SerializeField</c>]"

    def test_full_line_comment(self):
        """Test a line starting with // is wrapped whole, with no token styles."""
        assert _highlight("// int x") == "<cc>// int x</c>"

    def test_trailing_comment(self):
        assert _highlight("int x; // count") == "<ck>int</c> x; <cc>// count</c>"

    def test_indented_comment_wraps_suffix(self):
        assert _highlight("    // note") == "    <cc>// note</c>"

    def test_angle_brackets_escaped_first(self):
        assert _highlight("List<int> xs") == "<ct>List</c>&lt;<ck>int</c>&gt; xs"

    def test_without_comment_style(self):
        assert highlight_line("// int", BUILTIN_CODE_STYLES, None) == "// <ck>int</c>"


@pytest.mark.unit
class TestHighlightCode:
    """Test block highlighting."""

    def test_lines_joined_with_platform_separator(self):
        assert highlight_code("int a\nfloat b") == f"<ck>int</c> a{os.linesep}<ck>float</c> b{os.linesep}"

    def test_empty_text(self):
        assert highlight_code("") == os.linesep

    def test_extra_styles_applied_after_builtins(self):
        method = CodeStyle(name="CodeMethod", start_macro="<cm>", patterns=(r"(?<=\.)[A-Z]\w*(?=\()",))

        assert highlight_code("t.Rotate(x)", [method]) == f"t.<cm>Rotate</c>(x){os.linesep}"

    def test_extra_style_skips_inserted_macros(self):
        """Test an identifier pattern does not match inside earlier macros."""
        variable = CodeStyle(name="CodeVar", start_macro="<cv>", patterns=(r"(?<!\w)[a-z]+(?!\w)",))

        highlighted = highlight_code("int x", [variable])

        assert highlighted == f"<ck><cv>int</c></c> <cv>x</c>{os.linesep}"
        assert convert_style_macros(highlighted, (*BUILTIN_CODE_STYLES, variable)) == (
            f'<span class="CodeKeyword"><span class="CodeVar">int</span></span> '
            f'<span class="CodeVar">x</span>{os.linesep}'
        )

    def test_extra_style_leaves_comment_alone(self):
        variable = CodeStyle(name="CodeVar", start_macro="<cv>", patterns=(r"(?<!\w)[a-z]+(?!\w)",))

        assert highlight_code("y; // note", [variable]) == f"<cv>y</c>; <cc>// note</c>{os.linesep}"

    def test_custom_style_table(self):
        word = CodeStyle(name="CodeWord", start_macro="<cw>", patterns=(r"\bfoo\b",))

        assert highlight_code("foo int", styles=(word,)) == f"<cw>foo</c> int{os.linesep}"

    @given(st.text(alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZ ,;:!?\n"))
    def test_plain_text_is_unchanged(self, text):
        """Test text with nothing to highlight only gains line separators."""
        expected = "".join(line + os.linesep for line in text.split("\n"))

        assert highlight_code(text) == expected


@pytest.mark.unit
class TestConvertStyleMacros:
    """Test macro-to-span conversion."""

    def test_builtin_macros(self):
        text = "<ck>int</c> x = <cs>1</c>; <cc>// c</c> <ct>Mesh</c>"

        assert convert_style_macros(text) == (
            '<span class="CodeKeyword">int</span> x = <span class="CodeString">1</span>; '
            '<span class="CodeComment">// c</span> <span class="CodeType">Mesh</span>'
        )

    def test_extra_style_macros(self):
        styles = (*BUILTIN_CODE_STYLES, CodeStyle(name="CodeMethod", start_macro="<cm>"))

        assert convert_style_macros("<cm>Run</c>", styles) == '<span class="CodeMethod">Run</span>'

    def test_macros_in_non_code_text(self):
        """Test authors can use macros by hand in any element."""
        assert convert_style_macros("Use <ck>var</c> here") == 'Use <span class="CodeKeyword">var</span> here'

    def test_text_without_macros(self):
        assert convert_style_macros("plain &lt;text&gt;") == "plain &lt;text&gt;"
