"""Options dataclasses for the apidocs2html pipeline."""

from apidocs2html.options.base import CloneFrozenMixin
from apidocs2html.options.html import HtmlExportOptions
from apidocs2html.options.markup import MarkupParserOptions

__all__ = ["CloneFrozenMixin", "HtmlExportOptions", "MarkupParserOptions"]
