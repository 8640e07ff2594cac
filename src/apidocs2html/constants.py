#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for apidocs2html.

This module centralizes the literal markers of the markup source format, the
macros expected inside HTML templates, code-style macros and the default
configuration values used across the package.

Constants are organized by category:
1. Markup Source Format - directive markers recognised by the parser
2. HTML Template Macros - placeholders the exporter looks for
3. Code Highlighting - shared macro delimiters and comment marker
4. Output Defaults - file names and encodings
5. CLI - exit codes and environment variables
"""

from __future__ import annotations

# =============================================================================
# Markup Source Format
# =============================================================================

DOCUMENT_DATA_MARKER = "> DOCUMENT DATA <"
CATEGORY_MARKER = "|>"
READ_ONLY_END_MARKER = "<|"
ELEMENT_MARKER = "|#"
ELEMENT_SEPARATOR = "="
ATTRIBUTE_SEPARATOR = "|"
NEW_LINE_IGNORE_START = "|NEW_LINE_IGNORE_START"
NEW_LINE_IGNORE_END = "|NEW_LINE_IGNORE_END"

# Attribute value that inserts a visual break instead of nesting
SPACE_ATTRIBUTE = "Space"

# Priority assigned to groups without a declared base category
DEFAULT_GROUP_PRIORITY = 9

DEFAULT_SOURCE_EXTENSION = ".txt"
DEFAULT_SOURCE_ENCODING = "utf-8"

EMPTY_DOCUMENT_WARNING = "Load successful. However there is no data to read."

# =============================================================================
# HTML Template Macros
# =============================================================================

HEAD_TITLE_MACRO = "|PAGE_HEAD|"
DOCUMENT_TITLE_MACRO = "|DOCS_TITLE|"
CATEGORIES_MARKER = "<!--CATEGORIES-->"
CONTAINER_MARKER = "<!--CONTAINER-->"

# =============================================================================
# Code Highlighting
# =============================================================================

CODE_STYLE_CLASS = "Code"
CODE_COMMENT_MARKER = "//"
CODE_END_MACRO = "</c>"

# =============================================================================
# Output Defaults
# =============================================================================

DEFAULT_CSS_FILENAME = "style.css"
DEFAULT_PAGE_EXTENSION = ".html"
DEFAULT_OUTPUT_ENCODING = "utf-8"

HTML_LINE_BREAK = "<br>"
HTML_INDENT = "&emsp;"

# =============================================================================
# CLI
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

CONFIG_ENV_VAR = "APIDOCS2HTML_CONFIG"
CONFIG_FILENAMES = [".apidocs2html.toml", ".apidocs2html.yaml", ".apidocs2html.yml", ".apidocs2html.json"]
