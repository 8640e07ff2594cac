"""Test utilities for the apidocs2html test suite.

This module provides sample sources and templates, helpers for building
project directories on disk, and assertions over exported pages.
"""

import tempfile
from pathlib import Path

FIXTURES_DIR = Path(__file__).parent / "fixtures"

SAMPLE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<title>|PAGE_HEAD|</title>
<link rel="stylesheet" href="style.css">
</head>
<body>
<h1>|DOCS_TITLE|</h1>
<ul class="sidebar">
<!--CATEGORIES-->
</ul>
<div class="container">
<!--CONTAINER-->
</div>
</body>
</html>"""

SAMPLE_CSS = """body { font-family: sans-serif; }
.CodeKeyword { color: #569cd6; }
.CodeType { color: #4ec9b0; }
"""

SAMPLE_DOCUMENT = """This preamble is ignored.
|>Not a category either
> DOCUMENT DATA <
|>Manual<|
|>1Core
|#Description=Core types.
|>Transform|Core
|#Description=Position and rotation.
|#Code=int x = 1;
|>Changelog|Space
|#Description=First release."""


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    import shutil

    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def create_test_project(root: Path, document: str = SAMPLE_DOCUMENT, name: str = "Sample") -> Path:
    """Write a project with one document, both templates and an export dir.

    Parameters
    ----------
    root : Path
        Directory to populate
    document : str
        Markup written to ``<name>.txt``
    name : str
        Document name

    Returns
    -------
    Path
        The populated project root

    """
    (root / f"{name}.txt").write_text(document, encoding="utf-8")
    (root / "template.html").write_text(SAMPLE_TEMPLATE, encoding="utf-8")
    (root / "style.css").write_text(SAMPLE_CSS, encoding="utf-8")
    (root / "export").mkdir()
    return root


def read_page(path: Path) -> list[str]:
    """Read an exported page back as lines."""
    return path.read_text(encoding="utf-8").splitlines()


def assert_no_macros_left(lines: list[str]) -> None:
    """Assert every template macro was substituted."""
    text = "\n".join(lines)
    assert "|PAGE_HEAD|" not in text
    assert "|DOCS_TITLE|" not in text
