"""Integration tests for the full load, resolve and export pipeline.

These tests copy ``tests/fixtures/project`` into a temporary directory and
run every entry point against it: the Python API, build recipes in each
format and the command line.
"""

import shutil

import pytest
from utils import FIXTURES_DIR, assert_no_macros_left, read_page

from apidocs2html import DocumentProject, export_document, load_build_config, load_document
from apidocs2html.cli import main
from apidocs2html.constants import CONFIG_ENV_VAR, EXIT_SUCCESS

EXPECTED_PAGES = [
    "Camera.html",
    "Changelog.html",
    "Follow_Target.html",
    "Introduction.html",
    "Orbit.html",
    "Reference.html",
]

EXPECTED_SIDEBAR = [
    "Reference",
    '<li><a href="Introduction.html">Introduction</a></li>',
    '<li><a href="Camera.html">Camera</a></li>',
    '<li>&emsp;<a href="Follow_Target.html">Follow Target</a></li>',
    '<li>&emsp;<a href="Orbit.html">Orbit</a></li>',
    '<br><li><a href="Changelog.html">Changelog</a></li>',
]


@pytest.fixture
def fixture_project(temp_dir):
    """Provide a writable copy of the fixture project."""
    project = temp_dir / "project"
    shutil.copytree(FIXTURES_DIR / "project", project)
    return project


def _sidebar(page):
    start = next(index for index, line in enumerate(page) if line.strip() == "<!--CATEGORIES-->") + 1
    return page[start : start + len(EXPECTED_SIDEBAR)]


@pytest.mark.integration
class TestExportPipeline:
    """Test end-to-end export of the fixture project."""

    def test_directory_document_loads_in_file_order(self, fixture_project):
        result = load_document(fixture_project, "Reference")

        assert [c.title for c in result.categories] == [
            "Reference",
            "Introduction",
            "1Camera",
            "Follow Target",
            "Orbit",
            "Changelog",
        ]

    def test_toml_recipe_export(self, fixture_project):
        """Test the discovered recipe builds every page and the stylesheet."""
        config = load_build_config(fixture_project / ".apidocs2html.toml")
        shutil.rmtree(fixture_project / "export", ignore_errors=True)

        summary = export_document(config)

        exported = fixture_project / "export"
        assert sorted(p.name for p in exported.iterdir()) == [*EXPECTED_PAGES, "style.css"]
        assert summary.file_count == len(EXPECTED_PAGES) + 1
        assert (exported / "style.css").read_text(encoding="utf-8") == (fixture_project / "style.css").read_text(
            encoding="utf-8"
        )

    def test_page_contents(self, fixture_project):
        export_document(load_build_config(fixture_project / ".apidocs2html.toml"))
        exported = fixture_project / "export"

        for name in EXPECTED_PAGES:
            page = read_page(exported / name)
            assert_no_macros_left(page)
            assert _sidebar(page) == EXPECTED_SIDEBAR
            assert "        <h2>Camera Toolkit</h2>" in page

        follow = read_page(exported / "Follow_Target.html")
        assert "    <title>Follow Target - API</title>" in follow
        code = next(line for line in follow if line.startswith('<div class="Code">'))
        assert '<span class="CodeKeyword">public</span> <span class="CodeKeyword">class</span>' in code
        assert '<span class="CodeType">MonoBehaviour</span>' in code
        assert '<span class="CodeComment">// what to follow</span>' in code
        assert '<span class="CodeString">2.5f</span>' in code
        assert "&emsp;" in code

        orbit = read_page(exported / "Orbit.html")
        assert '<div class="Description">Rotates the camera around a pivot.</div>' in orbit

        reference = read_page(exported / "Reference.html")
        assert not any(line.startswith("<div class=") for line in reference)

    def test_custom_code_style_from_recipe(self, fixture_project):
        (fixture_project / "Reference" / "03_usage.txt").write_text(
            "> DOCUMENT DATA <\n|>Usage|Camera\n|#Code=camera.Shake(0.5f);\n", encoding="utf-8"
        )

        export_document(load_build_config(fixture_project / ".apidocs2html.toml"))

        usage = (fixture_project / "export" / "Usage.html").read_text(encoding="utf-8")
        assert '<span class="CodeMethod">Shake</span>' in usage

    def test_legacy_recipe_export(self, fixture_project, monkeypatch):
        monkeypatch.chdir(fixture_project)
        (fixture_project / "export").mkdir()

        summary = export_document(load_build_config(fixture_project / "recipe.txt"))

        assert summary.file_count == len(EXPECTED_PAGES) + 1

    def test_export_is_idempotent(self, fixture_project):
        config = load_build_config(fixture_project / ".apidocs2html.toml")
        export_document(config)
        first = {p.name: p.read_bytes() for p in (fixture_project / "export").iterdir()}

        export_document(config)

        assert {p.name: p.read_bytes() for p in (fixture_project / "export").iterdir()} == first

    def test_single_file_document(self, fixture_project):
        project = DocumentProject(fixture_project)
        (fixture_project / "export").mkdir(exist_ok=True)

        summary = project.export_document(
            "Guide",
            "Guide",
            fixture_project / "export",
            fixture_project / "template.html",
            fixture_project / "style.css",
        )

        assert [p.name for p in summary.pages] == ["Getting_Started.html"]


@pytest.mark.integration
@pytest.mark.cli
class TestCliPipeline:
    """Test the command line against the fixture project."""

    def test_build_with_discovered_recipe(self, fixture_project, monkeypatch, capsys):
        monkeypatch.chdir(fixture_project / "Reference")
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

        assert main(["build"]) == EXIT_SUCCESS

        assert f"{len(EXPECTED_PAGES) + 1} files" in capsys.readouterr().out
        assert (fixture_project / "export" / "Orbit.html").is_file()

    def test_list(self, fixture_project, capsys):
        assert main(["list", "--project", str(fixture_project)]) == EXIT_SUCCESS

        lines = capsys.readouterr().out.splitlines()
        assert "Guide.txt" in lines
        assert "Reference/" in lines
