#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidocs2html/cli.py
"""Command-line interface for apidocs2html.

Usage Examples
--------------
Export using a recipe found in the working directory or its parents::

    $ apidocs2html build

Export with an explicit recipe, overriding the title::

    $ apidocs2html build --config apidocs.toml --title "My API v2"

Export without a recipe::

    $ apidocs2html build --project docs --document MyDocument \\
        --html-template docs/template.html --css-template docs/style.css \\
        --title "My API" --output site --create-output

List the documents of a project with rich formatting::

    $ apidocs2html --rich list --project docs

Paths given on the command line are relative to the working directory;
paths inside a recipe are relative to the recipe's project root.

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Sequence

from apidocs2html import __version__
from apidocs2html.api import EXPORT_SUCCESS_MESSAGE, export_document
from apidocs2html.config import BuildConfig, build_config_from_mapping, find_config_in_parents, load_recipe_mapping
from apidocs2html.constants import (
    CONFIG_ENV_VAR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from apidocs2html.exceptions import ApiDocsError, FileError, ParsingError, RenderingError, ValidationError
from apidocs2html.logging_utils import configure_logging
from apidocs2html.project import DocumentProject
from apidocs2html.renderers.html import ExportSummary

logger = logging.getLogger(__name__)

# Recipe keys that hold paths; CLI values are made absolute before merging
_PATH_OPTIONS = ("project", "html_template", "css_template", "output")
_TEXT_OPTIONS = ("document", "title")


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the ``build`` and ``list`` subcommands."""
    parser = argparse.ArgumentParser(
        prog="apidocs2html",
        description="Export plain-text API documentation markup to static HTML pages.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and module names")
    parser.add_argument("--rich", action="store_true", help="Format the result summary with rich")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    build = subparsers.add_parser("build", help="Export a document to HTML")
    build.add_argument(
        "--config",
        help=f"Build recipe (TOML, YAML, JSON or six-line text). Defaults to ${CONFIG_ENV_VAR}, "
        "then the nearest .apidocs2html.* or pyproject.toml [tool.apidocs2html]",
    )
    build.add_argument("--no-config", action="store_true", help="Ignore recipe files; use only flags")
    build.add_argument("--project", help="Project root directory")
    build.add_argument("--document", help="Document name inside the project")
    build.add_argument("--html-template", dest="html_template", help="HTML template file")
    build.add_argument("--css-template", dest="css_template", help="CSS template file")
    build.add_argument("--title", help="Document title")
    build.add_argument("--output", help="Output directory")
    build.add_argument("--create-output", action="store_true", help="Create the output directory when missing")
    build.add_argument("--no-highlight", action="store_true", help="Don't highlight Code elements")

    list_parser = subparsers.add_parser("list", help="List the documents in a project")
    list_parser.add_argument("--project", required=True, help="Project root directory")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code."""
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def _find_recipe(parsed_args: argparse.Namespace) -> Path | None:
    if parsed_args.no_config:
        return None
    if parsed_args.config:
        return Path(parsed_args.config)
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return Path(env_config)
    return find_config_in_parents()


def resolve_build_config(parsed_args: argparse.Namespace) -> BuildConfig:
    """Merge the recipe (if any) with command-line overrides.

    Raises
    ------
    ValidationError
        If a required value is missing from both recipe and flags
    FileNotFoundError
        If an explicitly named recipe doesn't exist

    """
    data: dict[str, Any] = {}
    base_dir = Path()

    recipe = _find_recipe(parsed_args)
    if recipe is not None:
        logger.debug("Using build recipe %s", recipe)
        data, base_dir = load_recipe_mapping(recipe)

    for key in _PATH_OPTIONS:
        value = getattr(parsed_args, key)
        if value:
            data[key] = str(Path(value).absolute())
    for key in _TEXT_OPTIONS:
        value = getattr(parsed_args, key)
        if value:
            data[key] = value
    if parsed_args.create_output:
        data["create_output"] = True
    if parsed_args.no_highlight:
        data["highlight"] = False

    return build_config_from_mapping(data, base_dir)


def _print_summary(summary: ExportSummary, use_rich: bool) -> None:
    if not use_rich:
        print(f"{EXPORT_SUCCESS_MESSAGE} {summary.file_count} files written to {summary.stylesheet.parent}")
        return

    from rich.console import Console
    from rich.table import Table

    table = Table(title=f"{EXPORT_SUCCESS_MESSAGE} {summary.file_count} files")
    table.add_column("Kind", style="cyan")
    table.add_column("File")
    for page in summary.pages:
        table.add_row("page", str(page))
    table.add_row("stylesheet", str(summary.stylesheet))
    Console().print(table)


def _print_documents(project: DocumentProject, documents: Sequence[Path], use_rich: bool) -> None:
    if not use_rich:
        for path in documents:
            print(f"{path.name}/" if path.is_dir() else path.name)
        return

    from rich.console import Console
    from rich.table import Table

    table = Table(title=f"Documents in {project.root}")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    for path in documents:
        table.add_row(path.name, "directory" if path.is_dir() else "file")
    Console().print(table)


def run_build(parsed_args: argparse.Namespace) -> int:
    """Execute the ``build`` subcommand."""
    config = resolve_build_config(parsed_args)
    summary = export_document(config)
    _print_summary(summary, parsed_args.rich)
    return EXIT_SUCCESS


def run_list(parsed_args: argparse.Namespace) -> int:
    """Execute the ``list`` subcommand."""
    project = DocumentProject(parsed_args.project)
    documents = project.list_documents()
    if not documents:
        print(f"No documents in {project.root}", file=sys.stderr)
        return EXIT_SUCCESS
    _print_documents(project, documents, parsed_args.rich)
    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Execute main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    commands = {"build": run_build, "list": run_list}
    try:
        return commands[parsed_args.command](parsed_args)
    except ApiDocsError as e:
        print(f"Error: {e}", file=sys.stderr)
        if parsed_args.trace:
            logger.exception("%s failed", parsed_args.command)
        return get_exit_code_for_exception(e)


if __name__ == "__main__":
    sys.exit(main())
