#  Copyright (c) 2025 Tom Villani, Ph.D.

r"""Build recipe discovery and loading.

A build recipe names everything an export needs: the project directory, the
document, both templates, the document title and the output directory.
Recipes can be written as TOML, YAML or JSON mappings, as a
``[tool.apidocs2html]`` table in ``pyproject.toml``, or in the legacy
six-line text form::

    /path/to/project      project root directory
    MyDocument            document name inside the project
    template.html         HTML template, relative to the project root
    style.css             CSS template, relative to the project root
    My API Reference      document title
    export                output directory, relative to the project root

Example TOML recipe::

    project = "docs"
    document = "MyDocument"
    html_template = "template.html"
    css_template = "style.css"
    title = "My API Reference"
    output = "export"

    [[code_styles]]
    name = "CodeMethod"
    start_macro = "<cm>"
    patterns = ['(?<=\.)[A-Z]\w*(?=\()']

"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from apidocs2html.constants import CONFIG_FILENAMES
from apidocs2html.exceptions import ValidationError
from apidocs2html.highlight import CodeStyle
from apidocs2html.options.base import CloneFrozenMixin
from apidocs2html.options.html import HtmlExportOptions
from apidocs2html.utils.io_utils import read_text

logger = logging.getLogger(__name__)

LEGACY_RECIPE_LINES = 6
REQUIRED_KEYS = ("project", "document", "html_template", "css_template", "title", "output")


@dataclass(frozen=True)
class BuildConfig(CloneFrozenMixin):
    """Everything needed to export one document.

    Parameters
    ----------
    project : Path
        Project root directory
    document : str
        Document name inside the project
    html_template : Path
        HTML template file
    css_template : Path
        CSS template file
    title : str
        Document title
    output : Path
        Output directory
    highlight : bool, default True
        Highlight ``Code`` elements
    create_output : bool, default False
        Create the output directory when missing
    code_styles : tuple[CodeStyle, ...], default ()
        Extra code styles

    """

    project: Path
    document: str
    html_template: Path
    css_template: Path
    title: str
    output: Path
    highlight: bool = True
    create_output: bool = False
    code_styles: tuple[CodeStyle, ...] = field(default=())

    def export_options(self) -> HtmlExportOptions:
        return HtmlExportOptions(highlight_code=self.highlight, extra_code_styles=self.code_styles)


def _parse_flag(data: Mapping[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValidationError(
            f"Build recipe value '{key}' must be true or false, got {value!r}",
            parameter_name=key,
            parameter_value=value,
        )
    return value


def parse_code_styles(raw: Any) -> tuple[CodeStyle, ...]:
    """Build code styles from a list of mappings.

    Raises
    ------
    ValidationError
        If an entry is not a mapping, lacks a key, or has a bad pattern

    """
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ValidationError("code_styles must be a list", parameter_name="code_styles", parameter_value=raw)

    styles = []
    for entry in raw:
        if not isinstance(entry, Mapping):
            raise ValidationError("Each code style must be a table/mapping", parameter_name="code_styles")
        try:
            styles.append(
                CodeStyle(
                    name=str(entry["name"]),
                    start_macro=str(entry["start_macro"]),
                    patterns=tuple(str(p) for p in entry.get("patterns", ())),
                )
            )
        except KeyError as e:
            raise ValidationError(f"Code style is missing key {e}", parameter_name="code_styles") from e
    return tuple(styles)


def build_config_from_mapping(data: Mapping[str, Any], base_dir: Path) -> BuildConfig:
    """Create a :class:`BuildConfig` from a parsed recipe mapping.

    ``project`` is resolved against ``base_dir``; templates and the output
    directory are resolved against the project root.

    Raises
    ------
    ValidationError
        If a required key is missing or a flag is not a boolean

    """
    missing = [key for key in REQUIRED_KEYS if data.get(key) in (None, "")]
    if missing:
        raise ValidationError(f"Build recipe is missing: {', '.join(missing)}", parameter_name=missing[0])

    project = base_dir / Path(str(data["project"]))
    return BuildConfig(
        project=project,
        document=str(data["document"]),
        html_template=project / str(data["html_template"]),
        css_template=project / str(data["css_template"]),
        title=str(data["title"]),
        output=project / str(data["output"]),
        highlight=_parse_flag(data, "highlight", True),
        create_output=_parse_flag(data, "create_output", False),
        code_styles=parse_code_styles(data.get("code_styles")),
    )


def parse_legacy_recipe(text: str) -> dict[str, str]:
    """Map the six-line recipe format onto recipe keys.

    Raises
    ------
    ValidationError
        If the recipe has fewer than six lines

    """
    lines = text.splitlines()
    if len(lines) < LEGACY_RECIPE_LINES:
        raise ValidationError(
            f"Export recipe has {len(lines)} lines; it needs at least {LEGACY_RECIPE_LINES}",
            parameter_name="config",
        )
    return dict(zip(REQUIRED_KEYS, (line.strip() for line in lines[:LEGACY_RECIPE_LINES])))


def _load_mapping(path: Path, text: str) -> Mapping[str, Any]:
    suffix = path.suffix.lower()
    try:
        if path.name == "pyproject.toml":
            return tomllib.loads(text).get("tool", {}).get("apidocs2html", {})
        if suffix == ".toml":
            return tomllib.loads(text)
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(text) or {}
        if suffix == ".json":
            return json.loads(text)
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValidationError(f"Invalid build recipe {path}: {e}", parameter_name="config", original_error=e) from e
    return parse_legacy_recipe(text)


def load_recipe_mapping(path: Union[str, Path]) -> tuple[dict[str, Any], Path]:
    """Read a recipe file into a plain mapping.

    Returns
    -------
    tuple[dict, Path]
        The raw recipe values and the directory a relative ``project`` is
        resolved against

    Raises
    ------
    FileNotFoundError
        If the recipe file doesn't exist
    ValidationError
        If the recipe cannot be parsed

    """
    recipe_path = Path(path)
    text = read_text(recipe_path)
    data = _load_mapping(recipe_path, text)
    if not isinstance(data, Mapping):
        raise ValidationError(f"Build recipe {recipe_path} must contain a mapping", parameter_name="config")

    # Legacy recipes carry an absolute (or cwd-relative) project root
    structured = recipe_path.suffix.lower() in (".toml", ".yaml", ".yml", ".json")
    base_dir = recipe_path.parent if structured else Path()
    return dict(data), base_dir


def load_build_config(path: Union[str, Path]) -> BuildConfig:
    """Load a build recipe from disk.

    Parameters
    ----------
    path : str or Path
        Recipe file; the format is chosen by extension, anything that is not
        TOML, YAML or JSON is read as a six-line legacy recipe

    Returns
    -------
    BuildConfig
        The resolved recipe

    Raises
    ------
    FileNotFoundError
        If the recipe file doesn't exist
    ValidationError
        If the recipe is malformed or incomplete

    """
    data, base_dir = load_recipe_mapping(path)
    config = build_config_from_mapping(data, base_dir)
    logger.debug("Loaded build recipe %s for document '%s'", path, config.document)
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a recipe file by searching parent directories.

    Walks up from ``start_dir`` (default: the working directory) to the
    filesystem root and returns the first ``.apidocs2html.{toml,yaml,yml,json}``
    found, or a ``pyproject.toml`` containing a ``[tool.apidocs2html]`` table.

    """
    current = (start_dir or Path.cwd()).resolve()
    while True:
        for filename in CONFIG_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                return candidate

        pyproject = current / "pyproject.toml"
        if pyproject.is_file():
            try:
                if tomllib.loads(pyproject.read_text(encoding="utf-8")).get("tool", {}).get("apidocs2html"):
                    return pyproject
            except (OSError, tomllib.TOMLDecodeError):
                logger.debug("Skipping unreadable %s", pyproject)

        if current.parent == current:
            return None
        current = current.parent


__all__ = [
    "BuildConfig",
    "build_config_from_mapping",
    "find_config_in_parents",
    "load_build_config",
    "load_recipe_mapping",
    "parse_code_styles",
    "parse_legacy_recipe",
]
