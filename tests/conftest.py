"""Pytest configuration and shared fixtures for the apidocs2html test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
from pathlib import Path
from typing import Generator

import pytest
from utils import (
    SAMPLE_CSS,
    SAMPLE_DOCUMENT,
    SAMPLE_TEMPLATE,
    cleanup_test_dir,
    create_test_project,
    create_test_temp_dir,
)

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def template_lines() -> list[str]:
    """Provide the lines of the sample HTML template."""
    return SAMPLE_TEMPLATE.splitlines()


@pytest.fixture
def sample_lines() -> list[str]:
    """Provide the lines of the sample markup document."""
    return SAMPLE_DOCUMENT.splitlines()


@pytest.fixture
def css_text() -> str:
    """Provide the sample stylesheet."""
    return SAMPLE_CSS


@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Provide a project directory holding the sample document and templates.

    Returns
    -------
    Path
        Project root containing ``Sample.txt``, ``template.html``,
        ``style.css`` and an empty ``export/`` directory.

    """
    return create_test_project(temp_dir)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Undo CLI logging setup so caplog keeps seeing package records."""
    yield
    package_logger = logging.getLogger("apidocs2html")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
