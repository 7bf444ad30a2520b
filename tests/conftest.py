"""Shared test fixtures for stepspec tests."""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Restore the stepspec logger after tests that configure it."""
    logger = logging.getLogger("stepspec")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Create an empty directory to hold stepspec.toml."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def sample_steps() -> str:
    """Return a steps list using every step shape."""
    return """
- init:
    extra_args: [-upgrade, -input=false]
- env:
    name: TF_VAR_region
    command: echo us-east-1
- run: terraform fmt -check
- plan
- run:
    command: ./post-plan.sh
    output: hide
    shell: bash
    shellArgs: -eu -c
- apply
"""
