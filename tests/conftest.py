"""Shared pytest fixtures for neuro-ai-boost tests."""

import logging

import pytest
from typer.testing import CliRunner

from neuro_ai_boost.config import PACKAGE_LOGGER
from neuro_ai_boost.constants import TRANSCRIPT


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def expected_output():
    """Exact stdout of one run."""
    return "".join(f"{line}\n" for line in TRANSCRIPT)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo handlers installed by configure_logging between tests."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
