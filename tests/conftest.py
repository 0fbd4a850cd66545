"""Shared fixtures."""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() so caplog sees records from every test."""
    yield
    logger = logging.getLogger("gql_sdlgen")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def sample_dto_path(monkeypatch):
    """Make the sample_dto package importable."""
    tests_dir = Path(__file__).parent
    monkeypatch.syspath_prepend(str(tests_dir))
    return tests_dir / "sample_dto"
