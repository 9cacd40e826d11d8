"""Shared fixtures for the test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from synthid.utils.logging import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def _reset_package_logging() -> Iterator[None]:
    """Drop handlers attached during a test.

    ``configure_logging`` binds its handler to the ``sys.stderr`` of the
    moment, which ``CliRunner`` replaces with a stream it closes afterwards.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    before = list(logger.handlers)
    level = logger.level
    yield
    for handler in logger.handlers[:]:
        if handler not in before:
            logger.removeHandler(handler)
    logger.setLevel(level)
