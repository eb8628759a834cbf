"""Pytest configuration for waivern-graphql-signature tests."""

import logging
from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def isolate_logging_configuration() -> Generator[None, None, None]:
    """Preserve and restore logging state around each test.

    The CLI applies dictConfig, which replaces root handlers and logger
    levels for the whole process.
    """
    root = logging.getLogger()
    package_logger = logging.getLogger("waivern_graphql_signature")
    saved_root_handlers = root.handlers[:]
    saved_root_level = root.level
    saved_package_level = package_logger.level

    yield

    root.handlers[:] = saved_root_handlers
    root.setLevel(saved_root_level)
    package_logger.setLevel(saved_package_level)


@pytest.fixture
def sample_query() -> str:
    """A query document declaring a scalar and a list variable."""
    return """
query($s: String, $arr: [String]) {
    books {
        title
    }
}
"""
