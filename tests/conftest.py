"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from loguru import logger

from snowflake_id import U64_MAX


@pytest.fixture
def log_messages():
    """Capture snowflake_id log records for the duration of a test."""
    messages: list[str] = []
    logger.enable("snowflake_id")
    sink_id = logger.add(messages.append, level="DEBUG", format="{level} {message}")
    yield messages
    logger.remove(sink_id)
    logger.disable("snowflake_id")


@pytest.fixture
def boundary_values():
    """u64 values where off-by-one bugs live."""
    return [0, 1, 2**53, 2**53 + 1, 2**63, U64_MAX]
