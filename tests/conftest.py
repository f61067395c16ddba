"""Shared test configuration."""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    """Keep structlog output out of captured stdout."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL))
