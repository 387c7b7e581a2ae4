"""Pytest configuration and shared fixtures for mprelude tests."""

import logging

import pytest
import structlog

import mprelude._config
import mprelude._logging
from mprelude import Just, Left, Nothing, Right, clear_log_hooks


@pytest.fixture(autouse=True)
def isolate_global_state():
    """Reset log hooks, stored config and logging setup around each test."""
    root_logger = logging.getLogger()
    level = root_logger.level
    clear_log_hooks()
    mprelude._config._config = None
    yield
    clear_log_hooks()
    mprelude._config._config = None
    mprelude._logging._handler = None
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def sample_just():
    """Sample Just value for testing."""
    return Just('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    return Nothing


@pytest.fixture
def sample_left():
    """Sample Left value for testing."""
    return Left(ValueError('test error'))


@pytest.fixture
def sample_right():
    """Sample Right value for testing."""
    return Right(42)


class Recorder:
    """Callable that records every argument it was called with."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __call__(self, value):
        self.calls.append(value)
        return self.result


@pytest.fixture
def recorder():
    """Callback that returns a marker object and records its calls."""
    return Recorder(result=object())
