"""Shared pytest fixtures for txr tests."""

import pytest

from txr.core.calc.pipeline import Txr
from txr.core.options import RunOptions


@pytest.fixture
def ctx() -> Txr:
    """Return a fresh pipeline context with an empty diagnostic slot."""
    return Txr()


@pytest.fixture
def tracing_ctx() -> Txr:
    """Return a pipeline context that logs every evaluator step."""
    return Txr(RunOptions(trace=True))
