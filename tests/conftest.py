"""Shared pytest fixtures for beanwire tests."""

import pytest

from tests.helpers import CountingConstructor


@pytest.fixture()
def constructor() -> CountingConstructor:
    """Fresh counting constructor."""
    return CountingConstructor()
