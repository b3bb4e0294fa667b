"""Pytest fixtures that build an isolated ``Context`` for every test.

Enable the plugin from a test module or the root ``conftest.py``:

.. code-block:: python

    pytest_plugins = ["beanwire.integrations.pytest_plugin"]

Override ``beanwire_definitions`` (and optionally ``beanwire_constructor`` or
``beanwire_lock_mode``) to control what ``beanwire_context`` contains.
"""

from __future__ import annotations

import pytest

from beanwire.construction import Constructor
from beanwire.context import Context
from beanwire.definition import Definition
from beanwire.lock_mode import LockMode


@pytest.fixture()
def beanwire_definitions() -> list[Definition]:
    """Definitions loaded into ``beanwire_context``. Empty unless overridden."""
    return []


@pytest.fixture()
def beanwire_constructor() -> Constructor | None:
    """Construction mechanism for ``beanwire_context``.

    ``None`` selects the default ``ReflectiveConstructor``.
    """
    return None


@pytest.fixture()
def beanwire_lock_mode() -> LockMode:
    """Singleton locking strategy for ``beanwire_context``."""
    return LockMode.THREAD


@pytest.fixture()
def beanwire_context(
    beanwire_definitions: list[Definition],
    beanwire_constructor: Constructor | None,
    beanwire_lock_mode: LockMode,
) -> Context:
    """Create a per-test context.

    The fixture is function-scoped, so singleton instances never leak between
    tests.

    Returns:
        A new ``Context`` built from ``beanwire_definitions``.

    """
    return Context(
        beanwire_definitions,
        constructor=beanwire_constructor,
        lock_mode=beanwire_lock_mode,
    )
