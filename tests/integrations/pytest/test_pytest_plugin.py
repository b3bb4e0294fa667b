from __future__ import annotations

import pytest

from beanwire import Context, Definition, LockMode, Ref, Scope
from tests.helpers import CountingConstructor

pytest_plugins = ["beanwire.integrations.pytest_plugin"]


class _Database:
    def __init__(self, dsn: str) -> None:
        self.dsn = dsn


class _Repository:
    def __init__(self, db: _Database) -> None:
        self.db = db


@pytest.fixture()
def beanwire_definitions() -> list[Definition]:
    return [
        Definition(name="db", type_descriptor=_Database, constructor_args={"dsn": "sqlite://"}),
        Definition(
            name="repository",
            type_descriptor=_Repository,
            scope=Scope.PROTOTYPE,
            constructor_args={"db": Ref("db")},
        ),
    ]


def test_context_is_built_from_overridden_definitions(beanwire_context: Context) -> None:
    repository = beanwire_context.resolve("repository")

    assert isinstance(repository, _Repository)
    assert repository.db is beanwire_context.resolve("db")
    assert repository.db.dsn == "sqlite://"


def test_context_uses_thread_lock_mode_by_default(beanwire_context: Context) -> None:
    assert beanwire_context.lock_mode is LockMode.THREAD


class TestCustomConstructor:
    @pytest.fixture()
    def beanwire_constructor(self) -> CountingConstructor:
        return CountingConstructor()

    @pytest.fixture()
    def beanwire_lock_mode(self) -> LockMode:
        return LockMode.NONE

    def test_context_uses_fixture_constructor(
        self,
        beanwire_context: Context,
        beanwire_constructor: CountingConstructor,
    ) -> None:
        beanwire_context.resolve("db")
        beanwire_context.resolve("db")

        assert beanwire_constructor.count("db") == 1
        assert beanwire_context.lock_mode is LockMode.NONE
