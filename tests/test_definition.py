from __future__ import annotations

import dataclasses

import pytest

from beanwire.definition import Definition, Ref
from beanwire.exceptions import BeanWireInvalidDefinitionError
from beanwire.scope import Scope


class Database:
    pass


def test_defaults() -> None:
    definition = Definition(name="db", type_descriptor=Database)

    assert definition.scope is Scope.SINGLETON
    assert definition.init_method == ""
    assert definition.constructor_args == ()
    assert dict(definition.fields) == {}
    assert definition.owner is None


def test_mapping_constructor_args_become_ordered_pairs() -> None:
    definition = Definition(
        name="db",
        type_descriptor=Database,
        constructor_args={"dsn": "x", "pool": 5},
    )

    assert definition.constructor_args == (("dsn", "x"), ("pool", 5))
    assert definition.arg_keys() == ("dsn", "pool")


def test_pair_constructor_args_keep_input_order() -> None:
    definition = Definition(
        name="db",
        type_descriptor=Database,
        constructor_args=[(1, "b"), (0, "a"), ("flag", True)],
    )

    assert definition.constructor_args == ((1, "b"), (0, "a"), ("flag", True))


def test_repeated_constructor_arg_key_is_rejected() -> None:
    with pytest.raises(BeanWireInvalidDefinitionError, match="repeats constructor argument key"):
        Definition(
            name="db",
            type_descriptor=Database,
            constructor_args=[("dsn", "x"), ("dsn", "y")],
        )


@pytest.mark.parametrize("key", [1.5, None, True])
def test_invalid_constructor_arg_key_is_rejected(key: object) -> None:
    with pytest.raises(BeanWireInvalidDefinitionError, match="invalid constructor argument key"):
        Definition(name="db", type_descriptor=Database, constructor_args=[(key, "x")])


def test_scope_accepts_string_value() -> None:
    definition = Definition(name="db", type_descriptor=Database, scope="prototype")  # type: ignore[arg-type]

    assert definition.scope is Scope.PROTOTYPE


def test_unknown_scope_is_rejected() -> None:
    with pytest.raises(BeanWireInvalidDefinitionError, match="unknown scope"):
        Definition(name="db", type_descriptor=Database, scope="request")  # type: ignore[arg-type]


def test_definition_is_frozen() -> None:
    definition = Definition(name="db", type_descriptor=Database)

    with pytest.raises(dataclasses.FrozenInstanceError):
        definition.name = "other"  # type: ignore[misc]


def test_fields_are_copied_and_read_only() -> None:
    source = {"timeout": 3}
    definition = Definition(name="db", type_descriptor=Database, fields=source)
    source["timeout"] = 10

    assert definition.fields["timeout"] == 3
    with pytest.raises(TypeError):
        definition.fields["timeout"] = 5  # type: ignore[index]


def test_with_owner_returns_bound_copy() -> None:
    definition = Definition(name="db", type_descriptor=Database, constructor_args={"dsn": "x"})
    owner = object()

    bound = definition.with_owner(owner)  # type: ignore[arg-type]

    assert bound is not definition
    assert bound.owner is owner
    assert definition.owner is None
    assert bound == definition


def test_definition_is_hashable_with_unhashable_values() -> None:
    definition = Definition(
        name="db",
        type_descriptor=Database,
        constructor_args={"hosts": ["a", "b"]},
        fields={"tags": {"x"}},
    )

    assert hash(definition) == hash(Definition(name="db", type_descriptor=Database))


def test_ref_equality() -> None:
    assert Ref("db") == Ref("db")
    assert Ref("db") != Ref("cache")
