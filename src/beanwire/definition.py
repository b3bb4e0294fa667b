from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeAlias

from beanwire.exceptions import BeanWireInvalidDefinitionError
from beanwire.scope import Scope

if TYPE_CHECKING:
    from beanwire.context import Context

ArgKey: TypeAlias = str | int
"""A constructor argument key: a keyword name or a zero-based position."""

ConstructorArgs: TypeAlias = tuple[tuple[ArgKey, Any], ...]
"""Ordered ``(key, value)`` constructor argument pairs."""

Fields: TypeAlias = Mapping[str, Any]
"""Field name to value mapping injected after construction."""

ArgsInput: TypeAlias = Mapping[ArgKey, Any] | Iterable[tuple[ArgKey, Any]]
"""Accepted input shapes for constructor arguments."""


@dataclass(frozen=True)
class Ref:
    """A deferred reference to another bean of the owning context.

    Use it as a constructor argument or field value; the reflective
    constructor replaces it with the resolved bean.
    """

    name: str


@dataclass(frozen=True, kw_only=True)
class Definition:
    """A declarative recipe for building one named bean."""

    name: str
    """Bean name, unique within a registry."""
    type_descriptor: Any
    """Opaque handle the constructor uses to build an instance."""
    scope: Scope = Scope.SINGLETON
    """Number of instances the context hands out for this bean."""
    init_method: str = ""
    """Name of a method called after construction. Empty means none."""
    constructor_args: ConstructorArgs = field(default=(), hash=False)
    """Ordered constructor arguments. Accepts a mapping or pairs on input."""
    fields: Fields = field(default_factory=dict, hash=False)
    """Values injected as attributes after construction."""
    owner: Context | None = field(default=None, compare=False, hash=False, repr=False)
    """Context used to resolve nested ``Ref`` values."""

    def __post_init__(self) -> None:
        try:
            scope = Scope(self.scope)
        except ValueError as error:
            msg = f"Bean {self.name!r} has an unknown scope {self.scope!r}."
            raise BeanWireInvalidDefinitionError(msg) from error
        object.__setattr__(self, "scope", scope)
        object.__setattr__(
            self,
            "constructor_args",
            normalize_constructor_args(self.constructor_args, bean_name=self.name),
        )
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def with_owner(self, owner: Context | None) -> Definition:
        """Return a copy of this definition bound to ``owner``."""
        return dataclasses.replace(self, owner=owner)

    def arg_keys(self) -> tuple[ArgKey, ...]:
        """Return constructor argument keys in definition order."""
        return tuple(key for key, _ in self.constructor_args)


def normalize_constructor_args(args: ArgsInput, *, bean_name: str) -> ConstructorArgs:
    """Convert constructor arguments into ordered pairs with unique keys.

    Args:
        args: A mapping or an iterable of ``(key, value)`` pairs.
        bean_name: Name used in error messages.

    Returns:
        A tuple of ``(key, value)`` pairs in input order.

    Raises:
        BeanWireInvalidDefinitionError: If a key is neither ``str`` nor ``int``
            or appears more than once.

    """
    pairs = args.items() if isinstance(args, Mapping) else args
    normalized: list[tuple[ArgKey, Any]] = []
    seen: set[ArgKey] = set()
    for key, value in pairs:
        if isinstance(key, bool) or not isinstance(key, (str, int)):
            msg = f"Bean {bean_name!r} has an invalid constructor argument key {key!r}."
            raise BeanWireInvalidDefinitionError(msg)
        if key in seen:
            msg = f"Bean {bean_name!r} repeats constructor argument key {key!r}."
            raise BeanWireInvalidDefinitionError(msg)
        seen.add(key)
        normalized.append((key, value))
    return tuple(normalized)
