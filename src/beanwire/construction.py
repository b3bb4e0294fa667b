"""Turn definitions into instances.

A context depends only on the ``Constructor`` protocol, so tests and hosts can
plug in their own construction mechanism.
"""

from __future__ import annotations

from typing import Any, Protocol

from beanwire.definition import Definition, Ref
from beanwire.exceptions import BeanWireInvalidDefinitionError


class Constructor(Protocol):
    """Protocol for objects that build a bean instance from its definition."""

    def __call__(self, definition: Definition) -> Any:
        """Build and return a new instance for ``definition``."""
        ...


class ReflectiveConstructor:
    """Constructor that calls ``definition.type_descriptor`` directly.

    Integer-keyed arguments are passed positionally in ascending order and must
    be contiguous from zero. String-keyed arguments are passed as keyword
    arguments. Fields are assigned with ``setattr`` and the optional
    initializer method is called last. ``Ref`` values are resolved through
    ``definition.owner``. Errors raised by user code propagate unchanged.
    """

    __slots__ = ()

    def __call__(self, definition: Definition) -> Any:
        positional, keyword = self._split_args(definition)
        instance = definition.type_descriptor(*positional, **keyword)
        for field_name, value in definition.fields.items():
            setattr(instance, field_name, self._resolve_value(definition, value))
        if definition.init_method:
            self._call_init_method(definition, instance)
        return instance

    def _split_args(self, definition: Definition) -> tuple[list[Any], dict[str, Any]]:
        by_position: dict[int, Any] = {}
        keyword: dict[str, Any] = {}
        for key, value in definition.constructor_args:
            resolved = self._resolve_value(definition, value)
            if isinstance(key, int):
                by_position[key] = resolved
            else:
                keyword[key] = resolved

        if sorted(by_position) != list(range(len(by_position))):
            msg = (
                f"Bean {definition.name!r} has non-contiguous positional arguments "
                f"{sorted(by_position)}."
            )
            raise BeanWireInvalidDefinitionError(msg)
        return [by_position[index] for index in range(len(by_position))], keyword

    def _resolve_value(self, definition: Definition, value: Any) -> Any:
        if not isinstance(value, Ref):
            return value
        if definition.owner is None:
            msg = (
                f"Bean {definition.name!r} references {value.name!r} "
                "but is not bound to a context."
            )
            raise BeanWireInvalidDefinitionError(msg)
        return definition.owner.resolve(value.name)

    def _call_init_method(self, definition: Definition, instance: Any) -> None:
        init_method = getattr(instance, definition.init_method, None)
        if not callable(init_method):
            msg = (
                f"Bean {definition.name!r} declares init method "
                f"{definition.init_method!r} which is not a callable attribute."
            )
            raise BeanWireInvalidDefinitionError(msg)
        init_method()
