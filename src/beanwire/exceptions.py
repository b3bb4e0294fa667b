from __future__ import annotations


class BeanWireError(Exception):
    """Represent a base class for all BeanWire-specific failures.

    Catch this type when you want to handle any BeanWire error path without
    matching each concrete exception class individually. Errors raised by user
    constructors or initializer methods are never wrapped in this type.
    """


class BeanWireDefinitionNotFoundError(BeanWireError, KeyError):
    """Signal that a bean name has no registered definition.

    Raised by ``DefinitionRegistry.lookup`` and propagated unchanged through
    ``Context.resolve`` and ``Context.get``. ``Context.has`` never raises it.

    Typical fixes include adding the definition to the sequence passed to
    ``Context`` or correcting the requested name.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Bean {self.name!r} is not registered."


class BeanWireDuplicateDefinitionError(BeanWireError):
    """Signal that two definitions share the same bean name.

    Raised while building a registry with
    ``DuplicateDefinitionPolicy.ERROR``. The default policy lets the later
    definition win and logs a warning instead.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Bean {name!r} is defined more than once.")


class BeanWireInvalidDefinitionError(BeanWireError):
    """Signal a malformed definition or unusable construction inputs.

    Raised when constructor argument keys repeat, when positional arguments
    are not contiguous, when a ``Ref`` cannot be resolved because the
    definition has no owner, or when the initializer method does not exist.
    """
