from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from beanwire.cache import InstanceCache
from beanwire.construction import Constructor, ReflectiveConstructor
from beanwire.definition import ArgKey, Definition
from beanwire.lock_mode import LockMode
from beanwire.merge import merge_definition
from beanwire.policies import DuplicateDefinitionPolicy
from beanwire.registry import DefinitionRegistry
from beanwire.scope import Scope
from beanwire.settings import ContextSettings

if TYPE_CHECKING:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


class Context:
    """Resolve bean names into instances according to their scope.

    A context indexes its definitions once at construction and owns a private
    singleton cache, so independent contexts never share instances.

    Singleton beans are cached by name: the first successful resolution wins
    and later override arguments have no effect. Prototype beans are built on
    every call.
    """

    def __init__(
        self,
        definitions: Iterable[Definition] = (),
        *,
        constructor: Constructor | None = None,
        lock_mode: LockMode = LockMode.THREAD,
        duplicate_policy: DuplicateDefinitionPolicy = DuplicateDefinitionPolicy.LAST_WINS,
    ) -> None:
        """Initialize a context from bean definitions.

        Args:
            definitions: Definitions in registration order. Each is rebound to
                this context so ``Ref`` values resolve against it.
            constructor: Construction mechanism. Defaults to
                ``ReflectiveConstructor``.
            lock_mode: ``THREAD`` builds each singleton exactly once. ``NONE``
                may build a singleton more than once under contention and keeps
                the first committed instance.
            duplicate_policy: How repeated bean names are handled.

        Raises:
            BeanWireDuplicateDefinitionError: If a name repeats and
                ``duplicate_policy`` is ``ERROR``.

        Examples:
            .. code-block:: python

                context = Context(
                    [Definition(name="db", type_descriptor=Database, constructor_args={"dsn": "x"})],
                )
                db = context.resolve("db")

        """
        self._constructor: Constructor = (
            constructor if constructor is not None else ReflectiveConstructor()
        )
        self._lock_mode = LockMode(lock_mode)
        self._registry = DefinitionRegistry(
            (definition.with_owner(self) for definition in definitions),
            duplicate_policy=DuplicateDefinitionPolicy(duplicate_policy),
        )
        self._instances = InstanceCache()

    @classmethod
    def from_settings(
        cls,
        definitions: Iterable[Definition] = (),
        settings: ContextSettings | None = None,
        *,
        constructor: Constructor | None = None,
    ) -> Self:
        """Create a context configured by ``ContextSettings``.

        When ``settings`` is omitted, they are read from the environment.
        """
        if settings is None:
            settings = ContextSettings()
        return cls(
            definitions,
            constructor=constructor,
            lock_mode=settings.lock_mode,
            duplicate_policy=settings.duplicate_policy,
        )

    @property
    def registry(self) -> DefinitionRegistry:
        """Definitions indexed by this context."""
        return self._registry

    @property
    def lock_mode(self) -> LockMode:
        return self._lock_mode

    def definition(self, name: str) -> Definition:
        """Return the definition registered under ``name``."""
        return self._registry.lookup(name)

    def has(self, name: str) -> bool:
        """Return true when ``name`` is registered. Never raises."""
        return self._registry.exists(name)

    def get(self, name: str) -> Any:
        """Resolve ``name`` without overrides."""
        return self.resolve(name)

    def resolve(
        self,
        name: str,
        fields: Mapping[str, Any] | None = None,
        args: Mapping[ArgKey, Any] | None = None,
    ) -> Any:
        """Resolve ``name`` into an instance.

        Args:
            name: Bean name.
            fields: Field overrides applied over the definition fields. ``None``
                values replace the definition value.
            args: Constructor argument overrides. ``None`` values are ignored.

        Returns:
            The cached instance for singleton beans, a new one for prototypes.

        Raises:
            BeanWireDefinitionNotFoundError: If ``name`` is not registered.

        """
        definition = merge_definition(self._registry.lookup(name), fields, args)
        if definition.scope is Scope.PROTOTYPE:
            logger.debug("Constructing prototype bean %r", name)
            return self._constructor(definition)
        return self._resolve_singleton(definition)

    def _resolve_singleton(self, definition: Definition) -> Any:
        found, instance = self._instances.probe(definition.name)
        if found:
            return instance

        if self._lock_mode is LockMode.THREAD:
            with self._instances.lock_for(definition.name):
                found, instance = self._instances.probe(definition.name)
                if found:
                    return instance
                return self._construct_and_commit(definition)
        return self._construct_and_commit(definition)

    def _construct_and_commit(self, definition: Definition) -> Any:
        logger.debug("Constructing singleton bean %r", definition.name)
        candidate = self._constructor(definition)
        instance = self._instances.commit_if_absent(definition.name, candidate)
        if instance is not candidate:
            logger.debug("Discarded a concurrently built instance of bean %r", definition.name)
        return instance

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(beans={len(self._registry)}, "
            f"singletons={len(self._instances)}, lock_mode={self._lock_mode.value})"
        )
