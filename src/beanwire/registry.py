from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from beanwire.definition import Definition
from beanwire.exceptions import BeanWireDefinitionNotFoundError, BeanWireDuplicateDefinitionError
from beanwire.policies import DuplicateDefinitionPolicy

logger = logging.getLogger(__name__)


class DefinitionRegistry:
    """Holds the definitions of a context indexed by bean name.

    The registry is built once and never written afterwards, so concurrent
    lookups need no locking.
    """

    def __init__(
        self,
        definitions: Iterable[Definition] = (),
        *,
        duplicate_policy: DuplicateDefinitionPolicy = DuplicateDefinitionPolicy.LAST_WINS,
    ) -> None:
        """Index ``definitions`` by name.

        Args:
            definitions: Definitions in registration order.
            duplicate_policy: What to do when a name appears more than once.
                ``LAST_WINS`` keeps the later definition.

        Raises:
            BeanWireDuplicateDefinitionError: If a name repeats and
                ``duplicate_policy`` is ``ERROR``.

        """
        self._definitions: dict[str, Definition] = {}
        for definition in definitions:
            if definition.name in self._definitions:
                if duplicate_policy is DuplicateDefinitionPolicy.ERROR:
                    raise BeanWireDuplicateDefinitionError(definition.name)
                logger.warning(
                    "Bean %r is defined more than once; the last definition wins",
                    definition.name,
                )
            self._definitions[definition.name] = definition
        logger.debug("Indexed %d bean definitions", len(self._definitions))

    def lookup(self, name: str) -> Definition:
        """Return the definition registered under ``name``.

        Raises:
            BeanWireDefinitionNotFoundError: If ``name`` is not registered.

        """
        try:
            return self._definitions[name]
        except KeyError:
            raise BeanWireDefinitionNotFoundError(name) from None

    def exists(self, name: str) -> bool:
        """Return true when ``lookup`` would succeed for ``name``."""
        try:
            return name in self._definitions
        except TypeError:
            return False

    def names(self) -> list[str]:
        """Return registered bean names in registration order."""
        return list(self._definitions)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.exists(name)

    def __iter__(self) -> Iterator[Definition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)
