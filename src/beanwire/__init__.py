from beanwire.cache import InstanceCache
from beanwire.construction import Constructor, ReflectiveConstructor
from beanwire.context import Context
from beanwire.definition import Definition, Ref
from beanwire.exceptions import (
    BeanWireDefinitionNotFoundError,
    BeanWireDuplicateDefinitionError,
    BeanWireError,
    BeanWireInvalidDefinitionError,
)
from beanwire.lock_mode import LockMode
from beanwire.merge import merge_definition
from beanwire.policies import DuplicateDefinitionPolicy
from beanwire.registry import DefinitionRegistry
from beanwire.scope import Scope
from beanwire.settings import ContextSettings

__all__ = [
    "BeanWireDefinitionNotFoundError",
    "BeanWireDuplicateDefinitionError",
    "BeanWireError",
    "BeanWireInvalidDefinitionError",
    "Constructor",
    "Context",
    "ContextSettings",
    "Definition",
    "DefinitionRegistry",
    "DuplicateDefinitionPolicy",
    "InstanceCache",
    "LockMode",
    "Ref",
    "ReflectiveConstructor",
    "Scope",
    "merge_definition",
]
