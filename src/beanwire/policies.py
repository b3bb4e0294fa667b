from enum import Enum


class DuplicateDefinitionPolicy(str, Enum):
    """Policy for handling definitions that share a bean name."""

    LAST_WINS = "last_wins"
    """Keep the definition that appears last and log a warning."""

    ERROR = "error"
    """Raise ``BeanWireDuplicateDefinitionError`` while building the registry."""
