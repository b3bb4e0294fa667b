from __future__ import annotations

from enum import Enum


class Scope(str, Enum):
    """Defines how many instances of a bean a context hands out."""

    SINGLETON = "singleton"
    """A single instance is created and shared for the lifetime of the context."""

    PROTOTYPE = "prototype"
    """A new instance is created every time the bean is resolved."""
