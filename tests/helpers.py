"""Construction doubles shared by the test suite."""

from __future__ import annotations

import threading
from typing import Any

from beanwire.definition import Definition


class Bean:
    """Instance produced by ``CountingConstructor``; records its definition."""

    def __init__(self, definition: Definition) -> None:
        self.definition = definition
        self.args = dict(definition.constructor_args)
        self.fields = dict(definition.fields)


class CountingConstructor:
    """Deterministic construction stub that counts calls per bean name."""

    def __init__(self) -> None:
        self.calls: dict[str, int] = {}
        self._lock = threading.Lock()

    def __call__(self, definition: Definition) -> Any:
        with self._lock:
            self.calls[definition.name] = self.calls.get(definition.name, 0) + 1
        return Bean(definition)

    def count(self, name: str) -> int:
        with self._lock:
            return self.calls.get(name, 0)
