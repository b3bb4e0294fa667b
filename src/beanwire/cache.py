from __future__ import annotations

import threading
from typing import Any

_MISSING: Any = object()


class InstanceCache:
    """Thread-safe store of committed singleton instances keyed by bean name.

    Entries are written at most once per name and never evicted. Each context
    owns its own cache.
    """

    __slots__ = ("_instances", "_lock", "_name_locks")

    def __init__(self) -> None:
        self._instances: dict[str, Any] = {}
        self._lock = threading.Lock()
        self._name_locks: dict[str, threading.RLock] = {}

    def get(self, name: str, default: Any = None) -> Any:
        """Return the instance committed under ``name`` or ``default``."""
        return self._instances.get(name, default)

    def probe(self, name: str) -> tuple[bool, Any]:
        """Return ``(found, instance)`` for ``name``.

        Use this instead of ``get`` when ``None`` is a legitimate instance.
        """
        instance = self._instances.get(name, _MISSING)
        if instance is _MISSING:
            return False, None
        return True, instance

    def commit_if_absent(self, name: str, instance: Any) -> Any:
        """Store ``instance`` under ``name`` unless another one is already there.

        Returns:
            The instance that is cached under ``name`` after the call, which is
            ``instance`` only when this call won.

        """
        with self._lock:
            return self._instances.setdefault(name, instance)

    def lock_for(self, name: str) -> threading.RLock:
        """Return the construction lock dedicated to ``name``."""
        with self._lock:
            lock = self._name_locks.get(name)
            if lock is None:
                lock = self._name_locks[name] = threading.RLock()
            return lock

    def __contains__(self, name: object) -> bool:
        return name in self._instances

    def __len__(self) -> int:
        return len(self._instances)
