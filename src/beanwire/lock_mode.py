from __future__ import annotations

from enum import Enum


class LockMode(str, Enum):
    """Select locking behavior for singleton construction.

    Both modes guarantee that every caller observes the same singleton
    instance. They differ in how many times the constructor may run while
    several threads race on the first resolution of a name.
    """

    THREAD = "thread"
    """Serialize construction per bean name with ``threading.Lock``.

    The constructor runs exactly once per singleton name.
    """

    NONE = "none"
    """Construct without a per-name lock and keep the first committed instance.

    Under contention the constructor may run more than once; losing
    candidates are discarded.
    """
