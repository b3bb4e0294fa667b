"""Lock modes for singleton construction under contention.

``LockMode.THREAD`` (the default) serializes construction per bean name, so the
constructor runs once. ``LockMode.NONE`` lets racing threads construct in
parallel and keeps the first committed instance; both threads still observe the
same object.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

from beanwire import Context, Definition, LockMode


def _two_thread_stats(lock_mode: LockMode) -> tuple[int, bool]:
    calls = 0
    calls_lock = threading.Lock()

    def construct(definition: Definition) -> object:
        nonlocal calls
        with calls_lock:
            calls += 1
        # widen the race window
        time.sleep(0.1)
        return object()

    context = Context(
        [Definition(name="service", type_descriptor=object)],
        constructor=construct,
        lock_mode=lock_mode,
    )
    barrier = threading.Barrier(2)

    def resolve() -> object:
        barrier.wait(timeout=2.0)
        return context.resolve("service")

    with ThreadPoolExecutor(max_workers=2) as executor:
        first, second = executor.map(lambda _: resolve(), range(2))

    return calls, first is second


def main() -> None:
    thread_calls, thread_same = _two_thread_stats(LockMode.THREAD)
    print(f"thread_calls={thread_calls}")  # => thread_calls=1
    print(f"thread_same={thread_same}")  # => thread_same=True

    _, none_same = _two_thread_stats(LockMode.NONE)
    print(f"none_same={none_same}")  # => none_same=True


if __name__ == "__main__":
    main()
