"""Quickstart: define beans, resolve them, and wire references.

``Definition`` describes how to build a bean. ``Context`` indexes the
definitions once and resolves names into instances. Singleton beans are shared,
prototype beans are rebuilt on every resolution, and ``Ref`` points at another
bean of the same context.
"""

from __future__ import annotations

from beanwire import Context, Definition, Ref, Scope


class Database:
    def __init__(self, dsn: str) -> None:
        self.dsn = dsn
        self.connected = False

    def connect(self) -> None:
        self.connected = True


class UserRepository:
    def __init__(self, db: Database) -> None:
        self.db = db


def main() -> None:
    context = Context(
        [
            Definition(
                name="db",
                type_descriptor=Database,
                constructor_args={"dsn": "sqlite:///app.db"},
                init_method="connect",
            ),
            Definition(
                name="users",
                type_descriptor=UserRepository,
                scope=Scope.PROTOTYPE,
                constructor_args={"db": Ref("db")},
            ),
        ],
    )

    db = context.resolve("db")
    first = context.resolve("users")
    second = context.resolve("users")

    print(f"dsn={db.dsn}")  # => dsn=sqlite:///app.db
    print(f"connected={db.connected}")  # => connected=True
    print(f"singleton_shared={context.resolve('db') is db}")  # => singleton_shared=True
    print(f"prototype_fresh={first is not second}")  # => prototype_fresh=True
    print(f"ref_wired={first.db is db}")  # => ref_wired=True
    print(f"has_cache={context.has('cache')}")  # => has_cache=False


if __name__ == "__main__":
    main()
