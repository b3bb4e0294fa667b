"""Per-call overrides of constructor arguments and fields.

Argument overrides replace an existing key in place or append a new one;
``None`` argument overrides are ignored. Field overrides always apply, ``None``
included. Singletons keep the instance built by their first resolution.
"""

from __future__ import annotations

from beanwire import Context, Definition, Scope


class HttpClient:
    def __init__(self, base_url: str, retries: int = 0, verify: bool = True) -> None:
        self.base_url = base_url
        self.retries = retries
        self.verify = verify
        self.timeout: float | None = 10.0


def main() -> None:
    context = Context(
        [
            Definition(
                name="client",
                type_descriptor=HttpClient,
                scope=Scope.PROTOTYPE,
                constructor_args={"base_url": "https://api.local", "retries": 1},
                fields={"timeout": 5.0},
            ),
            Definition(
                name="shared_client",
                type_descriptor=HttpClient,
                constructor_args={"base_url": "https://api.local"},
            ),
        ],
    )

    client = context.resolve(
        "client",
        {"timeout": None},
        {"retries": 3, "verify": False, "base_url": None},
    )
    print(f"base_url={client.base_url}")  # => base_url=https://api.local
    print(f"retries={client.retries}")  # => retries=3
    print(f"verify={client.verify}")  # => verify=False
    print(f"timeout={client.timeout}")  # => timeout=None

    registered = context.definition("client")
    print(f"registered_args={list(registered.constructor_args)}")  # => registered_args=[('base_url', 'https://api.local'), ('retries', 1)]

    shared = context.resolve("shared_client", None, {"retries": 5})
    again = context.resolve("shared_client", None, {"retries": 9})
    print(f"first_wins={again is shared and again.retries == 5}")  # => first_wins=True


if __name__ == "__main__":
    main()
