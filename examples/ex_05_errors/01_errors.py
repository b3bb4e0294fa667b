"""Errors raised while resolving beans.

Missing names raise ``BeanWireDefinitionNotFoundError`` naming the bean, while
``Context.has`` answers without raising. Errors from user constructors reach
the caller unchanged.
"""

from __future__ import annotations

from beanwire import BeanWireDefinitionNotFoundError, Context, Definition


class Broker:
    def __init__(self) -> None:
        msg = "broker unreachable"
        raise ConnectionError(msg)


def main() -> None:
    context = Context([Definition(name="broker", type_descriptor=Broker)])

    try:
        context.resolve("mailer")
    except BeanWireDefinitionNotFoundError as error:
        print(f"not_found={error}")  # => not_found=Bean 'mailer' is not registered.

    print(f"has_mailer={context.has('mailer')}")  # => has_mailer=False

    try:
        context.resolve("broker")
    except ConnectionError as error:
        print(f"construction_error={error}")  # => construction_error=broker unreachable


if __name__ == "__main__":
    main()
