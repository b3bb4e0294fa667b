"""Configure a context with ``ContextSettings``.

``Context.from_settings`` reads ``BEANWIRE_LOCK_MODE`` and
``BEANWIRE_DUPLICATE_POLICY`` from the environment when no settings object is
passed.
"""

from __future__ import annotations

from beanwire import (
    BeanWireDuplicateDefinitionError,
    Context,
    ContextSettings,
    Definition,
    DuplicateDefinitionPolicy,
    LockMode,
)


def main() -> None:
    settings = ContextSettings(
        lock_mode=LockMode.NONE,
        duplicate_policy=DuplicateDefinitionPolicy.ERROR,
    )
    definitions = [Definition(name="config", type_descriptor=dict)]

    context = Context.from_settings(definitions, settings)
    print(f"lock_mode={context.lock_mode.value}")  # => lock_mode=none

    try:
        Context.from_settings([*definitions, *definitions], settings)
    except BeanWireDuplicateDefinitionError as error:
        print(f"duplicate={error.name}")  # => duplicate=config


if __name__ == "__main__":
    main()
