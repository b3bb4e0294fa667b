"""Combine a registered definition with per-call overrides."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from beanwire.definition import ArgKey, ConstructorArgs, Definition, normalize_constructor_args


def merge_definition(
    base: Definition,
    fields: Mapping[str, Any] | None = None,
    args: Mapping[ArgKey, Any] | None = None,
) -> Definition:
    """Derive a definition from ``base`` with caller-supplied overrides.

    Constructor argument overrides replace an existing key in place or append a
    new key after the base arguments; ``None`` values are skipped and never
    touch the base. Field overrides are applied unconditionally, including
    ``None`` values.

    Args:
        base: Registered definition. It is never mutated.
        fields: Field overrides.
        args: Constructor argument overrides.

    Returns:
        ``base`` itself when both override sets are empty, otherwise a new
        definition.

    """
    if not fields and not args:
        return base

    changes: dict[str, Any] = {}
    if args:
        changes["constructor_args"] = merge_constructor_args(base, args)
    if fields:
        changes["fields"] = {**base.fields, **fields}
    return dataclasses.replace(base, **changes)


def merge_constructor_args(base: Definition, args: Mapping[ArgKey, Any]) -> ConstructorArgs:
    """Return ``base`` constructor arguments with ``args`` applied."""
    merged = dict(base.constructor_args)
    for key, value in args.items():
        if value is None:
            continue
        # dict keeps the original slot of a replaced key and appends new ones
        merged[key] = value
    return normalize_constructor_args(merged, bean_name=base.name)
