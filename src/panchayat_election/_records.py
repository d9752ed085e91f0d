"""Field access shared by the registry, validator and region tally.

Records arrive either as mappings (``{"id": "V1", ...}``) or as objects with
attributes (dataclasses, pydantic models).  These helpers read both shapes the
same way.
"""
from __future__ import annotations

from collections.abc import Mapping
from numbers import Real

_MISSING = object()


def is_record(value: object) -> bool:
    """Return ``True`` for anything that can carry named fields."""
    if value is None or isinstance(value, (str, bytes, Real)):
        return False
    return isinstance(value, Mapping) or hasattr(value, "__dict__") or hasattr(
        value, "__slots__"
    )


def has_field(record: object, name: str) -> bool:
    if isinstance(record, Mapping):
        return name in record
    return hasattr(record, name)


def get_field(record: object, name: str, default: object = None) -> object:
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def first_field(record: object, *names: str) -> object:
    """Return the first of *names* present on *record*, else ``None``."""
    for name in names:
        value = get_field(record, name, _MISSING)
        if value is not _MISSING:
            return value
    return None


def is_number(value: object) -> bool:
    """``True`` for real numbers; ``bool`` is excluded."""
    return isinstance(value, Real) and not isinstance(value, bool)
