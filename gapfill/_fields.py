"""Field selectors: turn a key, attribute name or index into a getter/setter pair."""

from __future__ import annotations

from collections.abc import Mapping, MutableSequence
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Union


@dataclass(frozen=True)
class FieldAccessor:
    """Read/write access to one numeric field of a record."""

    get: Callable[[Any], float]
    set: Callable[[Any, float], None]
    name: str = "<accessor>"


FieldSelector = Union[Hashable, FieldAccessor]


def field(selector: FieldSelector) -> FieldAccessor:
    """
    Build an accessor for ``selector``.

    Mappings and mutable sequences are indexed with ``record[selector]``;
    any other record is read with ``getattr``. Integer selectors on
    sequences, keys on dicts and attribute names on objects all work with the
    same call, so a list of dicts and a list of dataclasses are interchangeable.
    An existing ``FieldAccessor`` is returned unchanged.
    """
    if isinstance(selector, FieldAccessor):
        return selector

    def get(record):
        if isinstance(record, (Mapping, MutableSequence)):
            return record[selector]
        return getattr(record, selector)

    def set_(record, value):
        if isinstance(record, (Mapping, MutableSequence)):
            record[selector] = value
        else:
            setattr(record, selector, value)

    return FieldAccessor(get=get, set=set_, name=str(selector))


def item_field(key: Hashable) -> FieldAccessor:
    """Accessor that always uses ``record[key]``."""
    return FieldAccessor(
        get=lambda record: record[key],
        set=lambda record, value: record.__setitem__(key, value),
        name=str(key),
    )


def attr_field(name: str) -> FieldAccessor:
    """Accessor that always uses ``getattr``/``setattr``."""
    return FieldAccessor(
        get=lambda record: getattr(record, name),
        set=lambda record, value: setattr(record, name, value),
        name=name,
    )
