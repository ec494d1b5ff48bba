#!/usr/bin/env python3
"""Registry of per-type formatters that turn values into display text."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

StringMapper = Callable[[Any, "StringMappers"], str]


@dataclass
class StringMappers:
    """Looks formatters up along ``type(value).__mro__``.

    The most specific registered type wins, so a mapper registered for a base
    class applies to every subclass that has no mapper of its own. ``object``
    is always registered, which makes the lookup total.
    """

    mappers: dict[type, StringMapper] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.mappers.setdefault(object, _format_object)

    @classmethod
    def default(cls) -> "StringMappers":
        return cls(
            mappers={
                object: _format_object,
                str: _format_str,
                list: _format_sequence,
                tuple: _format_sequence,
                set: _format_set,
                frozenset: _format_set,
                dict: _format_dict,
            }
        )

    def register(self, value_type: type, mapper: StringMapper) -> None:
        self.mappers[value_type] = mapper

    def mapper_for(self, value_type: type) -> StringMapper:
        for candidate in value_type.__mro__:
            mapper = self.mappers.get(candidate)
            if mapper is not None:
                return mapper
        return self.mappers[object]

    def to_string(self, value: Any) -> str:
        return self.mapper_for(type(value))(value, self)


def _format_object(value: Any, mappers: StringMappers) -> str:
    return str(value)


def _format_str(value: str, mappers: StringMappers) -> str:
    return value


def _format_sequence(value: list | tuple, mappers: StringMappers) -> str:
    return "[" + ", ".join(mappers.to_string(item) for item in value) + "]"


def _format_set(value: set | frozenset, mappers: StringMappers) -> str:
    # Sorting by display text keeps the output stable across runs.
    return "{" + ", ".join(sorted(mappers.to_string(item) for item in value)) + "}"


def _format_dict(value: dict, mappers: StringMappers) -> str:
    items = (f"{mappers.to_string(key)}: {mappers.to_string(item)}" for key, item in value.items())
    return "{" + ", ".join(items) + "}"
