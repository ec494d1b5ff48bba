#!/usr/bin/env python3
"""Pieces of a validation failure message and how they are printed."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence, Union


@dataclass(frozen=True)
class ContextSection:
    """Named values, printed one ``name: value`` line each in order.

    Entries are ``(name, value)`` pairs, so two entries may share a name. A
    mapping is accepted as well and keeps its insertion order.
    """

    entries: Iterable[tuple[str, str]] | Mapping[str, str] = ()

    def __post_init__(self) -> None:
        entries = self.entries.items() if isinstance(self.entries, Mapping) else self.entries
        object.__setattr__(self, "entries", tuple((name, value) for name, value in entries))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.entries]

    @property
    def name_width(self) -> int:
        return max((len(name) for name in self.names), default=0)

    def render(self, name_width: int | None = None) -> str:
        width = self.name_width if name_width is None else name_width
        return "\n".join(f"{name.ljust(width)}: {value}" for name, value in self.entries)


@dataclass(frozen=True)
class StringSection:
    text: str

    def render(self, name_width: int | None = None) -> str:
        return self.text


MessageSection = Union[ContextSection, StringSection]


def render_sections(sections: Sequence[MessageSection]) -> str:
    """Join sections into message text, aligning names across the whole message."""
    width = max(
        (section.name_width for section in sections if isinstance(section, ContextSection)),
        default=0,
    )
    return "\n".join(section.render(width) for section in sections)
