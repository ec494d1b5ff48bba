#!/usr/bin/env python3
"""Color capability levels of the terminal that displays a diff."""
from __future__ import annotations

from enum import Enum
from typing import TextIO

from rich.color import ColorSystem
from rich.console import Console


class TerminalEncoding(Enum):
    NONE = "none"
    COLORS_16 = "16-color"
    COLORS_256 = "256-color"
    COLORS_16M = "16-million-color"

    @classmethod
    def parse(cls, value: "str | TerminalEncoding") -> "TerminalEncoding":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for encoding in cls:
                if key in (encoding.value, encoding.name.lower()):
                    return encoding
        raise ValueError(f"Unsupported terminal encoding: {value!r}")

    @classmethod
    def detect(cls, file: TextIO | None = None) -> "TerminalEncoding":
        """Return the richest encoding the attached terminal supports."""
        console = Console(file=file)
        return _BY_COLOR_SYSTEM.get(console.color_system, cls.NONE)

    @property
    def color_system(self) -> ColorSystem | None:
        return _COLOR_SYSTEMS[self]


_COLOR_SYSTEMS: dict[TerminalEncoding, ColorSystem | None] = {
    TerminalEncoding.NONE: None,
    TerminalEncoding.COLORS_16: ColorSystem.STANDARD,
    TerminalEncoding.COLORS_256: ColorSystem.EIGHT_BIT,
    TerminalEncoding.COLORS_16M: ColorSystem.TRUECOLOR,
}

# Console.color_system reports names rather than ColorSystem members.
_BY_COLOR_SYSTEM: dict[str | None, TerminalEncoding] = {
    "standard": TerminalEncoding.COLORS_16,
    "windows": TerminalEncoding.COLORS_16,
    "256": TerminalEncoding.COLORS_256,
    "truecolor": TerminalEncoding.COLORS_16M,
}
