#!/usr/bin/env python3
"""Diff writers that highlight edits with ANSI colors."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from rich.color import ColorSystem
from rich.style import Style

from diff_writer import DiffWriter
from terminal_encoding import TerminalEncoding

COLOR_PADDING = "/"


@dataclass
class ColorWriter(DiffWriter):
    """Paints deleted text red on the actual track and inserted text green on
    the expected track. No diff track is produced."""

    padding_marker: str = COLOR_PADDING
    encoding: ClassVar[TerminalEncoding]
    deleted_style: ClassVar[Style]
    inserted_style: ClassVar[Style]
    padding_style: ClassVar[Style]

    @property
    def color_system(self) -> ColorSystem | None:
        return self.encoding.color_system

    def decorate_deleted(self, text: str) -> str:
        return self.deleted_style.render(text, color_system=self.color_system)

    def decorate_inserted(self, text: str) -> str:
        return self.inserted_style.render(text, color_system=self.color_system)

    def decorate_padding(self, length: int) -> str:
        return self.padding_style.render(super().decorate_padding(length), color_system=self.color_system)


@dataclass
class Colors16Writer(ColorWriter):
    encoding: ClassVar[TerminalEncoding] = TerminalEncoding.COLORS_16
    deleted_style: ClassVar[Style] = Style(color="white", bgcolor="red")
    inserted_style: ClassVar[Style] = Style(color="white", bgcolor="green")
    padding_style: ClassVar[Style] = Style(bgcolor="black")


@dataclass
class Colors256Writer(ColorWriter):
    encoding: ClassVar[TerminalEncoding] = TerminalEncoding.COLORS_256
    deleted_style: ClassVar[Style] = Style(color="color(231)", bgcolor="color(124)")
    inserted_style: ClassVar[Style] = Style(color="color(231)", bgcolor="color(28)")
    padding_style: ClassVar[Style] = Style(bgcolor="color(16)")


@dataclass
class Colors16MWriter(ColorWriter):
    encoding: ClassVar[TerminalEncoding] = TerminalEncoding.COLORS_16M
    deleted_style: ClassVar[Style] = Style(color="rgb(255,255,255)", bgcolor="rgb(175,0,0)")
    inserted_style: ClassVar[Style] = Style(color="rgb(255,255,255)", bgcolor="rgb(0,135,0)")
    padding_style: ClassVar[Style] = Style(bgcolor="rgb(0,0,0)")
