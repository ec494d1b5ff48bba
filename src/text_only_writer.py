#!/usr/bin/env python3
"""Diff writer for terminals without color support."""
from __future__ import annotations

from dataclasses import dataclass, field

from diff_run import DELETED, EQUAL
from diff_writer import DiffWriter

DIFF_PADDING = " "
DIFF_EQUAL = " "
DIFF_DELETE = "-"
DIFF_INSERT = "+"


@dataclass
class TextOnlyWriter(DiffWriter):
    """Marks edits with symbols on a separate diff track.

    ``-`` sits under characters to delete from the actual value, ``+`` under
    characters to insert, and a space under characters both sides share::

        actual  : I lices     dogs\\0
        diff    :   -----++++
        expected: I      like dogs\\0
    """

    padding_marker: str = DIFF_PADDING
    _diff_line: list[str] = field(default_factory=list, init=False, repr=False)
    _diff_lines: list[str] = field(default_factory=list, init=False, repr=False)

    def diff_lines(self) -> list[str]:
        return list(self._diff_lines)

    def _append(self, op: str, text: str) -> None:
        super()._append(op, text)
        if op == EQUAL:
            marker = DIFF_EQUAL
        elif op == DELETED:
            marker = DIFF_DELETE
        else:
            marker = DIFF_INSERT
        self._diff_line.append(marker * len(text))

    def _end_line(self) -> None:
        super()._end_line()
        self._diff_lines.append("".join(self._diff_line))
        self._diff_line = []
