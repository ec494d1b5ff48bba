#!/usr/bin/env python3
"""Render a run sequence as vertically aligned actual/expected lines."""
from __future__ import annotations

from dataclasses import dataclass, field

from diff_constants import NEWLINE_MARKER, NEWLINE_PATTERN
from diff_run import DELETED, EQUAL, INSERTED

WriterLines = tuple[list[str], list[str], list[str], list[bool]]


@dataclass
class DiffWriter:
    """Base writer for every terminal encoding.

    Runs must be written in order. Deleted text is mirrored by padding on the
    expected track and inserted text by padding on the actual track, so column
    ``n`` of an actual line always lines up with column ``n`` of the matching
    expected line. ``flush()`` closes the writer and returns the lines.
    """

    padding_marker: str = " "
    _actual_line: list[str] = field(default_factory=list, init=False, repr=False)
    _expected_line: list[str] = field(default_factory=list, init=False, repr=False)
    _line_equal: bool = field(default=True, init=False, repr=False)
    _actual_lines: list[str] = field(default_factory=list, init=False, repr=False)
    _expected_lines: list[str] = field(default_factory=list, init=False, repr=False)
    _equal_lines: list[bool] = field(default_factory=list, init=False, repr=False)
    _closed: bool = field(default=False, init=False, repr=False)

    def write_equal(self, text: str) -> None:
        self._write(EQUAL, text)

    def write_deleted(self, text: str) -> None:
        self._write(DELETED, text)

    def write_inserted(self, text: str) -> None:
        self._write(INSERTED, text)

    def flush(self) -> WriterLines:
        if not self._closed:
            self._end_line()
            self._closed = True
        return (
            list(self._actual_lines),
            self.diff_lines(),
            list(self._expected_lines),
            list(self._equal_lines),
        )

    def diff_lines(self) -> list[str]:
        return []

    def decorate_equal(self, text: str) -> str:
        return text

    def decorate_deleted(self, text: str) -> str:
        return text

    def decorate_inserted(self, text: str) -> str:
        return text

    def decorate_padding(self, length: int) -> str:
        return self.padding_marker * length

    def _write(self, op: str, text: str) -> None:
        if self._closed:
            raise RuntimeError("Writer must be open")
        lines = NEWLINE_PATTERN.split(text)
        last = len(lines) - 1
        for index, line in enumerate(lines):
            if index < last:
                line += NEWLINE_MARKER
            if line:
                self._append(op, line)
            if index < last:
                self._end_line()

    def _append(self, op: str, text: str) -> None:
        if op == EQUAL:
            self._actual_line.append(self.decorate_equal(text))
            self._expected_line.append(self.decorate_equal(text))
            return
        self._line_equal = False
        if op == DELETED:
            self._actual_line.append(self.decorate_deleted(text))
            self._expected_line.append(self.decorate_padding(len(text)))
            return
        self._actual_line.append(self.decorate_padding(len(text)))
        self._expected_line.append(self.decorate_inserted(text))

    def _end_line(self) -> None:
        self._actual_lines.append("".join(self._actual_line))
        self._expected_lines.append("".join(self._expected_line))
        self._equal_lines.append(self._line_equal)
        self._actual_line = []
        self._expected_line = []
        self._line_equal = True
