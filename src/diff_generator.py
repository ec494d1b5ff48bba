#!/usr/bin/env python3
"""Compute the aligned difference between two strings."""
from __future__ import annotations

from dataclasses import dataclass, field
import logging

from diff_match_patch import diff_match_patch
from rich.text import Text

from color_writer import Colors16MWriter, Colors16Writer, Colors256Writer
from delta_simplifier import DeltaSimplifier
from diff_constants import EOS_MARKER, NEWLINE_MARKER
from diff_result import DiffResult
from diff_run import DELETED, EQUAL, INSERTED, DiffRun
from diff_writer import DiffWriter
from terminal_encoding import TerminalEncoding
from text_only_writer import TextOnlyWriter

_OPS = {
    diff_match_patch.DIFF_EQUAL: EQUAL,
    diff_match_patch.DIFF_DELETE: DELETED,
    diff_match_patch.DIFF_INSERT: INSERTED,
}

_WRITERS: dict[TerminalEncoding, type[DiffWriter]] = {
    TerminalEncoding.NONE: TextOnlyWriter,
    TerminalEncoding.COLORS_16: Colors16Writer,
    TerminalEncoding.COLORS_256: Colors256Writer,
    TerminalEncoding.COLORS_16M: Colors16MWriter,
}


@dataclass
class DiffGenerator:
    encoding: TerminalEncoding = TerminalEncoding.NONE
    simplifier: DeltaSimplifier = field(default_factory=DeltaSimplifier)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.encoding = TerminalEncoding.parse(self.encoding)
        self._logger = logging.getLogger(__name__)

    @property
    def padding_marker(self) -> str:
        return _WRITERS[self.encoding].padding_marker

    def diff(self, actual: str, expected: str) -> DiffResult:
        if not isinstance(actual, str):
            raise TypeError(f"actual must be a str, not {type(actual).__name__}")
        if not isinstance(expected, str):
            raise TypeError(f"expected must be a str, not {type(expected).__name__}")
        raw_runs = self.runs(actual + EOS_MARKER, expected + EOS_MARKER)
        runs = self.simplifier.simplify(raw_runs)
        writer = self.create_writer()
        for run in runs:
            if run.op == EQUAL:
                writer.write_equal(run.text)
            elif run.op == DELETED:
                writer.write_deleted(run.text)
            else:
                writer.write_inserted(run.text)
        actual_lines, diff_lines, expected_lines, equal_lines = writer.flush()
        self._logger.debug(
            "Diffed %d raw runs into %d runs over %d lines (%s)",
            len(raw_runs),
            len(runs),
            len(actual_lines),
            self.encoding.value,
        )
        return DiffResult(
            actual_lines=tuple(actual_lines),
            diff_lines=tuple(diff_lines),
            expected_lines=tuple(expected_lines),
            equal_lines=tuple(equal_lines),
            padding_marker=writer.padding_marker,
        )

    def runs(self, actual: str, expected: str) -> list[DiffRun]:
        """Minimal character-level edit script, before simplification."""
        dmp = diff_match_patch()
        # No deadline and no line-mode speedup: the result must be minimal and deterministic.
        dmp.Diff_Timeout = 0
        diffs = dmp.diff_main(actual, expected, False)
        return [DiffRun(_OPS[op], text) for op, text in diffs if text]

    def create_writer(self) -> DiffWriter:
        try:
            writer_type = _WRITERS[self.encoding]
        except KeyError:
            raise ValueError(f"Unsupported terminal encoding: {self.encoding!r}") from None
        return writer_type()

    def is_empty(self, line: str) -> bool:
        """True if the line holds nothing but padding once colors are removed."""
        return not Text.from_ansi(line).plain.replace(self.padding_marker, "")

    def ends_line(self, line: str) -> bool:
        """True if the line ends with the newline or end-of-string marker."""
        plain = Text.from_ansi(line).plain
        return plain.endswith(NEWLINE_MARKER) or plain.endswith(EOS_MARKER)
