#!/usr/bin/env python3
"""Aligned output of a single diff."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DiffResult:
    actual_lines: tuple[str, ...]
    diff_lines: tuple[str, ...]
    expected_lines: tuple[str, ...]
    equal_lines: tuple[bool, ...]
    padding_marker: str

    def __post_init__(self) -> None:
        size = len(self.actual_lines)
        if len(self.expected_lines) != size or len(self.equal_lines) != size:
            raise ValueError(
                "Line counts differ: "
                f"actual={size}, expected={len(self.expected_lines)}, equal={len(self.equal_lines)}"
            )
        if self.diff_lines and len(self.diff_lines) != size:
            raise ValueError(f"Expected 0 or {size} diff lines, got {len(self.diff_lines)}")

    @property
    def line_count(self) -> int:
        return len(self.actual_lines)

    @property
    def all_equal(self) -> bool:
        return all(self.equal_lines)

    def diff_line(self, index: int) -> str:
        """Diff markers for a line, or an empty string when the encoding uses colors."""
        if not self.diff_lines:
            return ""
        return self.diff_lines[index]
