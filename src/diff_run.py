#!/usr/bin/env python3
"""A maximal span of text sharing one edit type."""
from __future__ import annotations

from dataclasses import dataclass

EQUAL = "equal"
DELETED = "deleted"
INSERTED = "inserted"

_OPS = (EQUAL, DELETED, INSERTED)


@dataclass(frozen=True)
class DiffRun:
    op: str
    text: str

    def __post_init__(self) -> None:
        if self.op not in _OPS:
            raise ValueError(f"Unexpected diff op: {self.op!r}")

    @property
    def is_equal(self) -> bool:
        return self.op == EQUAL

    def actual_text(self) -> str:
        """Text this run contributes to the actual value."""
        return "" if self.op == INSERTED else self.text

    def expected_text(self) -> str:
        """Text this run contributes to the expected value."""
        return "" if self.op == DELETED else self.text


def merge_runs(runs: list[DiffRun]) -> list[DiffRun]:
    """Drop empty runs and join neighbours that share an op."""
    merged: list[DiffRun] = []
    for run in runs:
        if not run.text:
            continue
        if merged and merged[-1].op == run.op:
            merged[-1] = DiffRun(run.op, merged[-1].text + run.text)
        else:
            merged.append(run)
    return merged
