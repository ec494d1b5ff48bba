#!/usr/bin/env python3
"""Collapse noisy character diffs into whole-word replacements.

A minimal character diff of two words that share a few letters, such as
"football" and "ballroom", interleaves edits with short equal fragments and is
hard to read. The simplifier walks the runs word by word and, when a word's
diff is fragmented, replaces it with a single deletion of the actual word
followed by a single insertion of the expected word. Words are bounded by
delimiters that occur inside equal runs; delimiters inside edits belong to the
word that contains them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from diff_constants import is_word_delimiter
from diff_run import DELETED, EQUAL, INSERTED, DiffRun, merge_runs


@dataclass
class DeltaSimplifier:
    max_unequal_runs: int = 2
    # Equal text wedged between two edits must be at least this long to stay.
    min_split_equal_length: int = 5

    def simplify(self, runs: Sequence[DiffRun]) -> list[DiffRun]:
        simplified: list[DiffRun] = []
        for word in self._words(runs):
            simplified.extend(self._simplify_word(word))
        return merge_runs(simplified)

    def _words(self, runs: Sequence[DiffRun]) -> Iterator[list[DiffRun]]:
        word: list[DiffRun] = []
        for piece, is_boundary in self._pieces(runs):
            if is_boundary:
                if word:
                    yield word
                    word = []
                yield [piece]
                continue
            word.append(piece)
        if word:
            yield word

    def _pieces(self, runs: Sequence[DiffRun]) -> Iterator[tuple[DiffRun, bool]]:
        for run in runs:
            if not run.is_equal:
                yield run, False
                continue
            start = 0
            for index, char in enumerate(run.text):
                if not is_word_delimiter(char):
                    continue
                if index > start:
                    yield DiffRun(EQUAL, run.text[start:index]), False
                yield DiffRun(EQUAL, char), True
                start = index + 1
            if start < len(run.text):
                yield DiffRun(EQUAL, run.text[start:]), False

    def _simplify_word(self, word: list[DiffRun]) -> list[DiffRun]:
        if len(word) < 2 or self._is_legible(word):
            return word
        actual = "".join(piece.actual_text() for piece in word)
        expected = "".join(piece.expected_text() for piece in word)
        return [DiffRun(DELETED, actual), DiffRun(INSERTED, expected)]

    def _is_legible(self, word: list[DiffRun]) -> bool:
        unequal = [index for index, piece in enumerate(word) if not piece.is_equal]
        if not unequal:
            return True
        if len(unequal) > self.max_unequal_runs:
            return False
        between = word[unequal[0] + 1 : unequal[-1]]
        return all(len(piece.text) >= self.min_split_equal_length for piece in between if piece.is_equal)
