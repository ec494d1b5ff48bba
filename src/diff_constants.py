#!/usr/bin/env python3
"""Markers and patterns shared by the diff writers and generators."""
from __future__ import annotations

import re

# Appended to both sides so trailing whitespace differences remain visible.
EOS_MARKER = "\\0"
# Displayed in place of a line break.
NEWLINE_MARKER = "\\n"
NEWLINE_PATTERN = re.compile(r"\r?\n")

# Whitespace and line breaks are delimiters too, see is_word_delimiter().
WORD_DELIMITERS = frozenset("[](){}/\\*+-#:;.")


def is_word_delimiter(char: str) -> bool:
    return char.isspace() or char in WORD_DELIMITERS
