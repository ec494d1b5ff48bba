#!/usr/bin/env python3
"""Explain why an actual value does not match the expected value."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
import logging

from diff_config import DiffConfig
from diff_constants import EOS_MARKER, NEWLINE_MARKER
from diff_generator import DiffGenerator
from diff_result import DiffResult
from message_section import ContextSection, MessageSection, StringSection
from text_only_writer import DIFF_DELETE, DIFF_INSERT


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


# Marks a side without a value, e.g. past the end of the shorter list.
MISSING: Any = _Missing()

MAX_DEPTH = 64
DIFF_NAME = "diff"
ELLIPSIS = "\n[...]"
LEGEND = "\n".join(
    [
        "Legend:",
        f"{DIFF_DELETE}  : delete this character from the actual value",
        f"{DIFF_INSERT}  : insert this character into the actual value",
        f"{NEWLINE_MARKER} : end of line",
        f"{EOS_MARKER} : end of string",
    ]
)


@dataclass
class ContextGenerator:
    """Builds the message sections that compare an actual and an expected value.

    Lists and tuples are compared element by element; anything else is mapped
    to text and diffed. Identical elements or lines are replaced by ``[...]``,
    except for the first and the last one. ``allow_diff`` and ``allow_legend``
    default to the configuration and may be changed before calling ``build()``.
    """

    actual_name: str
    expected_name: str
    actual: Any = MISSING
    expected: Any = MISSING
    config: DiffConfig = field(default_factory=DiffConfig.default)
    allow_diff: bool | None = None
    allow_legend: bool | None = None
    compare_types: bool = True
    depth: int = 0
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.actual_name, str) or not self.actual_name:
            raise ValueError(f"actual_name may not be empty: {self.actual_name!r}")
        if not isinstance(self.expected_name, str) or not self.expected_name:
            raise ValueError(f"expected_name may not be empty: {self.expected_name!r}")
        if self.actual is MISSING and self.expected is MISSING:
            raise ValueError("At least one of actual or expected must be provided")
        if self.depth > MAX_DEPTH:
            raise RecursionError(f"Context nesting exceeds {MAX_DEPTH} levels at {self.actual_name}")
        if self.allow_diff is None:
            self.allow_diff = self.config.diff_enabled
        if self.allow_legend is None:
            self.allow_legend = self.config.legend_enabled
        self._logger = logging.getLogger(__name__)

    def build(self) -> list[MessageSection]:
        sections, used_diff_markers = self._build()
        if self.allow_legend and used_diff_markers:
            sections.append(StringSection(""))
            sections.append(StringSection(LEGEND))
        return sections

    def _build(self) -> tuple[list[MessageSection], bool]:
        if _is_array(self.actual) and _is_array(self.expected) and (self.actual or self.expected):
            self._logger.debug("Comparing %s and %s element by element", self.actual_name, self.expected_name)
            return self._build_list()
        self._logger.debug("Comparing %s and %s as text", self.actual_name, self.expected_name)
        return self._build_object()

    def _build_list(self) -> tuple[list[MessageSection], bool]:
        if not self.allow_diff:
            return [self._plain_block()], False
        actual_size = len(self.actual)
        expected_size = len(self.expected)
        size = max(actual_size, expected_size)
        sections: list[MessageSection] = []
        used_diff_markers = False
        skipped = False
        for index in range(size):
            actual_present = index < actual_size
            expected_present = index < expected_size
            actual_value = self.actual[index] if actual_present else MISSING
            expected_value = self.expected[index] if expected_present else MISSING
            equal = actual_present and expected_present and actual_value == expected_value
            if equal and 0 < index < size - 1:
                skipped = True
                continue
            if skipped:
                sections.append(StringSection(ELLIPSIS))
                skipped = False
            element = ContextGenerator(
                f"{self.actual_name}[{index}]" if actual_present else self.actual_name,
                f"{self.expected_name}[{index}]" if expected_present else self.expected_name,
                actual_value,
                expected_value,
                config=self.config,
                allow_diff=self.allow_diff,
                allow_legend=False,
                compare_types=not equal,
                depth=self.depth + 1,
            )
            element_sections, element_used_markers = element._build()
            if sections:
                sections.append(StringSection(""))
            sections.extend(element_sections)
            used_diff_markers |= element_used_markers
        return sections, used_diff_markers

    def _build_object(self) -> tuple[list[MessageSection], bool]:
        if not self.allow_diff or isinstance(self.actual, bool) or isinstance(self.expected, bool):
            return [self._plain_block()], False
        generator = DiffGenerator(self.config.terminal_encoding)
        result = generator.diff(self._to_string(self.actual), self._to_string(self.expected))
        if result.line_count == 1:
            diff_line = "" if result.equal_lines[0] else result.diff_line(0)
            sections: list[MessageSection] = [
                _block(self.actual_name, result.actual_lines[0], diff_line, self.expected_name, result.expected_lines[0])
            ]
            used_diff_markers = bool(diff_line)
        else:
            sections, used_diff_markers = self._build_lines(generator, result)
        if self.compare_types and result.all_equal:
            sections.extend(self._type_sections())
        return sections, used_diff_markers

    def _build_lines(self, generator: DiffGenerator, result: DiffResult) -> tuple[list[MessageSection], bool]:
        sections: list[MessageSection] = []
        used_diff_markers = False
        skipped = False
        actual_number = 0
        expected_number = 0
        last = result.line_count - 1
        for index in range(result.line_count):
            actual_line = result.actual_lines[index]
            expected_line = result.expected_lines[index]
            equal = result.equal_lines[index]
            if equal and 0 < index < last:
                skipped = True
                actual_number += 1
                expected_number += 1
                continue
            if skipped:
                sections.append(StringSection(ELLIPSIS))
                skipped = False
            # Only a row that ends a line advances the number; rows before it share it.
            if generator.is_empty(actual_line):
                actual_name = self.actual_name
            else:
                actual_name = f"{self.actual_name}@{actual_number}"
                if generator.ends_line(actual_line):
                    actual_number += 1
            if generator.is_empty(expected_line):
                expected_name = self.expected_name
            else:
                expected_name = f"{self.expected_name}@{expected_number}"
                if generator.ends_line(expected_line):
                    expected_number += 1
            diff_line = "" if equal else result.diff_line(index)
            used_diff_markers |= bool(diff_line)
            if sections:
                sections.append(StringSection(""))
            sections.append(_block(actual_name, actual_line, diff_line, expected_name, expected_line))
        return sections, used_diff_markers

    def _type_sections(self) -> list[MessageSection]:
        if self.actual is MISSING or self.expected is MISSING:
            return []
        actual_type = type(self.actual)
        expected_type = type(self.expected)
        if actual_type is expected_type:
            return []
        types = ContextGenerator(
            f"{self.actual_name}.type",
            f"{self.expected_name}.type",
            _type_name(actual_type),
            _type_name(expected_type),
            config=self.config,
            allow_diff=False,
            allow_legend=False,
            compare_types=False,
            depth=self.depth + 1,
        )
        sections, _ = types._build()
        return [StringSection(""), *sections]

    def _plain_block(self) -> ContextSection:
        return _block(self.actual_name, self._to_string(self.actual), "", self.expected_name, self._to_string(self.expected))

    def _to_string(self, value: Any) -> str:
        if value is MISSING:
            return ""
        return self.config.string_mappers.to_string(value)


def _block(actual_name: str, actual_text: str, diff_text: str, expected_name: str, expected_text: str) -> ContextSection:
    entries = [(actual_name, actual_text)]
    if diff_text:
        entries.append((DIFF_NAME, diff_text))
    entries.append((expected_name, expected_text))
    return ContextSection(entries)


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _type_name(value_type: type) -> str:
    if value_type.__module__ == "builtins":
        return value_type.__qualname__
    return f"{value_type.__module__}.{value_type.__qualname__}"
