from __future__ import annotations

import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from context_generator import ELLIPSIS, LEGEND, MAX_DEPTH, MISSING, ContextGenerator
from diff_config import DiffConfig
from message_section import ContextSection, StringSection, render_sections
from terminal_encoding import TerminalEncoding


def test_single_line_values_render_one_block() -> None:
    sections = ContextGenerator("actual", "expected", "actual", "expected").build()

    assert sections == [
        ContextSection(
            {
                "actual": "actual        \\0",
                "diff": "------++++++++  ",
                "expected": "      expected\\0",
            }
        )
    ]
    assert render_sections(sections) == (
        "actual  : actual        \\0\n"
        "diff    : ------++++++++  \n"
        "expected:       expected\\0"
    )


def test_identical_list_elements_are_skipped_except_at_the_edges() -> None:
    actual = ["a", "b", "c", "d", "e"]
    expected = ["a", "b", "X", "d", "e"]

    sections = ContextGenerator("actual", "expected", actual, expected).build()

    assert sections == [
        ContextSection({"actual[0]": "a\\0", "expected[0]": "a\\0"}),
        StringSection(ELLIPSIS),
        StringSection(""),
        ContextSection({"actual[2]": "c \\0", "diff": "-+  ", "expected[2]": " X\\0"}),
        StringSection(ELLIPSIS),
        StringSection(""),
        ContextSection({"actual[4]": "e\\0", "expected[4]": "e\\0"}),
    ]
    names = [name for section in sections if isinstance(section, ContextSection) for name in section.names]
    assert "actual[1]" not in names
    assert "actual[3]" not in names


def test_lists_of_different_length_name_the_missing_side() -> None:
    sections = ContextGenerator("actual", "expected", ["a"], ["a", "b"]).build()

    assert sections == [
        ContextSection({"actual[0]": "a\\0", "expected[0]": "a\\0"}),
        StringSection(""),
        ContextSection({"actual": " \\0", "diff": "+  ", "expected[1]": "b\\0"}),
    ]


def test_nested_lists_are_compared_recursively() -> None:
    sections = ContextGenerator("actual", "expected", [[1, 2]], [[1, 3]]).build()

    assert sections == [
        ContextSection({"actual[0][0]": "1\\0", "expected[0][0]": "1\\0"}),
        StringSection(""),
        ContextSection({"actual[0][1]": "2 \\0", "diff": "-+  ", "expected[0][1]": " 3\\0"}),
    ]


def test_identical_lines_are_skipped_and_numbered() -> None:
    actual = "first\nsecond\nfoo\nforth\nfifth"
    expected = "first\nsecond\nbar\nforth\nfifth"

    sections = ContextGenerator("actual", "expected", actual, expected).build()

    assert sections == [
        ContextSection({"actual@0": "first\\n", "expected@0": "first\\n"}),
        StringSection(ELLIPSIS),
        StringSection(""),
        ContextSection({"actual@2": "foo   \\n", "diff": "---+++  ", "expected@2": "   bar\\n"}),
        StringSection(ELLIPSIS),
        StringSection(""),
        ContextSection({"actual@4": "fifth\\0", "expected@4": "fifth\\0"}),
    ]


def test_padding_only_line_does_not_consume_a_line_number() -> None:
    sections = ContextGenerator("actual", "expected", "Foo\nBar", "Bar").build()

    assert sections == [
        ContextSection({"actual@0": "Foo\\n", "diff": "-----", "expected": "     "}),
        StringSection(""),
        ContextSection({"actual@1": "Bar\\0", "expected@0": "Bar\\0"}),
    ]


def test_booleans_are_not_diffed() -> None:
    sections = ContextGenerator("actual", "expected", True, False).build()

    assert sections == [ContextSection({"actual": "True", "expected": "False"})]


def test_disabled_diff_shows_raw_values() -> None:
    generator = ContextGenerator("actual", "expected", "abc", "abd")
    generator.allow_diff = False

    assert generator.build() == [ContextSection({"actual": "abc", "expected": "abd"})]


def test_disabled_diff_shows_lists_whole() -> None:
    config = DiffConfig(diff_enabled=False)

    sections = ContextGenerator("actual", "expected", ["a", "b"], ["a", "c"], config=config).build()

    assert sections == [ContextSection({"actual": "[a, b]", "expected": "[a, c]"})]


def test_missing_expected_value_is_shown_empty() -> None:
    sections = ContextGenerator("actual", "expected", actual="abc").build()

    assert sections == [ContextSection({"actual": "abc\\0", "diff": "---  ", "expected": "   \\0"})]


def test_identical_text_of_different_types_compares_types() -> None:
    sections = ContextGenerator("actual", "expected", 1, "1").build()

    assert sections == [
        ContextSection({"actual": "1\\0", "expected": "1\\0"}),
        StringSection(""),
        ContextSection({"actual.type": "int", "expected.type": "str"}),
    ]


def test_identical_text_of_same_type_adds_nothing() -> None:
    sections = ContextGenerator("actual", "expected", "same", "same").build()

    assert sections == [ContextSection({"actual": "same\\0", "expected": "same\\0"})]


def test_legend_is_appended_once_when_markers_are_shown() -> None:
    generator = ContextGenerator("actual", "expected", ["a", "b", "c"], ["x", "b", "y"])
    generator.allow_legend = True

    sections = generator.build()

    assert sections[-1] == StringSection(LEGEND)
    assert sections[-2] == StringSection("")
    assert sections.count(StringSection(LEGEND)) == 1


def test_legend_is_omitted_without_markers() -> None:
    config = DiffConfig(terminal_encoding=TerminalEncoding.COLORS_16, legend_enabled=True)

    sections = ContextGenerator("actual", "expected", "cat", "cot", config=config).build()

    assert StringSection(LEGEND) not in sections
    assert len(sections) == 1
    assert sections[0].names == ["actual", "expected"]


def test_both_values_missing_is_rejected() -> None:
    with pytest.raises(ValueError):
        ContextGenerator("actual", "expected", MISSING, MISSING)


def test_empty_names_are_rejected() -> None:
    with pytest.raises(ValueError):
        ContextGenerator("", "expected", "a", "b")


def test_excessive_nesting_is_rejected() -> None:
    with pytest.raises(RecursionError):
        ContextGenerator("actual", "expected", "a", "b", depth=MAX_DEPTH + 1)


def test_row_split_for_alignment_shares_the_line_number() -> None:
    sections = ContextGenerator("actual", "expected", "a\nb", "a\nc\nd").build()

    assert sections == [
        ContextSection({"actual@0": "a\\n", "expected@0": "a\\n"}),
        StringSection(""),
        ContextSection({"actual@1": "b   ", "diff": "-+++", "expected@1": " c\\n"}),
        StringSection(""),
        ContextSection({"actual@1": " \\0", "diff": "+  ", "expected@2": "d\\0"}),
    ]


def test_equal_names_keep_both_values() -> None:
    sections = ContextGenerator("value", "value", "abc", "abd").build()

    assert sections == [ContextSection([("value", "abc \\0"), ("diff", "  -+  "), ("value", "ab d\\0")])]
    assert render_sections(sections) == "value: abc \\0\ndiff :   -+  \nvalue: ab d\\0"


def test_name_matching_the_diff_row_keeps_the_actual_value() -> None:
    sections = ContextGenerator("diff", "expected", "abc", "abd").build()

    assert sections[0].names == ["diff", "diff", "expected"]
    assert sections[0].entries[0] == ("diff", "abc \\0")
