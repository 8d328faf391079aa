from __future__ import annotations

"""
Unit tests for the Indent Scanner.

Each token matcher is exercised in isolation, then consume_indent is
checked against pure and mixed indentation styles.
"""

import pytest

from treeforge.core.parsing.indent import (
    INDENT_MATCHERS,
    consume_indent,
    consume_lone_pipe,
    match_box_indent,
    match_pipe_indent,
    match_space_indent,
    match_tab_indent,
)

# -----------------------------------------------------------------------------
# MATCHERS
# -----------------------------------------------------------------------------

def test_matcher_precedence_order() -> None:
    assert INDENT_MATCHERS == (
        match_box_indent,
        match_pipe_indent,
        match_space_indent,
        match_tab_indent,
        consume_lone_pipe,
    )


@pytest.mark.parametrize("text,pos,expected", [
    ("│  file.txt", 0, 3),
    ("│ ", 0, None),
    ("│x file.txt", 0, None),
    ("ab│  c", 2, 5),
])
def test_match_box_indent(text, pos, expected) -> None:
    assert match_box_indent(text, pos) == expected


@pytest.mark.parametrize("text,pos,expected", [
    ("|  file.txt", 0, 3),
    ("| ", 0, None),
    ("|--", 0, None),
])
def test_match_pipe_indent(text, pos, expected) -> None:
    assert match_pipe_indent(text, pos) == expected


@pytest.mark.parametrize("text,pos,expected", [
    ("   file.txt", 0, 3),
    ("  ", 0, None),
    ("  x", 0, None),
])
def test_match_space_indent(text, pos, expected) -> None:
    assert match_space_indent(text, pos) == expected


def test_match_tab_indent() -> None:
    assert match_tab_indent("\tx", 0) == 1
    assert match_tab_indent("x\t", 0) is None
    assert match_tab_indent("", 0) is None


@pytest.mark.parametrize("text,pos,expected", [
    ("|   file.txt", 0, 4),
    ("│   file.txt", 0, 4),
    ("│ x", 0, 2),
    ("|file.txt", 0, None),
    ("x", 0, None),
    ("", 0, None),
])
def test_consume_lone_pipe(text, pos, expected) -> None:
    assert consume_lone_pipe(text, pos) == expected

# -----------------------------------------------------------------------------
# CONSUME INDENT
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("line,depth,rest", [
    ("file.txt", 0, "file.txt"),
    ("│  file.txt", 1, "file.txt"),
    ("|  file.txt", 1, "file.txt"),
    ("   file.txt", 1, "file.txt"),
    ("\tfile.txt", 1, "file.txt"),
    ("│  │  file.txt", 2, "file.txt"),
    ("|  |  file.txt", 2, "file.txt"),
    ("      file.txt", 2, "file.txt"),
    ("│  \tfile.txt", 2, "file.txt"),
    ("|    file.txt", 1, "file.txt"),
    ("│    file.txt", 1, "file.txt"),
    ("|   |-- handlers/", 1, "|-- handlers/"),
    ("│  ├─ main.go", 1, "├─ main.go"),
])
def test_consume_indent(line: str, depth: int, rest: str) -> None:
    assert consume_indent(line) == (depth, rest)


def test_stray_spaces_before_connector_add_no_level() -> None:
    assert consume_indent("  ├─ file.txt") == (0, "├─ file.txt")


def test_empty_line() -> None:
    assert consume_indent("") == (0, "")
