from __future__ import annotations

"""
Indent Scanner.

Converts the leading indentation of a tree line into a nesting depth.
Tree-listing tools mix Unicode box drawing, ASCII approximations, plain
spacing and tabs; each recognised token counts as exactly one level.

Matchers are tried in order at every position. A matcher receives the text
and the current position and returns the position after the token, or None
when the token does not start there.
"""

import logging
from typing import Callable, Optional, Tuple

from treeforge.domain.constants import ASCII_VERTICAL, BOX_VERTICAL, VERTICAL_GLYPHS

logger = logging.getLogger(__name__)

IndentMatcher = Callable[[str, int], Optional[int]]

# -----------------------------------------------------------------------------
# TOKEN MATCHERS
# -----------------------------------------------------------------------------

def _match_glyph_block(text: str, pos: int, glyph: str) -> Optional[int]:
    """Match '<glyph>' followed by two spaces (three characters)."""
    if text[pos:pos + 3] == glyph + "  ":
        return pos + 3
    return None


def match_box_indent(text: str, pos: int) -> Optional[int]:
    """'│  ' -> one level."""
    return _match_glyph_block(text, pos, BOX_VERTICAL)


def match_pipe_indent(text: str, pos: int) -> Optional[int]:
    """'|  ' -> one level."""
    return _match_glyph_block(text, pos, ASCII_VERTICAL)


def match_space_indent(text: str, pos: int) -> Optional[int]:
    """Three consecutive spaces -> one level."""
    if text[pos:pos + 3] == "   ":
        return pos + 3
    return None


def match_tab_indent(text: str, pos: int) -> Optional[int]:
    """A single tab -> one level."""
    if text[pos:pos + 1] == "\t":
        return pos + 1
    return None


def consume_lone_pipe(text: str, pos: int) -> Optional[int]:
    """
    Match a vertical glyph followed by one or more spaces.

    Catches the pipe runs not covered by the fixed three-character
    blocks, e.g. '│ ' or '|    '. All trailing spaces are consumed.
    """
    if pos >= len(text) or text[pos] not in VERTICAL_GLYPHS:
        return None
    end = pos + 1
    while end < len(text) and text[end] == " ":
        end += 1
    if end == pos + 1:
        return None
    return end


INDENT_MATCHERS: Tuple[IndentMatcher, ...] = (
    match_box_indent,
    match_pipe_indent,
    match_space_indent,
    match_tab_indent,
    consume_lone_pipe,
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def consume_indent(line: str) -> Tuple[int, str]:
    """
    Consume the indentation tokens at the start of a line.

    Stray single spaces that form no token (e.g. the two spaces in
    '  ├─ file') are absorbed without adding a level.

    Args:
        line: Comment-free, non-blank line.

    Returns:
        Tuple[int, str]: Nesting depth and the unconsumed remainder.
    """
    depth = 0
    pos = 0
    length = len(line)

    while pos < length:
        for matcher in INDENT_MATCHERS:
            new_pos = matcher(line, pos)
            if new_pos is not None:
                depth += 1
                pos = new_pos
                break
        else:
            if line[pos] == " ":
                pos += 1
                continue
            break

    return depth, line[pos:]
