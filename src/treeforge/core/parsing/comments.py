from __future__ import annotations

"""
Line Filter and Comment Cutting.

First stage of the tree-text pipeline. Decides whether a raw line carries
content at all and strips trailing annotations such as
'main.py  # entry point' while leaving literal hashes inside names
('v1#draft.md') untouched.
"""

from treeforge.domain.constants import COMMENT_LEADERS, COMMENT_MARKER

# Fast path: a space immediately before the marker always opens a comment
_SPACED_MARKER = " " + COMMENT_MARKER


def is_blank(line: str) -> bool:
    """Return True when the line holds nothing but whitespace."""
    return not line.strip()


def cut_comment(line: str) -> str:
    """
    Remove a trailing comment from a tree line.

    A '#' opens a comment when it starts the line or when it is preceded by a
    space, a tab or a vertical glyph ('│' or '|'). A hash glued to other
    characters is part of the name. No whitespace is required after the hash.

    Args:
        line: Raw line, possibly with indentation and connectors.

    Returns:
        str: The line truncated at the comment start (untrimmed).
    """
    idx = line.find(_SPACED_MARKER)
    if idx >= 0:
        return line[:idx]

    for i, ch in enumerate(line):
        if ch != COMMENT_MARKER:
            continue
        if i == 0:
            return ""
        if line[i - 1] in COMMENT_LEADERS:
            return line[:i]

    return line
