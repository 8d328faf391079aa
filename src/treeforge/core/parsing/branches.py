from __future__ import annotations

"""
Branch Trimmer.

Strips decorative connector glyphs ('├─', '└─', '|--', '`--', '+--' and
ragged runs such as '├───────') from the front of a line remainder,
exposing the bare entry name. Leading dots are never touched, so dotfiles
such as '.gitignore' survive intact.
"""

from treeforge.domain.constants import BRANCH_TOKENS, INLINE_WHITESPACE, RESIDUAL_DECORATION


def trim_leading_whitespace(text: str) -> str:
    """Strip leading spaces and tabs only."""
    return text.lstrip(INLINE_WHITESPACE)


def remove_branch_prefixes(text: str) -> str:
    """
    Repeatedly remove known connector tokens from the front of the text.

    Whitespace after each removed token is trimmed as well.
    """
    while True:
        for token in BRANCH_TOKENS:
            if text.startswith(token):
                text = trim_leading_whitespace(text[len(token):])
                break
        else:
            return text


def remove_residual_box_drawing(text: str) -> str:
    """Drop any run of dashes, vertical glyphs and whitespace from the front."""
    pos = 0
    while pos < len(text) and text[pos] in RESIDUAL_DECORATION:
        pos += 1
    return text[pos:]


def trim_branch(text: str) -> str:
    """
    Remove all branch decoration in front of an entry name.

    Args:
        text: Remainder returned by the indent scanner.

    Returns:
        str: The name (possibly with a trailing '/'), left-trimmed.
    """
    text = trim_leading_whitespace(text)
    text = remove_branch_prefixes(text)
    text = remove_residual_box_drawing(text)
    return trim_leading_whitespace(text)
