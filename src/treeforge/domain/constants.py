from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to application-wide constants: versioning,
fallback names for the scaffold root, and the glyph vocabularies recognised
by the tree-text parser.
"""

from typing import FrozenSet, Tuple

APP_NAME = "treeforge"
APP_VERSION = "1.0.0"
CURRENT_CONFIG_VERSION = "1.0.0"

DEFAULT_ROOT_NAME = "output"
DEFAULT_PARENT_DIR = "."

# -----------------------------------------------------------------------------
# TREE TEXT VOCABULARY
# -----------------------------------------------------------------------------

PATH_SEPARATOR = "/"
COMMENT_MARKER = "#"

BOX_VERTICAL = "│"
ASCII_VERTICAL = "|"
VERTICAL_GLYPHS: FrozenSet[str] = frozenset({BOX_VERTICAL, ASCII_VERTICAL})

# Characters that may precede a '#' for it to open a comment
COMMENT_LEADERS: FrozenSet[str] = frozenset({" ", "\t", BOX_VERTICAL, ASCII_VERTICAL})

# Connector tokens in matching order
BRANCH_TOKENS: Tuple[str, ...] = (
    "├─",
    "└─",
    "|--",
    "`--",
    "+--",
)

# Decoration left behind by ragged connector runs such as '├───────'
RESIDUAL_DECORATION: FrozenSet[str] = frozenset({
    "─",
    "—",
    BOX_VERTICAL,
    ASCII_VERTICAL,
    "-",
    " ",
    "\t",
})

INLINE_WHITESPACE = " \t"
