from __future__ import annotations

"""
Tree Builder.

Drives the per-line pipeline (filter, comment cut, indent scan, branch trim)
and resolves every content line into an Entry. Nesting is tracked with a
flat depth -> parent-path map that lives only for one parse call.
"""

import logging
from typing import Dict, List, Sequence

from treeforge.core.parsing.branches import trim_branch
from treeforge.core.parsing.comments import cut_comment, is_blank
from treeforge.core.parsing.indent import consume_indent
from treeforge.domain.constants import PATH_SEPARATOR
from treeforge.domain.errors import EmptyInputError, InvalidRootError
from treeforge.domain.tree_models import Entry, EntryKind

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_root(line: str) -> str:
    """
    Validate the root declaration and return its bare name.

    Raises:
        InvalidRootError: If nothing remains after trimming.
    """
    root = _strip_suffix(line.strip(), PATH_SEPARATOR)
    if not root:
        raise InvalidRootError()
    return root


def parse_tree(lines: Sequence[str]) -> List[Entry]:
    """
    Convert tree text into an ordered list of relative entries.

    The first line declares the root and is not emitted. Every following
    non-blank, non-comment line yields exactly one entry, in input order.

    Args:
        lines: Raw lines of the tree rendering.

    Returns:
        List[Entry]: Entries in input order. Empty when only the root is given.

    Raises:
        EmptyInputError: If ``lines`` is empty.
        InvalidRootError: If the first line is empty after trimming.
    """
    if not lines:
        raise EmptyInputError()

    root = parse_root(lines[0])
    logger.debug(f"Parsing tree rooted at '{root}' ({len(lines) - 1} body lines)")

    entries: List[Entry] = []
    parents: Dict[int, str] = {0: ""}

    for line_no, raw in enumerate(lines[1:], start=2):
        if is_blank(raw):
            continue

        depth, rest = consume_indent(cut_comment(raw))
        name = trim_branch(rest).strip()
        if not name:
            continue

        is_dir = name.endswith(PATH_SEPARATOR)
        name = _strip_suffix(name, PATH_SEPARATOR)

        if depth not in parents:
            logger.debug(f"Line {line_no}: no parent recorded for depth {depth}, placing at root")
        path = join_path(parents.get(depth, ""), name)

        # A directory line always opens the next level, even when it
        # resolves to the root and emits nothing
        if is_dir:
            _open_level(parents, depth, path)

        if not path:
            logger.debug(f"Line {line_no}: '{name}' resolves to no path, skipped")
            continue

        kind = EntryKind.DIRECTORY if is_dir else EntryKind.FILE
        entries.append(Entry(path=path, kind=kind))

    logger.debug(f"Parsed {len(entries)} entries")
    return entries

# -----------------------------------------------------------------------------
# PATH HELPERS
# -----------------------------------------------------------------------------

def join_path(parent: str, name: str) -> str:
    """
    Join a parent path and a name with '/' and normalize the result.

    Empty and '.' segments are dropped and '..' removes the previous segment
    without ever climbing above the root, so the result is always relative.
    """
    segments: List[str] = []
    for part in f"{parent}{PATH_SEPARATOR}{name}".split(PATH_SEPARATOR):
        if part in ("", "."):
            continue
        if part == "..":
            if segments:
                segments.pop()
            continue
        segments.append(part)
    return PATH_SEPARATOR.join(segments)


def _open_level(parents: Dict[int, str], depth: int, path: str) -> None:
    """Make ``path`` the parent of depth + 1 and forget every deeper level."""
    parents[depth + 1] = path
    for stale in [d for d in parents if d > depth + 1]:
        del parents[stale]


def _strip_suffix(text: str, suffix: str) -> str:
    """Remove a single occurrence of ``suffix`` from the end of ``text``."""
    if text.endswith(suffix):
        return text[:-len(suffix)]
    return text
