from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the flat, ordered entry model produced by the tree-text parser.
Each entry is a relative, slash-separated path tagged as a directory or a file.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class EntryKind(Enum):
    """Classification of a parsed tree line."""
    DIRECTORY = "dir"
    FILE = "file"


@dataclass(frozen=True)
class Entry:
    """
    Represents one resolved line of the tree.

    Attributes:
        path: Relative path using '/' as separator. Never empty, never absolute.
        kind: Directory or file classification.
    """
    path: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.path, "kind": self.kind.value}

# -----------------------------------------------------------------------------
# AGGREGATES
# -----------------------------------------------------------------------------

def count_directories(entries: Iterable[Entry]) -> int:
    """Return how many entries are directories."""
    return sum(1 for e in entries if e.kind is EntryKind.DIRECTORY)


def count_files(entries: Iterable[Entry]) -> int:
    """Return how many entries are files."""
    return sum(1 for e in entries if e.kind is EntryKind.FILE)
