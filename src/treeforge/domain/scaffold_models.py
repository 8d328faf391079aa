from __future__ import annotations

"""
Scaffold Domain Data Models.

Defines the data structures used to report the outcome of materializing a
parsed tree on disk, shared between the scaffolding service and the
interface layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

class EntryOutcome(Enum):
    """Result of creating a single entry."""
    CREATED = "created"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ScaffoldResult:
    """
    Unified result object of an apply run.

    Attributes:
        base_path: Directory under which every entry was created.
        created: Number of directories and files created (or overwritten).
        skipped: Number of files left untouched because they already existed.
        skipped_paths: Absolute paths of the skipped files.
    """
    base_path: str
    created: int = 0
    skipped: int = 0
    skipped_paths: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base_path": self.base_path,
            "created": self.created,
            "skipped": self.skipped,
            "skipped_paths": list(self.skipped_paths),
        }
