from __future__ import annotations

"""
Scaffolding Service.

Turns a parsed entry list into either a dry-run preview or real
directories and empty files under a base path. Existing files are kept
unless overwriting is requested; directories are never removed.
"""

import logging
import os
from typing import Callable, List, Optional, Sequence

from treeforge.domain.constants import DEFAULT_ROOT_NAME, PATH_SEPARATOR
from treeforge.domain.errors import ScaffoldError
from treeforge.domain.scaffold_models import EntryOutcome, ScaffoldResult
from treeforge.domain.tree_models import Entry, count_directories, count_files
from treeforge.infra.fs import is_within, join_relative, safe_mkdir, touch_empty

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[Entry, EntryOutcome, str], None]

DRY_RUN_HEADER = "=== Dry-run mode (use --apply to create files) ==="

# -----------------------------------------------------------------------------
# PREVIEW
# -----------------------------------------------------------------------------

def determine_root_name(root_name: Optional[str], first_line: str) -> str:
    """
    Choose the name of the directory that will hold the structure.

    An explicit override wins. Otherwise the first tree line is used, minus
    whitespace and one trailing '/'. Falls back to 'output'.
    """
    if root_name:
        return root_name

    root = first_line.strip()
    if root.endswith(PATH_SEPARATOR):
        root = root[:-1]
    return root or DEFAULT_ROOT_NAME


def format_entry_line(entry: Entry, full_path: str) -> str:
    """Render one '[DIR]'/'[FILE]' listing line."""
    tag = "[DIR] " if entry.is_dir else "[FILE]"
    return f"  {tag} {full_path}"


def render_dry_run(base_path: str, entries: Sequence[Entry]) -> List[str]:
    """
    Build the textual preview of what an apply run would create.

    Args:
        base_path: Directory the structure would be created in.
        entries: Parsed entries.

    Returns:
        List[str]: Preview lines, without terminators.
    """
    lines = [DRY_RUN_HEADER, f"Base: {base_path}", ""]
    for entry in entries:
        lines.append(format_entry_line(entry, join_relative(base_path, entry.path)))
    lines.append("")
    lines.append(
        f"Total: {count_directories(entries)} directories, {count_files(entries)} files"
    )
    return lines

# -----------------------------------------------------------------------------
# MATERIALIZATION
# -----------------------------------------------------------------------------

def resolve_entry_path(entry: Entry, base_path: str) -> str:
    """
    Return the native path of an entry under ``base_path``.

    Raises:
        ScaffoldError: If the entry would land outside ``base_path``.
    """
    full_path = join_relative(base_path, entry.path)
    if not is_within(base_path, full_path):
        raise ScaffoldError(f"refusing to create {full_path}: outside {base_path}", full_path)
    return full_path


def create_entry(entry: Entry, base_path: str, force: bool = False) -> EntryOutcome:
    """
    Create a single directory or empty file.

    Args:
        entry: Entry to materialize.
        base_path: Directory under which the entry is created.
        force: Truncate files that already exist instead of skipping them.

    Returns:
        EntryOutcome: CREATED, or SKIPPED for an existing file without ``force``.

    Raises:
        ScaffoldError: If the filesystem operation fails.
    """
    full_path = resolve_entry_path(entry, base_path)

    if entry.is_dir:
        ok, err = safe_mkdir(full_path)
        if not ok:
            raise ScaffoldError(f"creating directory {full_path}: {err}", full_path)
        return EntryOutcome.CREATED

    if os.path.exists(full_path) and not force:
        logger.debug(f"Skipping existing file: {full_path}")
        return EntryOutcome.SKIPPED

    ok, err = safe_mkdir(os.path.dirname(full_path))
    if not ok:
        raise ScaffoldError(f"creating directory for file {full_path}: {err}", full_path)

    try:
        touch_empty(full_path)
    except OSError as e:
        raise ScaffoldError(f"creating file {full_path}: {e}", full_path) from e
    return EntryOutcome.CREATED


def apply_entries(
        base_path: str,
        entries: Sequence[Entry],
        force: bool = False,
        progress: Optional[ProgressCallback] = None,
) -> ScaffoldResult:
    """
    Create the base directory and every entry, in order.

    The first failure aborts the run.

    Args:
        base_path: Target directory (created if missing).
        entries: Parsed entries.
        force: Overwrite existing files.
        progress: Optional callback invoked after each entry.

    Returns:
        ScaffoldResult: Created/skipped counters.

    Raises:
        ScaffoldError: If the base directory or any entry cannot be created.
    """
    ok, err = safe_mkdir(base_path)
    if not ok:
        raise ScaffoldError(f"creating base directory: {err}", base_path)

    logger.debug(f"Creating structure in: {base_path}")

    created = 0
    skipped_paths: List[str] = []

    for entry in entries:
        outcome = create_entry(entry, base_path, force=force)
        full_path = join_relative(base_path, entry.path)

        if outcome is EntryOutcome.CREATED:
            created += 1
        else:
            skipped_paths.append(full_path)

        if progress is not None:
            progress(entry, outcome, full_path)

    logger.debug(f"Scaffold finished: {created} created, {len(skipped_paths)} skipped")
    return ScaffoldResult(
        base_path=base_path,
        created=created,
        skipped=len(skipped_paths),
        skipped_paths=skipped_paths,
    )
