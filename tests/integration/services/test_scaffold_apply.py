from __future__ import annotations

"""
Integration tests for materializing entries on disk.

Verifies directory and file creation, skip/force semantics for existing
files, progress reporting and abort on failure.
"""

from pathlib import Path

import pytest

from treeforge.core.parsing.tree_parser import parse_tree
from treeforge.core.services.scaffolder import apply_entries, create_entry
from treeforge.domain.errors import ScaffoldError
from treeforge.domain.scaffold_models import EntryOutcome
from treeforge.domain.tree_models import Entry, EntryKind


@pytest.mark.parametrize("entry", [
    Entry("testdir", EntryKind.DIRECTORY),
    Entry("testfile.txt", EntryKind.FILE),
    Entry("nested/deep/file.txt", EntryKind.FILE),
])
def test_create_entry(tmp_path: Path, entry: Entry) -> None:
    assert create_entry(entry, str(tmp_path)) is EntryOutcome.CREATED
    assert (tmp_path / entry.path).exists()


def test_existing_file_skip_and_force(tmp_path: Path) -> None:
    existing = tmp_path / "existing.txt"
    existing.write_text("content", encoding="utf-8")
    entry = Entry("existing.txt", EntryKind.FILE)

    assert create_entry(entry, str(tmp_path)) is EntryOutcome.SKIPPED
    assert existing.read_text(encoding="utf-8") == "content"

    assert create_entry(entry, str(tmp_path), force=True) is EntryOutcome.CREATED
    assert existing.read_text(encoding="utf-8") == ""


def test_existing_directory_is_created_again(tmp_path: Path) -> None:
    (tmp_path / "d").mkdir()
    (tmp_path / "d" / "keep.txt").write_text("x", encoding="utf-8")
    assert create_entry(Entry("d", EntryKind.DIRECTORY), str(tmp_path)) is EntryOutcome.CREATED
    assert (tmp_path / "d" / "keep.txt").exists()


def test_apply_entries_from_parsed_tree(tmp_path: Path, myapp_renderings, myapp_entries) -> None:
    base = tmp_path / "myapp"
    seen = []

    result = apply_entries(
        str(base),
        parse_tree(myapp_renderings["unicode"]),
        progress=lambda e, outcome, full: seen.append((e, outcome)),
    )

    assert result.created == len(myapp_entries)
    assert result.skipped == 0
    assert [e for e, _ in seen] == myapp_entries
    assert (base / "src" / "handlers" / "auth.go").is_file()
    assert (base / "config").is_dir()
    assert (base / ".gitignore").is_file()


def test_apply_entries_counts_skips(tmp_path: Path) -> None:
    base = tmp_path / "proj"
    base.mkdir()
    (base / "a.txt").write_text("keep", encoding="utf-8")
    entries = [Entry("a.txt", EntryKind.FILE), Entry("b.txt", EntryKind.FILE)]

    result = apply_entries(str(base), entries)

    assert (result.created, result.skipped) == (1, 1)
    assert result.skipped_paths == [str(base / "a.txt")]


def test_apply_entries_aborts_on_failure(tmp_path: Path) -> None:
    base = tmp_path / "proj"
    entries = [
        Entry("blocker", EntryKind.FILE),
        Entry("blocker/child.txt", EntryKind.FILE),
        Entry("never.txt", EntryKind.FILE),
    ]
    with pytest.raises(ScaffoldError):
        apply_entries(str(base), entries)
    assert not (base / "never.txt").exists()


def test_apply_entries_base_is_a_file(tmp_path: Path) -> None:
    base = tmp_path / "taken"
    base.write_text("", encoding="utf-8")
    with pytest.raises(ScaffoldError):
        apply_entries(str(base), [])
