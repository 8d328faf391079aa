from __future__ import annotations

"""
Unit tests for the scaffolding service helpers that do not touch disk:
root name resolution, dry-run rendering and base-path confinement.
"""

import os

import pytest

from treeforge.core.services.scaffolder import (
    DRY_RUN_HEADER,
    determine_root_name,
    format_entry_line,
    render_dry_run,
    resolve_entry_path,
)
from treeforge.domain.errors import ScaffoldError
from treeforge.domain.tree_models import Entry, EntryKind


@pytest.mark.parametrize("root_name,first_line,expected", [
    ("custom-root", "myapp/", "custom-root"),
    ("", "myapp/", "myapp"),
    (None, "myapp", "myapp"),
    ("", "  myapp/  ", "myapp"),
    ("", "", "output"),
    ("", "   ", "output"),
    ("", "/", "output"),
])
def test_determine_root_name(root_name, first_line, expected) -> None:
    assert determine_root_name(root_name, first_line) == expected


def test_render_dry_run_lists_every_entry() -> None:
    base = os.path.join("tmp", "test")
    entries = [
        Entry("src", EntryKind.DIRECTORY),
        Entry("src/main.go", EntryKind.FILE),
        Entry("README.md", EntryKind.FILE),
    ]

    lines = render_dry_run(base, entries)

    assert lines[0] == DRY_RUN_HEADER
    assert lines[1] == f"Base: {base}"
    assert lines[2] == ""
    assert lines[3] == f"  [DIR]  {os.path.join(base, 'src')}"
    assert lines[4] == f"  [FILE] {os.path.join(base, 'src', 'main.go')}"
    assert lines[5] == f"  [FILE] {os.path.join(base, 'README.md')}"
    assert lines[-1] == "Total: 1 directories, 2 files"


def test_render_dry_run_without_entries() -> None:
    lines = render_dry_run("base", [])
    assert lines[-1] == "Total: 0 directories, 0 files"
    assert not any("[DIR]" in l or "[FILE]" in l for l in lines)


def test_format_entry_line_alignment() -> None:
    d = format_entry_line(Entry("a", EntryKind.DIRECTORY), "x/a")
    f = format_entry_line(Entry("b", EntryKind.FILE), "x/b")
    assert d == "  [DIR]  x/a"
    assert f == "  [FILE] x/b"


def test_resolve_entry_path_rejects_escape(tmp_path) -> None:
    base = str(tmp_path / "base")
    with pytest.raises(ScaffoldError) as exc:
        resolve_entry_path(Entry("../outside.txt", EntryKind.FILE), base)
    assert exc.value.path.endswith("outside.txt")


def test_resolve_entry_path_inside_base(tmp_path) -> None:
    base = str(tmp_path)
    full = resolve_entry_path(Entry("a/b.txt", EntryKind.FILE), base)
    assert full == os.path.join(base, "a", "b.txt")
