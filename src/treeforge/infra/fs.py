from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation, directory creation and file
materialization utilities. Acts as an abstraction over the 'os' module to
ensure uniform behavior across Windows and Unix-like systems.
"""

import os
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TreeForge"
UNIX_APP_DIR_NAME = ".treeforge"
DIR_MODE = 0o755

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/TreeForge
    - Linux/Mac: ~/.treeforge

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    # Idempotent directory creation
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def join_relative(base_path: str, rel_path: str) -> str:
    """
    Join a '/'-separated relative path onto a native base path.

    Args:
        base_path: Native filesystem directory.
        rel_path: Relative path using '/' separators.

    Returns:
        str: Native path of the target.
    """
    parts = [p for p in rel_path.split("/") if p]
    return os.path.join(base_path, *parts)


def is_within(base_path: str, target: str) -> bool:
    """Return True if ``target`` resolves inside (or equal to) ``base_path``."""
    base = os.path.abspath(base_path)
    full = os.path.abspath(target)
    try:
        return os.path.commonpath([base, full]) == base
    except ValueError:
        # Different drives on Windows
        return False

# -----------------------------------------------------------------------------
# FILESYSTEM MUTATION API
# -----------------------------------------------------------------------------

def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, mode=DIR_MODE, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)


def touch_empty(path: str) -> None:
    """
    Create (or truncate) a file so that it exists and is empty.

    Raises:
        OSError: If the file cannot be opened for writing.
    """
    with open(path, "w", encoding="utf-8"):
        pass
