from __future__ import annotations

"""
Domain Error Taxonomy.

Failure types raised by the tree-text parser and the scaffolding service.
Both parser errors are fatal: no partial entry list is ever returned.
"""


class TreeParseError(ValueError):
    """Base class for every failure raised while parsing tree text."""


class EmptyInputError(TreeParseError):
    """The line sequence contained no lines at all."""

    def __init__(self, message: str = "empty tree") -> None:
        super().__init__(message)


class InvalidRootError(TreeParseError):
    """The root declaration is empty once whitespace and a trailing '/' are removed."""

    def __init__(self, message: str = "invalid root line") -> None:
        super().__init__(message)


class ScaffoldError(OSError):
    """
    Raised when an entry cannot be materialized on disk.

    Attributes:
        path: Filesystem path that triggered the failure.
    """

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        super().__init__(message)
