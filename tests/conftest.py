from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation so the 'src' directory is importable without install.
2. Shared tree fixtures: the same logical project rendered in every
   supported indentation style, and the entries it must parse to.
"""

import os
import sys
from typing import Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from treeforge.domain.tree_models import Entry, EntryKind  # noqa: E402

D = EntryKind.DIRECTORY
F = EntryKind.FILE


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def myapp_entries() -> List[Entry]:
    """Expected parse result of every 'myapp' rendering below."""
    return [
        Entry("src", D),
        Entry("src/handlers", D),
        Entry("src/handlers/user.go", F),
        Entry("src/handlers/auth.go", F),
        Entry("src/models", D),
        Entry("src/models/user.go", F),
        Entry("src/middleware", D),
        Entry("src/middleware/logger.go", F),
        Entry("src/main.go", F),
        Entry("tests", D),
        Entry("tests/user_test.go", F),
        Entry("tests/auth_test.go", F),
        Entry("config", D),
        Entry("config/config.yaml", F),
        Entry(".env", F),
        Entry(".gitignore", F),
        Entry("go.mod", F),
        Entry("Dockerfile", F),
        Entry("README.md", F),
    ]


@pytest.fixture
def myapp_renderings() -> Dict[str, List[str]]:
    """The same project drawn with box glyphs, ASCII, 3 spaces and tabs."""
    return {
        "unicode": [
            "myapp/",
            "├─ src/",
            "│  ├─ handlers/",
            "│  │  ├─ user.go",
            "│  │  └─ auth.go",
            "│  ├─ models/",
            "│  │  └─ user.go",
            "│  ├─ middleware/",
            "│  │  └─ logger.go",
            "│  └─ main.go",
            "├─ tests/",
            "│  ├─ user_test.go",
            "│  └─ auth_test.go",
            "├─ config/",
            "│  └─ config.yaml",
            "├─ .env",
            "├─ .gitignore",
            "├─ go.mod",
            "├─ Dockerfile",
            "└─ README.md",
        ],
        "ascii": [
            "myapp/",
            "|-- src/",
            "|   |-- handlers/",
            "|   |   |-- user.go",
            "|   |   `-- auth.go",
            "|   |-- models/",
            "|   |   `-- user.go",
            "|   |-- middleware/",
            "|   |   `-- logger.go",
            "|   `-- main.go",
            "|-- tests/",
            "|   |-- user_test.go",
            "|   `-- auth_test.go",
            "|-- config/",
            "|   `-- config.yaml",
            "|-- .env",
            "|-- .gitignore",
            "|-- go.mod",
            "|-- Dockerfile",
            "`-- README.md",
        ],
        "spaces": [
            "myapp/",
            "   src/",
            "      handlers/",
            "         user.go",
            "         auth.go",
            "      models/",
            "         user.go",
            "      middleware/",
            "         logger.go",
            "      main.go",
            "   tests/",
            "      user_test.go",
            "      auth_test.go",
            "   config/",
            "      config.yaml",
            "   .env",
            "   .gitignore",
            "   go.mod",
            "   Dockerfile",
            "   README.md",
        ],
        "tabs": [
            "myapp/",
            "\tsrc/",
            "\t\thandlers/",
            "\t\t\tuser.go",
            "\t\t\tauth.go",
            "\t\tmodels/",
            "\t\t\tuser.go",
            "\t\tmiddleware/",
            "\t\t\tlogger.go",
            "\t\tmain.go",
            "\ttests/",
            "\t\tuser_test.go",
            "\t\tauth_test.go",
            "\tconfig/",
            "\t\tconfig.yaml",
            "\t.env",
            "\t.gitignore",
            "\tgo.mod",
            "\tDockerfile",
            "\tREADME.md",
        ],
    }
