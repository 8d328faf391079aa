from __future__ import annotations

"""
Tree Text Input Component.

Collects the raw lines of a tree rendering from a file or a text stream.
Decoding is lenient: undecodable bytes are replaced rather than aborting
the run, since pasted trees often come from mixed-encoding sources.
"""

import logging
import sys
from typing import List, Optional, TextIO

logger = logging.getLogger(__name__)

PASTE_PROMPT = "Paste your tree structure (press Ctrl+D when done):"

# -----------------------------------------------------------------------------
# READING OPERATIONS
# -----------------------------------------------------------------------------

def read_lines(path: str) -> List[str]:
    """
    Read every line of a UTF-8 text file without line terminators.

    Args:
        path: File to read.

    Returns:
        List[str]: The lines, in order.

    Raises:
        OSError: If the file does not exist or cannot be read.
    """
    logger.debug(f"Reading tree from file: {path}")
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return [line.rstrip("\r\n") for line in f]


def read_stream(stream: Optional[TextIO] = None, prompt_stream: Optional[TextIO] = None) -> List[str]:
    """
    Read every line of a text stream (stdin by default).

    When the stream is an interactive terminal a paste prompt is written
    to ``prompt_stream`` (stderr by default) first.
    """
    source = stream if stream is not None else sys.stdin
    if _is_interactive(source):
        print(PASTE_PROMPT, file=prompt_stream or sys.stderr)

    logger.debug("Reading tree from stream...")
    return [line.rstrip("\r\n") for line in source]


def read_input(input_file: Optional[str] = None, stream: Optional[TextIO] = None) -> List[str]:
    """Read from ``input_file`` when given, otherwise from ``stream``/stdin."""
    if input_file:
        return read_lines(input_file)
    return read_stream(stream)


def _is_interactive(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # Closed stream
        return False
