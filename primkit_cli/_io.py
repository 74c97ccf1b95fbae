"""
Input helpers shared by CLI commands.
"""

import sys
from typing import Any

from primkit import parse_json


def read_text(path: str) -> str:
    """Read a file, or stdin when path is "-"."""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_json(path: str) -> Any:
    """
    Read and parse a JSON record or array.

    Raises:
        FileNotFoundError: If the file does not exist
        PrimkitError: If the content is not a JSON record or array
    """
    return parse_json(read_text(path))
