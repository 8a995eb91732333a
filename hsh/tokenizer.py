"""Splitting of command lines and PATH strings into tokens."""

from __future__ import annotations

import re

DELIMITERS = " \t\n"
PATH_SEPARATOR = ":"

_WORD_SPLIT = re.compile(f"[{re.escape(DELIMITERS)}]+")


def tokenize(line: str) -> list[str]:
    """Split a command line on spaces, tabs and newlines, dropping empty tokens."""
    return [token for token in _WORD_SPLIT.split(line) if token]


def split_path(path: str) -> list[str]:
    """Split a PATH-style string on ':' into its non-empty directories."""
    return [directory for directory in path.split(PATH_SEPARATOR) if directory]