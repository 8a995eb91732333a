"""Input checks and resolution of command names to executable paths."""

from __future__ import annotations

import os

from hsh.tokenizer import split_path

_BLANK_CHARS = " \t\n"


class CommandNotFound(Exception):
    """Raised when a command cannot be found on disk or on the PATH."""

    def __init__(self, program_name: str, command: str) -> None:
        self.program_name = program_name
        self.command = command
        super().__init__(f"{program_name}: {command}: No such file or directory")


def is_blank(line: str) -> bool:
    """Return True if the line holds nothing but spaces, tabs and newlines."""
    return line.lstrip(_BLANK_CHARS) == ""


def resolve_command(command: str, program_name: str, path: str | None = None) -> str:
    """Return the path of the executable for ``command``.

    Names starting with '/' or '.' are taken as paths and only checked for
    existence; other names are looked up in each directory of ``path``
    (the PATH environment variable when not given).
    """
    if command.startswith(("/", ".")):
        if os.path.exists(command):
            return command
        raise CommandNotFound(program_name, command)

    if path is None:
        path = os.environ.get("PATH", "")

    for directory in split_path(path):
        candidate = f"{directory}/{command}"
        if os.path.exists(candidate):
            return candidate
    raise CommandNotFound(program_name, command)