"""Built-in commands of the shell and the state they act on."""

from __future__ import annotations

import errno
import os
import re
import sys
from collections.abc import Callable, MutableMapping
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class ShellState:
    """Mutable state shared by the shell loop, the builtins and the executor."""

    program_name: str = "hsh"
    exit_status: int = 0
    environ: MutableMapping[str, str] = field(default_factory=lambda: os.environ)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)


class ShellExit(Exception):
    """Raised by the exit builtin to end the shell with the given code."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


Builtin = Callable[[list[str], ShellState], bool]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def builtin_cd(args: list[str], state: ShellState) -> bool:
    """Change directory; no argument or '~' goes HOME, '-' goes to OLDPWD."""
    previous = os.getcwd()
    if len(args) < 2 or args[1] == "~":
        target = state.environ.get("HOME")
    elif args[1] == "-":
        target = state.environ.get("OLDPWD")
    else:
        target = args[1]

    try:
        if target is None:
            raise OSError(errno.EFAULT, os.strerror(errno.EFAULT))
        os.chdir(target)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        print(f"cd: error: {reason}", file=state.stderr)

    state.environ["OLDPWD"] = previous
    state.environ["PWD"] = os.getcwd()
    return True


def builtin_setenv(args: list[str], state: ShellState) -> bool:
    """Set an environment variable: setenv KEY VALUE."""
    if len(args) == 3:
        name, value = args[1], args[2]
        if name and "=" not in name:
            state.environ[name] = value
    else:
        print('incorrect format, use: "setenv [KEY] [VALUE]"', file=state.stderr)
    return True


def builtin_unsetenv(args: list[str], state: ShellState) -> bool:
    """Remove an environment variable: unsetenv KEY."""
    if len(args) == 2:
        state.environ.pop(args[1], None)
    else:
        print('incorrect format, use: "unsetenv [KEY]"', file=state.stderr)
    return True


def builtin_env(args: list[str], state: ShellState) -> bool:
    """Print every environment variable as KEY=VALUE."""
    if not state.environ:
        print("The builtin env is empty", file=state.stdout)
        return True
    for name, value in state.environ.items():
        print(f"{name}={value}", file=state.stdout)
    return True


def builtin_exit(args: list[str], state: ShellState) -> bool:
    """Leave the shell with the last status or the given code.

    With more than one argument an error is printed and False is returned,
    which tells the shell loop to stop.
    """
    if len(args) < 2:
        raise ShellExit(state.exit_status)
    if len(args) > 2:
        print("exit: too many arguments", file=state.stderr)
        return False
    raise ShellExit(_atoi(args[1]))


_BUILTINS: dict[str, Builtin] = {
    "exit": builtin_exit,
    "env": builtin_env,
    "cd": builtin_cd,
    "setenv": builtin_setenv,
    "unsetenv": builtin_unsetenv,
}


def find_builtin(name: str) -> Builtin | None:
    """Return the builtin called ``name``, or None if there is none."""
    return _BUILTINS.get(name)