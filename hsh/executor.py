"""Dispatch of command lines to builtins or external programs."""

from __future__ import annotations

import subprocess
from typing import TextIO

from hsh.builtins import ShellState, find_builtin
from hsh.validators import CommandNotFound, resolve_command

_EXEC_FAILURE_STATUS = 1


def _fileno(stream: TextIO) -> int | None:
    """Return the OS-level descriptor of ``stream``, or None if it has none."""
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def execute(args: list[str], state: ShellState) -> bool:
    """Run an external program and record its exit status.

    The command is resolved through ``resolve_command``; a missing command
    is reported on the state's stderr and leaves the exit status as it was.
    Always returns True so that the shell keeps running.
    """
    try:
        executable = resolve_command(
            args[0], state.program_name, state.environ.get("PATH", "")
        )
    except CommandNotFound as exc:
        print(exc, file=state.stderr)
        return True

    state.stdout.flush()
    state.stderr.flush()
    out_fd = _fileno(state.stdout)
    err_fd = _fileno(state.stderr)

    try:
        completed = subprocess.run(
            args,
            executable=executable,
            env=dict(state.environ),
            stdout=subprocess.PIPE if out_fd is None else out_fd,
            stderr=subprocess.PIPE if err_fd is None else err_fd,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as exc:
        print(f"execve fail: {exc.strerror or exc}", file=state.stderr)
        state.exit_status = _EXEC_FAILURE_STATUS
        return True

    if completed.stdout:
        state.stdout.write(completed.stdout)
    if completed.stderr:
        state.stderr.write(completed.stderr)

    # A negative code means the child was killed by a signal: no exit status.
    if completed.returncode >= 0:
        state.exit_status = completed.returncode
    return True


def run_command(args: list[str], state: ShellState) -> bool:
    """Run ``args`` as a builtin if one matches, otherwise as a program.

    Returns False when the shell loop should stop, True otherwise.
    """
    builtin = find_builtin(args[0])
    if builtin is not None:
        return builtin(args, state)
    return execute(args, state)