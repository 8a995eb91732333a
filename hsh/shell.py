"""The read-eval loop of the shell and its command-line entry point."""

from __future__ import annotations

import sys
from typing import TextIO

from hsh.builtins import ShellExit, ShellState
from hsh.executor import run_command
from hsh.tokenizer import tokenize
from hsh.validators import is_blank

PROMPT = "$ "


class Shell:
    """A simple shell reading one command per line from ``stdin``."""

    def __init__(
        self,
        program_name: str = "hsh",
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.stdin = sys.stdin if stdin is None else stdin
        self.state = ShellState(
            program_name=program_name,
            stdout=sys.stdout if stdout is None else stdout,
            stderr=sys.stderr if stderr is None else stderr,
        )

    def _interactive(self) -> bool:
        try:
            return bool(self.stdin.isatty())
        except (AttributeError, ValueError):
            return False

    def handle_line(self, line: str) -> bool:
        """Run one input line; return False when the shell should stop."""
        if is_blank(line):
            return True
        return run_command(tokenize(line), self.state)

    def run(self) -> int:
        """Read and run commands until end of input or exit; return the exit code.

        When input is not a terminal, a blank line also ends the loop.
        """
        keep_going = True
        try:
            while keep_going:
                keep_going = self._interactive()
                if keep_going:
                    self.state.stdout.write(PROMPT)
                    self.state.stdout.flush()
                line = self.stdin.readline()
                if not line:
                    break
                if is_blank(line):
                    continue
                keep_going = self.handle_line(line)
        except ShellExit as exc:
            return exc.code
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start the shell on the process's standard streams."""
    if argv is None:
        argv = sys.argv
    program_name = argv[0] if argv else "hsh"
    return Shell(program_name=program_name).run()


if __name__ == "__main__":
    raise SystemExit(main())