# hsh

A small command interpreter. It reads one command per line from standard
input, splits the line on spaces, tabs and newlines, and runs either a builtin
or a program found on `PATH`.

## Installation

```
pip install .
```

## Usage

Start it interactively:

```
hsh
$ ls -l
$ cd /tmp
$ exit 0
```

Or feed it commands on standard input:

```
echo "env" | hsh
```

When standard input is a terminal, the shell prints the prompt `$ ` before
each line and keeps reading until end of input or `exit`. Lines holding only
spaces, tabs and newlines are skipped.

When standard input is not a terminal, no prompt is printed. The shell runs
commands one after another and stops at end of input. A blank line also
stops it.

The `hsh` command exits with the code given to `exit`. It exits with 0 when
input runs out.

## Builtins

| Command            | Effect |
|--------------------|--------|
| `cd [DIR]`         | Change directory. With no argument or with `~` it goes to `HOME`, and with `-` it goes to `OLDPWD`. It then sets `OLDPWD` to the previous directory and `PWD` to the current one, even when the change failed. A failure prints `cd: error: <reason>` on standard error. |
| `env`              | Print every environment variable as `KEY=VALUE`. If the environment is empty, it prints `The builtin env is empty`. |
| `setenv KEY VALUE` | Add or overwrite an environment variable. A key that is empty or contains `=` is ignored. Any other number of arguments prints a usage message. |
| `unsetenv KEY`     | Remove an environment variable. Any other number of arguments prints a usage message. |
| `exit [STATUS]`    | Leave the shell. With no argument, the exit code is the status of the last program run. The argument is read like C `atoi`: a leading integer, or 0. With more than one argument, it prints `exit: too many arguments` and the shell stops with code 0. |

A command that starts with `/` or `.` is run as a path. Any other command is
looked up in each directory of `PATH` in turn. If the command is not found,
the shell prints `<program name>: <command>: No such file or directory` on
standard error and keeps the previous exit status. When a program ends, its
exit status is recorded. A program killed by a signal leaves the status
unchanged.

## Using it from Python

```python
import sys
from hsh.shell import Shell

shell = Shell("hsh", sys.stdin, sys.stdout, sys.stderr)
shell.handle_line("setenv GREETING hello")   # True: keep going
code = shell.run()                            # read and run until the end
```

`Shell.handle_line` returns `False` when the shell should stop. The `exit`
builtin raises `hsh.builtins.ShellExit`, which carries the code in `.code`.
`Shell.run` catches it and returns that code.

Lower-level pieces:

- `hsh.tokenizer.tokenize(line)` and `hsh.tokenizer.split_path(path)` split
  command lines and `PATH` strings.
- `hsh.validators.is_blank(line)` checks for whitespace-only input.
  `hsh.validators.resolve_command(command, program_name, path)` returns the
  executable path or raises `CommandNotFound`.
- `hsh.builtins.ShellState` holds the program name, the last exit status, the
  environment mapping and the output streams. `hsh.builtins.find_builtin(name)`
  looks up a builtin.
- `hsh.executor.run_command(args, state)` runs a builtin or a program.
  `hsh.executor.execute(args, state)` always runs a program.

## What it does not do

There are no pipes, redirections, quoting, variable expansion, comments,
command separators or scripts given as file arguments. Every line is one
command and its arguments.

## Running the tests

```
pip install ".[test]"
pytest
```