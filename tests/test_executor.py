import io
import os
import stat
import sys

import pytest

from hsh.builtins import ShellExit, ShellState
from hsh.executor import execute, run_command


def make_state(**environ_overrides):
    environ = dict(os.environ)
    environ.update(environ_overrides)
    return ShellState(
        program_name="hsh",
        environ=environ,
        stdout=io.StringIO(),
        stderr=io.StringIO(),
    )


def make_script(directory, name, body):
    script = directory / name
    script.write_text(f"#!{sys.executable}\n{body}\n")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


def test_execute_records_exit_status():
    state = make_state()
    result = execute([sys.executable, "-c", "import sys; sys.exit(3)"], state)
    assert result is True
    assert state.exit_status == 3


def test_execute_captures_output_into_state_stdout():
    state = make_state()
    execute([sys.executable, "-c", "print('hi')"], state)
    assert state.stdout.getvalue() == "hi\n"
    assert state.exit_status == 0


def test_execute_captures_stderr():
    state = make_state()
    execute([sys.executable, "-c", "import sys; sys.stderr.write('oops')"], state)
    assert state.stderr.getvalue() == "oops"


def test_execute_missing_absolute_path_keeps_status():
    state = make_state()
    state.exit_status = 9
    result = execute(["/nonexistent/definitely/missing"], state)
    assert result is True
    assert state.exit_status == 9
    assert "No such file or directory" in state.stderr.getvalue()
    assert "/nonexistent/definitely/missing" in state.stderr.getvalue()


def test_execute_missing_on_path_reports_error(tmp_path):
    state = make_state(PATH=str(tmp_path))
    result = execute(["no_such_command_here"], state)
    assert result is True
    assert "no_such_command_here: No such file or directory" in state.stderr.getvalue()


def test_execute_looks_up_path(tmp_path):
    make_script(tmp_path, "fivescript", "import sys; sys.exit(5)")
    state = make_state(PATH=str(tmp_path))
    execute(["fivescript"], state)
    assert state.exit_status == 5


def test_execute_passes_arguments_and_environment(tmp_path):
    make_script(
        tmp_path,
        "echoargs",
        "import os, sys; print(sys.argv[1:], os.environ.get('HSH_TEST_VAR'))",
    )
    state = make_state(PATH=str(tmp_path), HSH_TEST_VAR="value")
    execute(["echoargs", "a", "b"], state)
    assert state.stdout.getvalue() == "['a', 'b'] value\n"


def test_execute_non_executable_file_fails(tmp_path):
    target = tmp_path / "plain"
    target.write_text("not a program\n")
    target.chmod(0o644)
    state = make_state()
    result = execute([str(target)], state)
    assert result is True
    assert state.exit_status == 1
    assert "execve fail" in state.stderr.getvalue()


def test_run_command_dispatches_setenv():
    state = make_state()
    assert run_command(["setenv", "HSH_KEY", "bar"], state) is True
    assert state.environ["HSH_KEY"] == "bar"


def test_run_command_dispatches_unsetenv():
    state = make_state(HSH_KEY="x")
    run_command(["unsetenv", "HSH_KEY"], state)
    assert "HSH_KEY" not in state.environ


def test_run_command_exit_raises():
    state = make_state()
    with pytest.raises(ShellExit) as info:
        run_command(["exit", "4"], state)
    assert info.value.code == 4


def test_run_command_exit_too_many_arguments_stops():
    state = make_state()
    assert run_command(["exit", "1", "2"], state) is False
    assert "exit: too many arguments" in state.stderr.getvalue()


def test_run_command_falls_back_to_program():
    state = make_state()
    run_command([sys.executable, "-c", "import sys; sys.exit(2)"], state)
    assert state.exit_status == 2