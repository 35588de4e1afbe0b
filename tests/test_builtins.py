import errno
import io
import os

import pytest

from mshell.builtins import (
    Command,
    ShellState,
    builtin_cd,
    builtin_echo,
    builtin_env,
    builtin_exit,
    builtin_export,
    builtin_pwd,
    builtin_unset,
    cd_error_message,
    has_no_newline_flag,
    is_numeric_argument,
    parse_exit_code,
    run_builtin,
)
from mshell.environment import Environment
from mshell.errors import ShellExit, format_complex, format_export_error, format_func_error


@pytest.fixture
def shell(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.chdir(tmp_path)
    start = os.getcwd()
    return ShellState(
        env=Environment.from_strings([f"PWD={start}", "USER=user"]),
        home_dir=str(home),
        username="user",
        hostname="host",
        cwd=start,
        stdout=io.StringIO(),
        stderr=io.StringIO(),
    )


def run(func, shell, *args, prev=False, nxt=False):
    out = io.StringIO()
    status = func(shell, Command(list(args), prev, nxt), out)
    return status, out.getvalue()


@pytest.mark.parametrize(
    "args, expected",
    [
        (["echo", "-n"], True),
        (["echo", "-nnn"], True),
        (["echo", "-nx"], False),
        (["echo", "-"], False),
        (["echo", "hi"], False),
        (["echo"], False),
    ],
)
def test_has_no_newline_flag(args, expected):
    assert has_no_newline_flag(args) is expected


def test_echo_joins_with_newline(shell):
    assert run(builtin_echo, shell, "echo", "a", "b") == (0, "a b\n")


def test_echo_without_arguments(shell):
    assert run(builtin_echo, shell, "echo") == (0, "\n")


def test_echo_skips_all_n_flags(shell):
    assert run(builtin_echo, shell, "echo", "-n", "-nn", "x", "-n") == (0, "x -n")


def test_echo_lone_dash_after_flag_is_skipped(shell):
    assert run(builtin_echo, shell, "echo", "-n", "-", "y")[1] == "y"


def test_echo_invalid_flag_is_text(shell):
    assert run(builtin_echo, shell, "echo", "-nx", "z")[1] == "-nx z\n"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -7", -7),
        ("12abc", 12),
        ("9223372036854775807", 9223372036854775807),
        ("-9223372036854775808", -9223372036854775808),
        ("9223372036854775808", None),
        ("-9223372036854775809", None),
    ],
)
def test_parse_exit_code(text, expected):
    assert parse_exit_code(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("42", True), ("", False), (" 4  ", True), ("4 2", False), ("4a", False), ("-3", True)],
)
def test_is_numeric_argument(text, expected):
    assert is_numeric_argument(text) is expected


def test_exit_without_argument_uses_last_status(shell):
    shell.last_exit = 3
    with pytest.raises(ShellExit) as info:
        run(builtin_exit, shell, "exit")
    assert info.value.code == 3
    assert shell.stdout.getvalue() == "exit\n"


def test_exit_with_code(shell):
    with pytest.raises(ShellExit) as info:
        run(builtin_exit, shell, "exit", "5")
    assert info.value.code == 5


def test_exit_negative_code_wraps(shell):
    with pytest.raises(ShellExit) as info:
        run(builtin_exit, shell, "exit", "-1")
    assert info.value.code == 255


def test_exit_non_numeric(shell):
    with pytest.raises(ShellExit) as info:
        run(builtin_exit, shell, "exit", "abc")
    assert info.value.code == 2
    assert shell.stderr.getvalue() == format_func_error(
        "exit: ", "abc", "numeric argument required"
    )


def test_exit_overflow_is_numeric_error(shell):
    with pytest.raises(ShellExit) as info:
        run(builtin_exit, shell, "exit", "9223372036854775808")
    assert info.value.code == 2


def test_exit_too_many_arguments(shell):
    assert run(builtin_exit, shell, "exit", "1", "2")[0] == 1
    assert shell.stderr.getvalue() == format_complex("too many arguments", "exit: ")


def test_exit_in_pipeline_returns_status(shell):
    assert run(builtin_exit, shell, "exit", "7", nxt=True)[0] == 7
    shell.last_exit = 4
    assert run(builtin_exit, shell, "exit", prev=True)[0] == 4


def test_cd_error_message():
    assert cd_error_message(errno.ENOENT, "x") == format_func_error(
        "cd: ", "x", "No such file or directory"
    )
    assert cd_error_message(None, "x") is None


def test_cd_updates_pwd_and_oldpwd(shell, tmp_path):
    start = shell.env.get("PWD")
    (tmp_path / "sub").mkdir()
    assert run(builtin_cd, shell, "cd", "sub")[0] == 0
    assert shell.env.get("PWD") == os.getcwd()
    assert shell.env.get("OLDPWD") == start
    assert shell.cwd == os.getcwd()
    assert shell.prompt.startswith("user@host:~")


def test_cd_without_argument_goes_home(shell):
    assert run(builtin_cd, shell, "cd")[0] == 0
    assert os.path.samefile(os.getcwd(), shell.home_dir)


def test_cd_tilde_goes_home(shell):
    assert run(builtin_cd, shell, "cd", "~")[0] == 0
    assert os.path.samefile(os.getcwd(), shell.home_dir)


def test_cd_missing_directory(shell):
    before = os.getcwd()
    assert run(builtin_cd, shell, "cd", "nowhere")[0] == 1
    assert os.getcwd() == before
    assert shell.stderr.getvalue() == format_func_error(
        "cd: ", "nowhere", "No such file or directory"
    )


def test_cd_too_many_arguments(shell):
    assert run(builtin_cd, shell, "cd", "a", "b")[0] == 1
    assert shell.stderr.getvalue() == format_func_error("cd", "", "too many arguments")


def test_cd_dash_without_oldpwd(shell):
    assert run(builtin_cd, shell, "cd", "-")[0] == 0
    assert shell.stderr.getvalue() == format_func_error("cd", "", "OLDPWD not set")


def test_cd_dash_returns_to_previous(shell, tmp_path):
    start = os.getcwd()
    (tmp_path / "sub").mkdir()
    run(builtin_cd, shell, "cd", "sub")
    assert run(builtin_cd, shell, "cd", "-")[0] == 0
    assert os.getcwd() == start
    assert shell.stdout.getvalue() == f"{start}\n"


def test_cd_in_pipeline_does_nothing(shell, tmp_path):
    before = os.getcwd()
    (tmp_path / "sub").mkdir()
    assert run(builtin_cd, shell, "cd", "sub", nxt=True)[0] == 0
    assert os.getcwd() == before


def test_pwd(shell):
    assert run(builtin_pwd, shell, "pwd") == (0, f"{shell.cwd}\n")


def test_env_lists_valued_variables(shell):
    shell.env.set("EMPTY", None)
    status, text = run(builtin_env, shell, "env")
    assert status == 0
    assert text == "".join(shell.env.env_lines())
    assert "EMPTY" not in text


def test_export_sets_variable(shell):
    assert run(builtin_export, shell, "export", "FOO=bar", "BARE")[0] == 0
    assert shell.env.get("FOO") == "bar"
    assert "BARE" in shell.env


def test_export_invalid_identifier(shell):
    assert run(builtin_export, shell, "export", "1A=x", "OK=y")[0] == 1
    assert shell.env.get("OK") == "y"
    assert shell.stderr.getvalue() == format_export_error(
        "export: ", "1A=x", "not a valid identifier"
    )


def test_export_without_arguments_lists(shell):
    status, text = run(builtin_export, shell, "export")
    assert status == 0
    assert text == "".join(shell.env.export_lines())


def test_export_in_pipeline_does_not_set(shell):
    run(builtin_export, shell, "export", "FOO=bar", prev=True)
    assert "FOO" not in shell.env


def test_unset_removes(shell):
    assert run(builtin_unset, shell, "unset", "USER", "MISSING")[0] == 0
    assert "USER" not in shell.env


def test_run_builtin_dispatches(shell):
    out = io.StringIO()
    assert run_builtin(shell, Command(["echo", "hi"]), out) == 0
    assert out.getvalue() == "hi\n"


def test_run_builtin_unknown(shell):
    with pytest.raises(ValueError):
        run_builtin(shell, Command(["ls"]), io.StringIO())